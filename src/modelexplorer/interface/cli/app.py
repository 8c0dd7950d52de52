from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: merging of configuration sources (defaults,
persistent storage and CLI overrides), initialization of logging, loading
of the model and view documents, execution of the expand-all and style
conversions, and result rendering.
"""

import json
import sys
import uuid
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from modelexplorer.core.analysis.tree_renderer import render_explorer_tree
from modelexplorer.core.services.editing_context import build_explorer_services
from modelexplorer.core.services.expand_all import ExpandAllTreePathProvider
from modelexplorer.core.services.model_loader import (
    load_editing_context,
    load_view_model,
    read_json_source,
)
from modelexplorer.core.services.styles import StylesFactory
from modelexplorer.core.validation import validate_config
from modelexplorer.domain.config import get_default_config, load_config, save_config
from modelexplorer.domain.errors import ModelExplorerError
from modelexplorer.domain.tree_models import (
    EditingContext,
    ErrorPayload,
    ExpandAllTreePathInput,
    Tree,
)
from modelexplorer.domain.view_models import EdgeDescription, NodeDescription, ViewModel
from modelexplorer.infra.logging import LoggingConfig, configure_logging, get_logger
from modelexplorer.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 failure, 2 missing input,
             130 interrupted).
    """
    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Resolve configuration (Default vs Persistent state) and overrides
    base_conf = get_default_config() if args.use_defaults else load_config()
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    clean_conf, warnings = validate_config(raw_conf, strict=False)

    # 3. Logging bootstrap (console stderr, optional file)
    configure_logging(LoggingConfig(level=clean_conf["log_level"], console=True, log_file=args.log_file))
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return 0

    if args.save_config:
        save_config(clean_conf)
        logger.info("Configuration saved.")

    if not cli_args.has_requested_action(args):
        if args.save_config:
            return 0
        parser.print_usage(sys.stderr)
        print("ERROR: nothing to do, use --expand, --node-style, --edge-style or --all-styles.", file=sys.stderr)
        return 2

    # 4. Execution phase
    try:
        return _run(args, clean_conf)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        return 130
    except ModelExplorerError as e:
        logger.error(f"{e.kind}: {e}")
        print(f"ERROR: {e}", file=sys.stderr)
        return 1


def _run(args: Any, conf: Dict[str, Any]) -> int:
    report: Dict[str, Any] = {}

    editing_context: Optional[EditingContext] = None
    if args.expand_item_id or conf["model_path"]:
        editing_context = _load_editing_context(conf["model_path"])
        if editing_context is None:
            return 2

    # 4a. Expand all
    if args.expand_item_id:
        expansion = _expand(editing_context, conf, args.expand_item_id)
        if expansion is None:
            return 1
        report["expansion"] = expansion

    # 4b. Style conversion
    if args.node_style or args.edge_style or args.all_styles:
        view_model = _load_view_model(conf["view_path"])
        if view_model is None:
            return 2
        context_id = conf["editing_context_id"] or (editing_context.id if editing_context else "")
        styles = _convert_styles(view_model, args, context_id or None)
        if styles is None:
            return 1
        report.update(styles)

    # 5. Output rendering phase
    if args.json_output:
        print(json.dumps(report, ensure_ascii=False, indent=2))
    else:
        _print_human_summary(report)
    return 0

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow merge of known, non-None override values into the base.

    Args:
        base: The primary configuration dictionary.
        overrides: New values to inject.

    Returns:
        Dict[str, Any]: The merged configuration state.
    """
    out = dict(base)
    keys_to_merge = [
        "model_path", "view_path", "tree_id", "editing_context_id",
        "print_tree", "log_level",
    ]
    for k in keys_to_merge:
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# ACTIONS
# -----------------------------------------------------------------------------

def _load_editing_context(source: str) -> Optional[EditingContext]:
    if not source:
        print("ERROR: a model document is required (--model).", file=sys.stderr)
        return None
    data = read_json_source(source)
    if data is None:
        print(f"ERROR: cannot read model document '{source}'.", file=sys.stderr)
        return None
    return load_editing_context(data)


def _load_view_model(source: str) -> Optional[ViewModel]:
    if not source:
        print("ERROR: a view document is required (--view).", file=sys.stderr)
        return None
    data = read_json_source(source)
    if data is None:
        print(f"ERROR: cannot read view document '{source}'.", file=sys.stderr)
        return None
    return load_view_model(data)


def _expand(editing_context: EditingContext, conf: Dict[str, Any], tree_item_id: str) -> Optional[Dict[str, Any]]:
    services = build_explorer_services(editing_context)
    provider = ExpandAllTreePathProvider(
        services.identity_service,
        services.content_service,
        services.navigation_service,
        services.representation_description_search_service,
        services.representation_data_search_service,
    )
    tree = Tree(id=conf["tree_id"], description_id=conf["tree_description_id"])
    request = ExpandAllTreePathInput(id=str(uuid.uuid4()), tree_id=tree.id, tree_item_id=tree_item_id)

    logger.info(f"Expanding tree '{tree.id}' from item '{tree_item_id}'")
    payload = provider.handle(editing_context, tree, request)
    if isinstance(payload, ErrorPayload):
        print(f"ERROR: {payload.message}", file=sys.stderr)
        return None

    result: Dict[str, Any] = {
        "treeItemId": tree_item_id,
        "treeItemIds": payload.tree_path.tree_item_ids,
        "maxDepth": payload.tree_path.max_depth,
    }
    if conf["print_tree"]:
        result["tree"] = render_explorer_tree(editing_context, payload.tree_path.tree_item_ids)
    return result


def _convert_styles(view_model: ViewModel, args: Any, context_id: Optional[str]) -> Optional[Dict[str, Any]]:
    node_descriptions: List[NodeDescription] = []
    edge_descriptions: List[EdgeDescription] = []

    if args.all_styles:
        node_descriptions = view_model.all_node_descriptions()
        edge_descriptions = list(view_model.edge_descriptions)

    if args.node_style:
        node_description = view_model.find_node_description(args.node_style)
        if node_description is None:
            print(f"ERROR: unknown node description '{args.node_style}'.", file=sys.stderr)
            return None
        node_descriptions = [node_description]

    if args.edge_style:
        edge_description = view_model.find_edge_description(args.edge_style)
        if edge_description is None:
            print(f"ERROR: unknown edge description '{args.edge_style}'.", file=sys.stderr)
            return None
        edge_descriptions = [edge_description]

    factory = StylesFactory()
    result: Dict[str, Any] = {}
    if node_descriptions:
        result["nodeStyles"] = [
            {
                "name": d.name,
                "type": factory.get_node_type(d.style),
                "kind": type(style).__name__,
                "style": asdict(style),
            }
            for d in node_descriptions
            for style in [factory.create_node_style(d.style, context_id)]
        ]
    if edge_descriptions:
        result["edgeStyles"] = [
            {"name": d.name, "style": asdict(factory.create_edge_style(d.style))}
            for d in edge_descriptions
        ]
    return result

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_summary(report: Dict[str, Any]) -> None:
    """
    Format and print the computation results to the standard output.

    Args:
        report: Results keyed by section (expansion, nodeStyles, edgeStyles).
    """
    expansion = report.get("expansion")
    if expansion:
        print(f"Expand all from: {expansion['treeItemId']}")
        print(f"Items to expand: {len(expansion['treeItemIds'])}")
        for item_id in expansion["treeItemIds"]:
            print(f"  - {item_id}")
        print(f"Max depth: {expansion['maxDepth']}")
        if expansion.get("tree"):
            print("")
            print("\n".join(expansion["tree"]))

    for entry in report.get("nodeStyles", []):
        print(f"Node '{entry['name']}' ({entry['type']}): {entry['kind']}")
        for key, value in entry["style"].items():
            print(f"  {key}: {_format_value(value)}")

    for entry in report.get("edgeStyles", []):
        print(f"Edge '{entry['name']}': EdgeStyle")
        for key, value in entry["style"].items():
            print(f"  {key}: {_format_value(value)}")


def _format_value(value: Any) -> str:
    return str(getattr(value, "value", value))

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
