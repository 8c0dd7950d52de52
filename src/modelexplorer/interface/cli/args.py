from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema and translates the parsed
namespace into configuration overrides.
"""

import argparse
from typing import Any, Dict

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the modelexplorer CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="modelexplorer",
        description="Explore model trees and convert view styles into diagram styles.",
    )

    # --- Sources ---
    p.add_argument(
        "-m", "--model",
        dest="model_path",
        default=None,
        help="Model document (JSON file or http(s) URL).",
    )
    p.add_argument(
        "-v", "--view",
        dest="view_path",
        default=None,
        help="View document holding node and edge descriptions (JSON file or URL).",
    )

    # --- Explorer ---
    p.add_argument(
        "-e", "--expand",
        dest="expand_item_id",
        default=None,
        help="Compute the items to expand below this tree item id.",
    )
    p.add_argument(
        "--tree-id",
        dest="tree_id",
        default=None,
        help="Identifier of the explorer tree.",
    )
    p.add_argument(
        "--print-tree",
        action="store_true",
        help="Print the explorer tree once expanded.",
    )

    # --- Styles ---
    p.add_argument(
        "--node-style",
        dest="node_style",
        default=None,
        help="Convert the style of the node description with this name.",
    )
    p.add_argument(
        "--edge-style",
        dest="edge_style",
        default=None,
        help="Convert the style of the edge description with this name.",
    )
    p.add_argument(
        "--all-styles",
        action="store_true",
        help="Convert the styles of every description of the view.",
    )
    p.add_argument(
        "--context-id",
        dest="editing_context_id",
        default=None,
        help="Editing context id used to build custom image URLs.",
    )

    # --- Configuration and Diagnostic Tools ---
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore the saved configuration.",
    )
    p.add_argument(
        "--save-config",
        action="store_true",
        help="Remember the resolved sources and options for the next run.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the resolved configuration and exit.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write logs to this file.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )

    # --- Format Selection ---
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print results as JSON.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    overrides["model_path"] = args.model_path
    overrides["view_path"] = args.view_path
    overrides["tree_id"] = args.tree_id
    overrides["editing_context_id"] = args.editing_context_id

    if args.print_tree:
        overrides["print_tree"] = True
    if args.debug:
        overrides["log_level"] = "DEBUG"

    return overrides


def has_requested_action(args: argparse.Namespace) -> bool:
    """Tell whether the arguments ask for an explorer or style computation."""
    return bool(args.expand_item_id or args.node_style or args.edge_style or args.all_styles)
