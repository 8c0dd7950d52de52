from __future__ import annotations

"""
Model and View Document Loader.

Turns parsed JSON documents into editing contexts and view models. Sources
may be local files or http(s) URLs.

Model document layout:
    {"id": "...", "documents": [{"id", "name", "contents": [element...]}],
     "representations": [{"id", "targetObjectId", "label", "kind"}]}
    element: {"id", "label", "kind", "children": [element...]}

View document layout:
    {"nodeDescriptions": [{"name", "style": {...}, "childrenDescriptions": [...]}],
     "edgeDescriptions": [{"name", "style": {...}}]}
"""

import logging
from enum import Enum
from typing import Any, Dict, List, Optional, Type, TypeVar

from modelexplorer.domain.errors import ModelLoadError
from modelexplorer.domain.tree_models import (
    Document,
    EditingContext,
    ModelElement,
    RepresentationMetadata,
)
from modelexplorer.domain.view_models import (
    ArrowStyle,
    EdgeDescription,
    EdgeStyleDescription,
    LineStyle,
    NodeDescription,
    NodeStyleDescription,
    ViewModel,
)
from modelexplorer.infra import network
from modelexplorer.infra.fs import read_json_file

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def read_json_source(source: str) -> Optional[Dict[str, Any]]:
    """
    Read a JSON document from a local path or an http(s) URL.

    Args:
        source: File path or URL.

    Returns:
        Optional[Dict[str, Any]]: Parsed document, None if it cannot be read.
    """
    if network.is_remote_source(source):
        return network.fetch_remote_document(source.strip())
    return read_json_file(source)


def load_editing_context(data: Dict[str, Any]) -> EditingContext:
    """
    Build an editing context from a parsed model document.

    Args:
        data: Parsed model document.

    Returns:
        EditingContext: The in-memory workspace.

    Raises:
        ModelLoadError: The document does not follow the expected layout.
    """
    if not isinstance(data, dict):
        raise ModelLoadError(f"Model document must be an object, received {type(data).__name__}.")

    documents = [_parse_document(d) for d in _as_list(data, "documents")]
    representations = [_parse_representation(r) for r in _as_list(data, "representations")]

    context_id = data.get("id")
    if context_id is None:
        context_id = documents[0].id if documents else ""
    editing_context = EditingContext(
        id=str(context_id),
        documents=documents,
        representations=representations,
    )
    logger.info(
        f"Loaded editing context '{editing_context.id}' "
        f"({len(documents)} documents, {len(representations)} representations)"
    )
    return editing_context


def load_view_model(data: Dict[str, Any]) -> ViewModel:
    """
    Build a view model from a parsed view document.

    Args:
        data: Parsed view document.

    Returns:
        ViewModel: Node and edge descriptions with parent links set.

    Raises:
        ModelLoadError: The document does not follow the expected layout.
    """
    if not isinstance(data, dict):
        raise ModelLoadError(f"View document must be an object, received {type(data).__name__}.")

    view_model = ViewModel(
        node_descriptions=[_parse_node_description(d) for d in _as_list(data, "nodeDescriptions")],
        edge_descriptions=[_parse_edge_description(d) for d in _as_list(data, "edgeDescriptions")],
    )
    logger.info(
        f"Loaded view model ({len(view_model.all_node_descriptions())} node descriptions, "
        f"{len(view_model.edge_descriptions)} edge descriptions)"
    )
    return view_model


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: MODEL
# -----------------------------------------------------------------------------

def _parse_document(data: Any) -> Document:
    obj = _as_object(data, "document")
    return Document(
        id=_required_str(obj, "id", "document"),
        name=str(obj.get("name", "")),
        contents=[_parse_element(e) for e in _as_list(obj, "contents")],
    )


def _parse_element(data: Any) -> ModelElement:
    obj = _as_object(data, "element")
    return ModelElement(
        id=_required_str(obj, "id", "element"),
        label=str(obj.get("label", "")),
        kind=str(obj.get("kind", "")),
        children=[_parse_element(c) for c in _as_list(obj, "children")],
    )


def _parse_representation(data: Any) -> RepresentationMetadata:
    obj = _as_object(data, "representation")
    return RepresentationMetadata(
        id=_required_str(obj, "id", "representation"),
        target_object_id=_required_str(obj, "targetObjectId", "representation"),
        label=str(obj.get("label", "")),
        kind=str(obj.get("kind", "")),
    )


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: VIEW
# -----------------------------------------------------------------------------

def _parse_node_description(data: Any) -> NodeDescription:
    obj = _as_object(data, "node description")
    return NodeDescription(
        name=_required_str(obj, "name", "node description"),
        style=_parse_node_style(obj.get("style") or {}),
        child_node_descriptions=[_parse_node_description(c) for c in _as_list(obj, "childrenDescriptions")],
    )


def _parse_node_style(data: Any) -> NodeStyleDescription:
    obj = _as_object(data, "node style")
    defaults = NodeStyleDescription()
    return NodeStyleDescription(
        color=_optional_str(obj, "color"),
        border_color=_optional_str(obj, "borderColor"),
        border_size=_as_int(obj, "borderSize", defaults.border_size),
        border_radius=_as_int(obj, "borderRadius", defaults.border_radius),
        border_line_style=_as_enum(obj, "borderLineStyle", LineStyle, defaults.border_line_style),
        list_mode=bool(obj.get("listMode", False)),
        shape=_optional_str(obj, "shape"),
        label_color=_optional_str(obj, "labelColor") or defaults.label_color,
        font_size=_as_int(obj, "fontSize", defaults.font_size),
        bold=bool(obj.get("bold", False)),
        italic=bool(obj.get("italic", False)),
        underline=bool(obj.get("underline", False)),
        strike_through=bool(obj.get("strikeThrough", False)),
    )


def _parse_edge_description(data: Any) -> EdgeDescription:
    obj = _as_object(data, "edge description")
    return EdgeDescription(
        name=_required_str(obj, "name", "edge description"),
        style=_parse_edge_style(obj.get("style") or {}),
    )


def _parse_edge_style(data: Any) -> EdgeStyleDescription:
    obj = _as_object(data, "edge style")
    defaults = EdgeStyleDescription()
    return EdgeStyleDescription(
        color=_optional_str(obj, "color"),
        line_style=_as_enum(obj, "lineStyle", LineStyle, defaults.line_style),
        edge_width=_as_int(obj, "edgeWidth", defaults.edge_width),
        source_arrow_style=_as_enum(obj, "sourceArrowStyle", ArrowStyle, defaults.source_arrow_style),
        target_arrow_style=_as_enum(obj, "targetArrowStyle", ArrowStyle, defaults.target_arrow_style),
        font_size=_as_int(obj, "fontSize", defaults.font_size),
        bold=bool(obj.get("bold", False)),
        italic=bool(obj.get("italic", False)),
        underline=bool(obj.get("underline", False)),
        strike_through=bool(obj.get("strikeThrough", False)),
    )


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE CHECKS
# -----------------------------------------------------------------------------

def _as_object(value: Any, what: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise ModelLoadError(f"Invalid {what}: expected object, received {type(value).__name__}.")
    return value


def _as_list(obj: Dict[str, Any], key: str) -> List[Any]:
    value = obj.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ModelLoadError(f"Invalid field '{key}': expected list, received {type(value).__name__}.")
    return value


def _required_str(obj: Dict[str, Any], key: str, what: str) -> str:
    value = obj.get(key)
    if not isinstance(value, str) or not value.strip():
        raise ModelLoadError(f"Invalid {what}: missing or blank '{key}'.")
    return value


def _optional_str(obj: Dict[str, Any], key: str) -> Optional[str]:
    value = obj.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ModelLoadError(f"Invalid field '{key}': expected str, received {type(value).__name__}.")
    return value


def _as_int(obj: Dict[str, Any], key: str, fallback: int) -> int:
    value = obj.get(key)
    if value is None:
        return fallback
    if isinstance(value, bool) or not isinstance(value, int):
        raise ModelLoadError(f"Invalid field '{key}': expected int, received {type(value).__name__}.")
    return value


def _as_enum(obj: Dict[str, Any], key: str, enum_type: Type[E], fallback: E) -> E:
    value = obj.get(key)
    if value is None:
        return fallback
    try:
        return enum_type(value)
    except ValueError:
        allowed = ", ".join(member.value for member in enum_type)
        raise ModelLoadError(f"Invalid field '{key}': '{value}' is not one of {allowed}.") from None
