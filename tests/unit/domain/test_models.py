from __future__ import annotations

"""
Unit tests for Domain Models.

Verifies:
1. Immutability of frozen DTOs.
2. Parent links between node descriptions.
3. Default values in domain objects.
4. JSON friendliness of the diagram enums.
"""

import dataclasses
import json

import pytest

from modelexplorer.domain import diagram_models as diagram
from modelexplorer.domain.errors import MissingContextError, ModelLoadError
from modelexplorer.domain.tree_models import ExpandAllTreePathSuccessPayload, TreePath
from modelexplorer.domain.view_models import NodeDescription, NodeStyleDescription, ViewModel


def test_tree_path_defaults_and_immutability():
    path = TreePath()
    assert path.tree_item_ids == []
    assert path.max_depth == 0

    with pytest.raises(dataclasses.FrozenInstanceError):
        path.max_depth = 3  # type: ignore[misc]


def test_success_payload_serializes_to_plain_dict():
    payload = ExpandAllTreePathSuccessPayload(id="req", tree_path=TreePath(["a", "b"], 2))

    assert dataclasses.asdict(payload) == {"id": "req", "tree_path": {"tree_item_ids": ["a", "b"], "max_depth": 2}}


def test_node_description_links_children_and_style():
    child = NodeDescription(name="Child")
    parent = NodeDescription(name="Parent", child_node_descriptions=[child])
    late = NodeDescription(name="Late")
    parent.add_child(late)

    assert child.parent is parent
    assert late.parent is parent
    assert parent.style.container is parent
    assert parent.parent is None


def test_view_model_lookup_prefers_first_match():
    first = NodeDescription(name="Dup", style=NodeStyleDescription(color="red"))
    nested = NodeDescription(name="Dup", style=NodeStyleDescription(color="blue"))
    view_model = ViewModel(node_descriptions=[first, NodeDescription(name="Holder", child_node_descriptions=[nested])])

    assert view_model.find_node_description("Dup") is first
    assert view_model.find_node_description("Nope") is None


def test_diagram_styles_are_json_serializable():
    style = diagram.EdgeStyle(
        color="black",
        line_style=diagram.LineStyle.DASH,
        size=1,
        source_arrow=diagram.ArrowStyle.NONE,
        target_arrow=diagram.ArrowStyle.INPUT_CLOSED_ARROW,
    )

    encoded = json.loads(json.dumps(dataclasses.asdict(style)))

    assert encoded["line_style"] == "Dash"
    assert encoded["target_arrow"] == "InputClosedArrow"


def test_error_kinds():
    assert MissingContextError("x").kind == "MissingContext"
    assert ModelLoadError("y").kind == "ModelLoad"
    assert str(ModelLoadError("broken")) == "broken"
