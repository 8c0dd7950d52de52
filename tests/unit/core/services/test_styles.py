from __future__ import annotations

"""
Unit tests for the Diagram Styles Factory.

Verifies:
1. The node style decision table (list mode, list child, image, rectangle).
2. Default colors and attribute copies.
3. Node type classification.
4. Edge and label style conversion.
5. The missing editing context precondition.
"""

import pytest

from modelexplorer.core.services.styles import StylesFactory
from modelexplorer.domain import diagram_models as diagram
from modelexplorer.domain.errors import MissingContextError, ModelExplorerError
from modelexplorer.domain.view_models import (
    ArrowStyle,
    EdgeStyleDescription,
    LineStyle,
    NodeDescription,
    NodeStyleDescription,
)


@pytest.fixture
def factory() -> StylesFactory:
    return StylesFactory()


def _child_of_list(child_style: NodeStyleDescription) -> NodeStyleDescription:
    """Attach a style to a node description nested in a list-mode parent."""
    NodeDescription(
        name="List",
        style=NodeStyleDescription(list_mode=True),
        child_node_descriptions=[NodeDescription(name="Item", style=child_style)],
    )
    return child_style


def test_plain_style_maps_to_rectangle_without_header(factory):
    node_style = NodeStyleDescription(list_mode=False, shape="")
    NodeDescription(name="Entity", style=node_style)

    style = factory.create_node_style(node_style, "ctx-1")

    assert style == diagram.RectangularNodeStyle(
        color="black",
        border_color="black",
        border_size=1,
        border_style=diagram.LineStyle.SOLID,
        border_radius=3,
        with_header=False,
    )


def test_list_mode_maps_to_rectangle_with_header(factory):
    node_style = NodeStyleDescription(
        list_mode=True,
        color="#ffffff",
        border_color="#333333",
        border_size=2,
        border_radius=8,
        border_line_style=LineStyle.DASH,
        shape="ignored.svg",
    )

    style = factory.create_node_style(node_style)

    assert isinstance(style, diagram.RectangularNodeStyle)
    assert style.with_header is True
    assert style.color == "#ffffff"
    assert style.border_color == "#333333"
    assert style.border_size == 2
    assert style.border_radius == 8
    assert style.border_style is diagram.LineStyle.DASH


def test_child_of_list_maps_to_transparent_icon_label(factory):
    node_style = _child_of_list(NodeStyleDescription(shape="icon.svg"))

    style = factory.create_node_style(node_style)

    assert style == diagram.IconLabelNodeStyle(background_color="transparent")


def test_list_mode_wins_over_list_parent(factory):
    node_style = _child_of_list(NodeStyleDescription(list_mode=True))

    style = factory.create_node_style(node_style)

    assert isinstance(style, diagram.RectangularNodeStyle)
    assert style.with_header is True


def test_shape_maps_to_image_served_from_editing_context(factory):
    node_style = NodeStyleDescription(shape="icon.svg", border_line_style=LineStyle.DOT, border_size=0)

    style = factory.create_node_style(node_style, "ctx-1")

    assert isinstance(style, diagram.ImageNodeStyle)
    assert style.image_url == "/custom/ctx-1/icon.svg"
    assert style.scaling_factor == 1
    assert style.border_color == "black"
    assert style.border_size == 0
    assert style.border_style is diagram.LineStyle.DOT


def test_shape_without_editing_context_is_a_precondition_error(factory):
    node_style = NodeStyleDescription(shape="icon.svg")

    with pytest.raises(MissingContextError) as exc_info:
        factory.create_node_style(node_style)

    assert exc_info.value.kind == "MissingContext"
    assert isinstance(exc_info.value, ModelExplorerError)


def test_blank_shape_is_ignored(factory):
    style = factory.create_node_style(NodeStyleDescription(shape="   "))

    assert isinstance(style, diagram.RectangularNodeStyle)
    assert style.with_header is False


@pytest.mark.parametrize("literal", [member.value for member in LineStyle])
def test_every_border_line_style_converts(factory, literal):
    style = factory.create_node_style(NodeStyleDescription(border_line_style=LineStyle(literal)))

    assert style.border_style.value == literal


def test_node_type_classification(factory):
    assert factory.get_node_type(NodeStyleDescription()) == diagram.NodeType.NODE_RECTANGLE
    assert factory.get_node_type(NodeStyleDescription(shape="a.svg")) == diagram.NodeType.NODE_IMAGE
    assert factory.get_node_type(_child_of_list(NodeStyleDescription(shape="a.svg"))) == diagram.NodeType.NODE_ICON_LABEL
    # List mode alone does not change the node type
    assert factory.get_node_type(NodeStyleDescription(list_mode=True)) == diagram.NodeType.NODE_RECTANGLE


def test_edge_style_conversion(factory):
    edge_style = EdgeStyleDescription(
        color="#002639",
        line_style=LineStyle.DASH_DOT,
        edge_width=3,
        source_arrow_style=ArrowStyle.DIAMOND,
        target_arrow_style=ArrowStyle.INPUT_FILL_CLOSED_ARROW,
    )

    assert factory.create_edge_style(edge_style) == diagram.EdgeStyle(
        color="#002639",
        line_style=diagram.LineStyle.DASH_DOT,
        size=3,
        source_arrow=diagram.ArrowStyle.DIAMOND,
        target_arrow=diagram.ArrowStyle.INPUT_FILL_CLOSED_ARROW,
    )


def test_edge_style_defaults_color(factory):
    assert factory.create_edge_style(EdgeStyleDescription()).color == "black"


def test_label_style_descriptions_read_the_descriptors(factory):
    node_style = NodeStyleDescription(label_color="red", font_size=16, bold=True, strike_through=True)
    edge_style = EdgeStyleDescription(color="blue", font_size=10, italic=True, underline=True)

    node_label = factory.create_label_style_description(node_style)
    edge_label = factory.create_edge_label_style_description(edge_style)

    assert node_label.color_provider({}) == "red"
    assert node_label.font_size_provider({}) == 16
    assert node_label.bold_provider({}) is True
    assert node_label.strike_through_provider({}) is True
    assert node_label.icon_url_provider({}) == ""
    assert edge_label.color_provider({}) == "blue"
    assert edge_label.italic_provider({}) is True
    assert edge_label.underline_provider({}) is True
