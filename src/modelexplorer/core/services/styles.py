from __future__ import annotations

"""
Diagram Styles Factory.

Translates the style descriptions of a view model into the style objects
used by the diagram renderer.
"""

from typing import Optional, Union

from modelexplorer.domain import diagram_models as diagram
from modelexplorer.domain import view_models as view
from modelexplorer.domain.constants import (
    CUSTOM_IMAGE_URL_PREFIX,
    DEFAULT_COLOR,
    DEFAULT_IMAGE_SCALING_FACTOR,
    TRANSPARENT_COLOR,
)
from modelexplorer.domain.errors import MissingContextError

NodeStyle = Union[diagram.RectangularNodeStyle, diagram.ImageNodeStyle, diagram.IconLabelNodeStyle]


class StylesFactory:
    """Factory to create the basic styles used when converting a view model."""

    # -------------------------------------------------------------------------
    # LABELS
    # -------------------------------------------------------------------------

    def create_label_style_description(self, node_style: view.NodeStyleDescription) -> diagram.LabelStyleDescription:
        return diagram.LabelStyleDescription(
            color_provider=lambda variables: node_style.label_color,
            font_size_provider=lambda variables: node_style.font_size,
            bold_provider=lambda variables: node_style.bold,
            italic_provider=lambda variables: node_style.italic,
            underline_provider=lambda variables: node_style.underline,
            strike_through_provider=lambda variables: node_style.strike_through,
            icon_url_provider=lambda variables: "",
        )

    def create_edge_label_style_description(
            self,
            edge_style: view.EdgeStyleDescription,
    ) -> diagram.LabelStyleDescription:
        return diagram.LabelStyleDescription(
            color_provider=lambda variables: edge_style.color,
            font_size_provider=lambda variables: edge_style.font_size,
            bold_provider=lambda variables: edge_style.bold,
            italic_provider=lambda variables: edge_style.italic,
            underline_provider=lambda variables: edge_style.underline,
            strike_through_provider=lambda variables: edge_style.strike_through,
            icon_url_provider=lambda variables: "",
        )

    # -------------------------------------------------------------------------
    # EDGES
    # -------------------------------------------------------------------------

    def create_edge_style(self, edge_style: view.EdgeStyleDescription) -> diagram.EdgeStyle:
        return diagram.EdgeStyle(
            color=edge_style.color or DEFAULT_COLOR,
            line_style=diagram.LineStyle(edge_style.line_style.value),
            size=edge_style.edge_width,
            source_arrow=diagram.ArrowStyle(edge_style.source_arrow_style.value),
            target_arrow=diagram.ArrowStyle(edge_style.target_arrow_style.value),
        )

    # -------------------------------------------------------------------------
    # NODES
    # -------------------------------------------------------------------------

    def get_node_type(self, node_style: view.NodeStyleDescription) -> str:
        """
        Classify the kind of node a style produces.

        Returns:
            str: One of the NodeType constants.
        """
        if _is_in_list_container(node_style):
            return diagram.NodeType.NODE_ICON_LABEL
        if _has_shape(node_style):
            return diagram.NodeType.NODE_IMAGE
        return diagram.NodeType.NODE_RECTANGLE

    def create_node_style(
            self,
            node_style: view.NodeStyleDescription,
            editing_context_id: Optional[str] = None,
    ) -> NodeStyle:
        """
        Convert a node style description, first matching rule wins.

        1. List mode: rectangle with a header.
        2. Inside a list-mode parent: transparent icon-label.
        3. Custom shape: image served from the editing context.
        4. Otherwise: rectangle without header.

        Args:
            node_style: Style description to convert.
            editing_context_id: Editing context serving custom images.

        Returns:
            NodeStyle: The renderer style.

        Raises:
            MissingContextError: A custom shape is used without an editing
                                 context id to build its URL.
        """
        if node_style.list_mode:
            return self._create_rectangular_node_style(node_style, with_header=True)

        if _is_in_list_container(node_style):
            return diagram.IconLabelNodeStyle(background_color=TRANSPARENT_COLOR)

        if _has_shape(node_style):
            if not editing_context_id:
                raise MissingContextError(
                    f"An editing context id is required to resolve the image of shape '{node_style.shape}'."
                )
            return diagram.ImageNodeStyle(
                image_url=f"{CUSTOM_IMAGE_URL_PREFIX}{editing_context_id}/{node_style.shape}",
                scaling_factor=DEFAULT_IMAGE_SCALING_FACTOR,
                border_color=node_style.border_color or DEFAULT_COLOR,
                border_size=node_style.border_size,
                border_style=diagram.LineStyle(node_style.border_line_style.value),
                border_radius=node_style.border_radius,
            )

        return self._create_rectangular_node_style(node_style, with_header=False)

    def _create_rectangular_node_style(
            self,
            node_style: view.NodeStyleDescription,
            with_header: bool,
    ) -> diagram.RectangularNodeStyle:
        return diagram.RectangularNodeStyle(
            color=node_style.color or DEFAULT_COLOR,
            border_color=node_style.border_color or DEFAULT_COLOR,
            border_size=node_style.border_size,
            border_style=diagram.LineStyle(node_style.border_line_style.value),
            border_radius=node_style.border_radius,
            with_header=with_header,
        )


def _is_in_list_container(node_style: view.NodeStyleDescription) -> bool:
    owner = node_style.container
    parent = owner.parent if owner is not None else None
    return parent is not None and parent.style.list_mode


def _has_shape(node_style: view.NodeStyleDescription) -> bool:
    return bool(node_style.shape and node_style.shape.strip())
