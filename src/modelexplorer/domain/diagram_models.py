from __future__ import annotations

"""
Diagram Rendering Style Models.

Immutable style value objects consumed by the diagram renderer. Enum
members subclass str so the values serialize directly to JSON.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict


class LineStyle(str, Enum):
    SOLID = "Solid"
    DASH = "Dash"
    DOT = "Dot"
    DASH_DOT = "Dash_Dot"


class ArrowStyle(str, Enum):
    NONE = "None"
    OUTPUT_ARROW = "OutputArrow"
    INPUT_ARROW = "InputArrow"
    OUTPUT_CLOSED_ARROW = "OutputClosedArrow"
    INPUT_CLOSED_ARROW = "InputClosedArrow"
    OUTPUT_FILL_CLOSED_ARROW = "OutputFillClosedArrow"
    INPUT_FILL_CLOSED_ARROW = "InputFillClosedArrow"
    DIAMOND = "Diamond"
    FILL_DIAMOND = "FillDiamond"
    INPUT_ARROW_WITH_DIAMOND = "InputArrowWithDiamond"
    INPUT_ARROW_WITH_FILL_DIAMOND = "InputArrowWithFillDiamond"


class NodeType:
    NODE_RECTANGLE = "node:rectangle"
    NODE_IMAGE = "node:image"
    NODE_ICON_LABEL = "node:icon-label"

# -----------------------------------------------------------------------------
# NODE STYLES
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class RectangularNodeStyle:
    color: str
    border_color: str
    border_size: int
    border_style: LineStyle
    border_radius: int
    with_header: bool


@dataclass(frozen=True)
class ImageNodeStyle:
    image_url: str
    scaling_factor: int
    border_color: str
    border_size: int
    border_style: LineStyle
    border_radius: int


@dataclass(frozen=True)
class IconLabelNodeStyle:
    background_color: str

# -----------------------------------------------------------------------------
# EDGE AND LABEL STYLES
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class EdgeStyle:
    color: str
    line_style: LineStyle
    size: int
    source_arrow: ArrowStyle
    target_arrow: ArrowStyle


Provider = Callable[[Dict[str, Any]], Any]


@dataclass(frozen=True)
class LabelStyleDescription:
    """
    Label style evaluated lazily by the renderer.

    Each provider receives the rendering variables and returns the value of
    the corresponding label attribute.
    """
    color_provider: Provider
    font_size_provider: Provider
    bold_provider: Provider
    italic_provider: Provider
    underline_provider: Provider
    strike_through_provider: Provider
    icon_url_provider: Provider
