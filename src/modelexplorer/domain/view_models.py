from __future__ import annotations

"""
View Model Definitions.

Declarative description of how diagram elements should look. Node styles
keep a back-reference to the node description that owns them so style
mapping can inspect the surrounding container.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

# -----------------------------------------------------------------------------
# ENUMERATIONS
# -----------------------------------------------------------------------------

class LineStyle(Enum):
    SOLID = "Solid"
    DASH = "Dash"
    DOT = "Dot"
    DASH_DOT = "Dash_Dot"


class ArrowStyle(Enum):
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

# -----------------------------------------------------------------------------
# NODE DESCRIPTIONS
# -----------------------------------------------------------------------------

@dataclass(eq=False)
class NodeStyleDescription:
    """
    Style attributes of a node description.

    Attributes:
        color: Fill color, or None to use the default.
        border_color: Border color, or None to use the default.
        border_size: Border width in pixels.
        border_radius: Corner radius in pixels.
        border_line_style: Border stroke pattern.
        list_mode: Whether the node lays its children out as a list.
        shape: Identifier of a custom image, blank when unused.
        label_color: Label text color.
        font_size: Label font size.
        bold: Label bold flag.
        italic: Label italic flag.
        underline: Label underline flag.
        strike_through: Label strike-through flag.
        container: Node description owning this style.
    """
    color: Optional[str] = None
    border_color: Optional[str] = None
    border_size: int = 1
    border_radius: int = 3
    border_line_style: LineStyle = LineStyle.SOLID
    list_mode: bool = False
    shape: Optional[str] = None
    label_color: str = "black"
    font_size: int = 14
    bold: bool = False
    italic: bool = False
    underline: bool = False
    strike_through: bool = False
    container: Optional[NodeDescription] = field(default=None, repr=False)


@dataclass(eq=False)
class NodeDescription:
    """
    Node mapping of a diagram description.

    Attributes:
        name: Unique name of the description.
        style: Style applied to the nodes.
        child_node_descriptions: Nested node descriptions.
        parent: Enclosing node description, None at top level.
    """
    name: str
    style: NodeStyleDescription = field(default_factory=NodeStyleDescription)
    child_node_descriptions: List[NodeDescription] = field(default_factory=list)
    parent: Optional[NodeDescription] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self.style.container = self
        for child in self.child_node_descriptions:
            child.parent = self

    def add_child(self, child: NodeDescription) -> None:
        child.parent = self
        self.child_node_descriptions.append(child)

# -----------------------------------------------------------------------------
# EDGE DESCRIPTIONS
# -----------------------------------------------------------------------------

@dataclass(eq=False)
class EdgeStyleDescription:
    """Style attributes of an edge description."""
    color: Optional[str] = None
    line_style: LineStyle = LineStyle.SOLID
    edge_width: int = 1
    source_arrow_style: ArrowStyle = ArrowStyle.NONE
    target_arrow_style: ArrowStyle = ArrowStyle.INPUT_CLOSED_ARROW
    font_size: int = 14
    bold: bool = False
    italic: bool = False
    underline: bool = False
    strike_through: bool = False


@dataclass(eq=False)
class EdgeDescription:
    name: str
    style: EdgeStyleDescription = field(default_factory=EdgeStyleDescription)


@dataclass
class ViewModel:
    """Set of node and edge descriptions loaded from a view document."""
    node_descriptions: List[NodeDescription] = field(default_factory=list)
    edge_descriptions: List[EdgeDescription] = field(default_factory=list)

    def all_node_descriptions(self) -> List[NodeDescription]:
        """Flatten the nested node descriptions in depth-first order."""
        result: List[NodeDescription] = []
        stack = list(reversed(self.node_descriptions))
        while stack:
            description = stack.pop()
            result.append(description)
            stack.extend(reversed(description.child_node_descriptions))
        return result

    def find_node_description(self, name: str) -> Optional[NodeDescription]:
        by_name: Dict[str, NodeDescription] = {d.name: d for d in reversed(self.all_node_descriptions())}
        return by_name.get(name)

    def find_edge_description(self, name: str) -> Optional[EdgeDescription]:
        for description in self.edge_descriptions:
            if description.name == name:
                return description
        return None
