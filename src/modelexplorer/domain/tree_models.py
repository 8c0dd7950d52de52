from __future__ import annotations

"""
Explorer Tree Data Models.

Provides the model objects displayed by the explorer (documents and their
nested elements), the tree and tree description definitions, and the
request/response DTOs exchanged with the expand-all provider.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Union

# -----------------------------------------------------------------------------
# MODEL OBJECTS
# -----------------------------------------------------------------------------

@dataclass
class ModelElement:
    """
    Composite model object that may own child elements.

    Attributes:
        id: Unique identifier of the element within the editing context.
        label: Human readable name.
        kind: Metamodel type name of the element.
        children: Contained elements, in containment order.
    """
    id: str
    label: str = ""
    kind: str = ""
    children: List[ModelElement] = field(default_factory=list)


@dataclass
class Document:
    """
    Container of top-level root elements (a resource).

    Attributes:
        id: Unique identifier of the document.
        name: Display name of the document.
        contents: Root elements, in document order.
    """
    id: str
    name: str = ""
    contents: List[ModelElement] = field(default_factory=list)


TreeItemObject = Union[ModelElement, Document]


@dataclass(frozen=True)
class RepresentationMetadata:
    """Representation (e.g. a diagram) attached to a model element."""
    id: str
    target_object_id: str
    label: str = ""
    kind: str = ""


@dataclass
class EditingContext:
    """
    In-memory workspace holding the documents being explored.

    Attributes:
        id: Editing context identifier (also used to build image URLs).
        documents: Loaded documents, in load order.
        representations: Representations attached to elements.
    """
    id: str
    documents: List[Document] = field(default_factory=list)
    representations: List[RepresentationMetadata] = field(default_factory=list)

# -----------------------------------------------------------------------------
# TREE DEFINITIONS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class TreeDescription:
    """
    Declarative definition of a tree.

    Attributes:
        id: Description identifier.
        label: Display label.
        tree_item_object_provider: Resolves the object behind a tree item from
            a variables dict holding the editing context and the item id.
    """
    id: str
    label: str
    tree_item_object_provider: Callable[[Dict[str, Any]], Optional[TreeItemObject]]


@dataclass
class Tree:
    """A tree instance rendered from a TreeDescription."""
    id: str
    description_id: str
    expanded: List[str] = field(default_factory=list)

# -----------------------------------------------------------------------------
# EXPAND ALL DTOs
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class TreePath:
    """
    Result of an expand-all computation.

    Attributes:
        tree_item_ids: Items to expand, in first-seen order without duplicates.
        max_depth: Deepest expansion level reached from the tree root.
    """
    tree_item_ids: List[str] = field(default_factory=list)
    max_depth: int = 0


@dataclass(frozen=True)
class ExpandAllTreePathInput:
    """Request to expand everything below a tree item."""
    id: str
    tree_id: str
    tree_item_id: str


@dataclass(frozen=True)
class ExpandAllTreePathSuccessPayload:
    """Successful answer to an ExpandAllTreePathInput."""
    id: str
    tree_path: TreePath


@dataclass(frozen=True)
class ErrorPayload:
    """Failed answer carrying a user facing message."""
    id: str
    message: str
