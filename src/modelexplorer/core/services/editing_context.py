from __future__ import annotations

"""
In-Memory Editing Context Services.

Concrete implementations of the explorer collaborator interfaces backed by
an EditingContext loaded in memory, plus the explorer tree description
whose object provider resolves tree item ids against that context.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Set

from modelexplorer.core.services.api import (
    ContentService,
    ExplorerNavigationService,
    IdentityService,
    RepresentationDataSearchService,
    RepresentationDescriptionSearchService,
)
from modelexplorer.domain.constants import (
    EDITING_CONTEXT_VARIABLE,
    EXPLORER_DESCRIPTION_ID,
    EXPLORER_DESCRIPTION_LABEL,
    TREE_ITEM_ID_VARIABLE,
)
from modelexplorer.domain.tree_models import (
    Document,
    EditingContext,
    ModelElement,
    Tree,
    TreeDescription,
    TreeItemObject,
)

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# MODEL INDEX
# -----------------------------------------------------------------------------

class EditingContextIndex:
    """
    Lookup tables over the objects of an editing context.

    Maps every document and element id to its object and to its container,
    and records which ids are the target of a representation. The tables are
    a snapshot; call refresh() after mutating the model. One index is shared
    by all the services of a build_explorer_services bundle, so switching it
    to another context with use() switches every service at once.
    """

    def __init__(self, editing_context: EditingContext) -> None:
        self.editing_context = editing_context
        self._objects: Dict[str, TreeItemObject] = {}
        self._containers: Dict[str, TreeItemObject] = {}
        self._representation_targets: Set[str] = set()
        self.refresh()

    def refresh(self) -> None:
        self._objects.clear()
        self._containers.clear()
        self._representation_targets = {r.target_object_id for r in self.editing_context.representations}

        for document in self.editing_context.documents:
            self._register(document, None)
            stack: List[tuple] = [(root, document) for root in reversed(document.contents)]
            while stack:
                element, container = stack.pop()
                self._register(element, container)
                stack.extend((child, element) for child in reversed(element.children))

        logger.debug(f"Indexed {len(self._objects)} objects of editing context '{self.editing_context.id}'")

    def use(self, editing_context: EditingContext) -> EditingContextIndex:
        """Point the index at another editing context, rebuilding the tables if it changed."""
        if editing_context is not self.editing_context:
            self.editing_context = editing_context
            self.refresh()
        return self

    def has_representation(self, target_object_id: str) -> bool:
        return target_object_id in self._representation_targets

    def find(self, object_id: str) -> Optional[TreeItemObject]:
        return self._objects.get(object_id)

    def container_of(self, object_id: str) -> Optional[TreeItemObject]:
        return self._containers.get(object_id)

    def _register(self, obj: TreeItemObject, container: Optional[TreeItemObject]) -> None:
        # First occurrence wins when ids are duplicated
        if obj.id in self._objects:
            logger.warning(f"Duplicate object id '{obj.id}' ignored by the index.")
            return
        self._objects[obj.id] = obj
        if container is not None:
            self._containers[obj.id] = container


# -----------------------------------------------------------------------------
# COLLABORATOR IMPLEMENTATIONS
# -----------------------------------------------------------------------------

class ModelIdentityService(IdentityService):

    def get_id(self, obj: Any) -> str:
        if isinstance(obj, (ModelElement, Document)):
            return obj.id
        raise TypeError(f"Unsupported tree item object: {type(obj).__name__}")


class ModelContentService(ContentService):

    def get_contents(self, obj: Any) -> List[Any]:
        if isinstance(obj, ModelElement):
            return list(obj.children)
        if isinstance(obj, Document):
            return list(obj.contents)
        return []


class ModelNavigationService(ExplorerNavigationService):
    """Walks the container chain of an item up to its document."""

    def __init__(self, index: EditingContextIndex) -> None:
        self._index = index

    def get_ancestors(self, editing_context: EditingContext, tree: Tree, tree_item_id: str) -> List[Any]:
        index = _index_for(self._index, editing_context)
        ancestors: List[Any] = []
        container = index.container_of(tree_item_id)
        while container is not None:
            ancestors.append(container)
            container = index.container_of(container.id)
        return ancestors


class InMemoryRepresentationDataSearchService(RepresentationDataSearchService):

    """
    Representation lookup on the shared index.

    The lookup carries no editing context, so it answers for the context the
    index was last pointed at by the tree item resolution.
    """

    def __init__(self, index: EditingContextIndex) -> None:
        self._index = index

    def exist_any_representation_for_target_object_id(self, target_object_id: str) -> bool:
        return self._index.has_representation(target_object_id)


class InMemoryRepresentationDescriptionSearchService(RepresentationDescriptionSearchService):

    def __init__(self, descriptions: List[Any]) -> None:
        self._descriptions = {d.id: d for d in descriptions}

    def find_by_id(self, editing_context: EditingContext, description_id: str) -> Optional[Any]:
        return self._descriptions.get(description_id)


# -----------------------------------------------------------------------------
# EXPLORER DESCRIPTION
# -----------------------------------------------------------------------------

def create_explorer_description(index: EditingContextIndex) -> TreeDescription:
    """
    Build the explorer tree description.

    Its object provider reads the editing context and the tree item id from
    the variables and returns the matching document or element.
    """

    def tree_item_object_provider(variables: Dict[str, Any]) -> Optional[TreeItemObject]:
        editing_context = variables.get(EDITING_CONTEXT_VARIABLE)
        tree_item_id = variables.get(TREE_ITEM_ID_VARIABLE)
        if not isinstance(editing_context, EditingContext) or not isinstance(tree_item_id, str):
            return None
        return _index_for(index, editing_context).find(tree_item_id)

    return TreeDescription(
        id=EXPLORER_DESCRIPTION_ID,
        label=EXPLORER_DESCRIPTION_LABEL,
        tree_item_object_provider=tree_item_object_provider,
    )


@dataclass(frozen=True)
class ExplorerServices:
    """Collaborator set wired around one editing context."""
    index: EditingContextIndex
    identity_service: IdentityService
    content_service: ContentService
    navigation_service: ExplorerNavigationService
    representation_data_search_service: RepresentationDataSearchService
    representation_description_search_service: RepresentationDescriptionSearchService


def build_explorer_services(editing_context: EditingContext) -> ExplorerServices:
    index = EditingContextIndex(editing_context)
    return ExplorerServices(
        index=index,
        identity_service=ModelIdentityService(),
        content_service=ModelContentService(),
        navigation_service=ModelNavigationService(index),
        representation_data_search_service=InMemoryRepresentationDataSearchService(index),
        representation_description_search_service=InMemoryRepresentationDescriptionSearchService(
            [create_explorer_description(index)]
        ),
    )


def _index_for(index: EditingContextIndex, editing_context: EditingContext) -> EditingContextIndex:
    return index.use(editing_context)
