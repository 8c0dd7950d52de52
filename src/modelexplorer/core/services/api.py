from __future__ import annotations

"""
Collaborator Interfaces of the Explorer Services.

Abstract contracts consumed by the expand-all provider. Implementations are
injected through constructors so the traversal can run against any model
backend, including test doubles.
"""

from abc import ABC, abstractmethod
from typing import Any, List, Optional

from modelexplorer.domain.tree_models import EditingContext, Tree


class IdentityService(ABC):

    @abstractmethod
    def get_id(self, obj: Any) -> str:
        """
        Compute the identifier of a model object.

        Args:
            obj: Object displayed in a tree.

        Returns:
            str: Identifier used as tree item id.
        """


class ContentService(ABC):

    @abstractmethod
    def get_contents(self, obj: Any) -> List[Any]:
        """
        List the objects contained by a model object, in containment order.

        Returns an empty list for leaves.
        """


class ExplorerNavigationService(ABC):

    @abstractmethod
    def get_ancestors(self, editing_context: EditingContext, tree: Tree, tree_item_id: str) -> List[Any]:
        """
        List the ancestors of a tree item, nearest first.

        Args:
            editing_context: Workspace holding the model.
            tree: Tree displaying the item.
            tree_item_id: Identifier of the item.

        Returns:
            List[Any]: Ancestor objects, empty for top level items.
        """


class RepresentationDataSearchService(ABC):

    @abstractmethod
    def exist_any_representation_for_target_object_id(self, target_object_id: str) -> bool:
        """Tell whether at least one representation is attached to an object."""


class RepresentationDescriptionSearchService(ABC):

    @abstractmethod
    def find_by_id(self, editing_context: EditingContext, description_id: str) -> Optional[Any]:
        """
        Find a representation description by identifier.

        Callers filter the result on the description type they expect
        (e.g. TreeDescription). Returns None when the id is unknown.
        """
