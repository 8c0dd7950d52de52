from __future__ import annotations

"""
Expand All Tree Path Provider.

Computes the tree items to expand in order to reveal every descendant of a
tree item of the explorer, together with the depth the tree reaches once
expanded. Items without children are only expanded when a representation
is attached to them.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple, Union

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
    TREE_ITEM_ID_VARIABLE,
)
from modelexplorer.domain.tree_models import (
    Document,
    EditingContext,
    ErrorPayload,
    ExpandAllTreePathInput,
    ExpandAllTreePathSuccessPayload,
    ModelElement,
    Tree,
    TreeDescription,
    TreePath,
)

logger = logging.getLogger(__name__)


class ExpandAllTreePathProvider:
    """
    Expand-all support for the explorer tree.

    The model is assumed to be acyclic; a containment cycle makes the
    traversal run forever.
    """

    def __init__(
            self,
            identity_service: IdentityService,
            content_service: ContentService,
            explorer_navigation_service: ExplorerNavigationService,
            representation_description_search_service: RepresentationDescriptionSearchService,
            representation_data_search_service: RepresentationDataSearchService,
    ) -> None:
        self.identity_service = identity_service
        self.content_service = content_service
        self.explorer_navigation_service = explorer_navigation_service
        self.representation_description_search_service = representation_description_search_service
        self.representation_data_search_service = representation_data_search_service

    # -------------------------------------------------------------------------
    # PUBLIC API
    # -------------------------------------------------------------------------

    def can_handle(self, tree: Tree) -> bool:
        return tree.description_id == EXPLORER_DESCRIPTION_ID

    def handle(
            self,
            editing_context: EditingContext,
            tree: Tree,
            expand_input: ExpandAllTreePathInput,
    ) -> Union[ExpandAllTreePathSuccessPayload, ErrorPayload]:
        """
        Answer an expand-all request.

        Args:
            editing_context: Workspace holding the model.
            tree: Tree on which the request was issued.
            expand_input: The request.

        Returns:
            The success payload echoing the request id, or an ErrorPayload
            when the tree is not an explorer tree.
        """
        if not self.can_handle(tree):
            message = f"Tree '{tree.id}' with description '{tree.description_id}' does not support expand all."
            logger.warning(message)
            return ErrorPayload(id=expand_input.id, message=message)

        tree_path = self.compute_expansion(editing_context, tree, expand_input.tree_item_id)
        return ExpandAllTreePathSuccessPayload(id=expand_input.id, tree_path=tree_path)

    def compute_expansion(self, editing_context: EditingContext, tree: Tree, tree_item_id: str) -> TreePath:
        """
        Collect the items to expand below a tree item.

        Args:
            editing_context: Workspace holding the model.
            tree: Tree displaying the item.
            tree_item_id: Item from which everything is expanded.

        Returns:
            TreePath: Items in first-seen order and the maximum depth. An
                      unresolvable item yields an empty path of depth 0.
        """
        max_depth = 0
        # dict keys keep insertion order and ignore re-insertion
        tree_item_ids_to_expand: Dict[str, None] = {}

        obj = self._get_tree_item_object(editing_context, tree, tree_item_id)
        if isinstance(obj, ModelElement):
            ancestors = self.explorer_navigation_service.get_ancestors(editing_context, tree, tree_item_id)
            max_depth = self._add_all_contents(
                editing_context, tree, tree_item_id, len(ancestors), tree_item_ids_to_expand
            )
        elif isinstance(obj, Document):
            contents = self.content_service.get_contents(obj)
            if contents:
                tree_item_ids_to_expand[tree_item_id] = None
                for root_object in contents:
                    root_object_id = self.identity_service.get_id(root_object)
                    root_depth = self._add_all_contents(
                        editing_context, tree, root_object_id, 1, tree_item_ids_to_expand
                    )
                    max_depth = max(max_depth, root_depth)
        else:
            logger.debug(f"Tree item '{tree_item_id}' could not be resolved, nothing to expand.")

        logger.debug(
            f"Expand all from '{tree_item_id}': {len(tree_item_ids_to_expand)} items, max depth {max_depth}"
        )
        return TreePath(tree_item_ids=list(tree_item_ids_to_expand), max_depth=max_depth)

    # -------------------------------------------------------------------------
    # TRAVERSAL
    # -------------------------------------------------------------------------

    def _add_all_contents(
            self,
            editing_context: EditingContext,
            tree: Tree,
            tree_item_id: str,
            depth: int,
            tree_item_ids_to_expand: Dict[str, None],
    ) -> int:
        """
        Depth-first walk below an item, returning the deepest level reached.

        Uses an explicit stack instead of recursion. Children are pushed in
        reverse so they pop in containment order, which reproduces the
        pre-order of the recursive formulation: an item, then each child id
        followed by that child's own subtree.
        """
        depth_considered = depth
        # (item id, depth, added unconditionally as a child id)
        stack: List[Tuple[str, int, bool]] = [(tree_item_id, depth, False)]

        while stack:
            item_id, item_depth, is_child = stack.pop()
            if is_child:
                tree_item_ids_to_expand[item_id] = None
            depth_considered = max(depth_considered, item_depth)

            obj = self._get_tree_item_object(editing_context, tree, item_id)
            if not isinstance(obj, ModelElement):
                continue

            contents = self.content_service.get_contents(obj)
            if contents:
                tree_item_ids_to_expand[item_id] = None
                children = [(self.identity_service.get_id(child), item_depth + 1, True) for child in contents]
                stack.extend(reversed(children))
            elif self.representation_data_search_service.exist_any_representation_for_target_object_id(item_id):
                tree_item_ids_to_expand[item_id] = None
                depth_considered = max(depth_considered, item_depth + 1)

        return depth_considered

    def _get_tree_item_object(self, editing_context: EditingContext, tree: Tree, tree_item_id: str) -> Optional[Any]:
        description = self.representation_description_search_service.find_by_id(
            editing_context, tree.description_id
        )
        if not isinstance(description, TreeDescription):
            return None

        variables: Dict[str, Any] = {
            EDITING_CONTEXT_VARIABLE: editing_context,
            TREE_ITEM_ID_VARIABLE: tree_item_id,
        }
        return description.tree_item_object_provider(variables)
