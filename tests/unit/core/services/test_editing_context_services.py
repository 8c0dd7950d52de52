from __future__ import annotations

"""
Unit tests for the In-Memory Editing Context Services.

Verifies:
1. Identity and content lookups over documents and elements.
2. Ancestor computation up to the owning document.
3. Representation existence checks.
4. The explorer tree description object provider.
5. Services answering consistently when handed another editing context.
"""

import pytest

from modelexplorer.core.services.editing_context import build_explorer_services
from modelexplorer.core.services.expand_all import ExpandAllTreePathProvider
from modelexplorer.domain.constants import (
    EDITING_CONTEXT_VARIABLE,
    EXPLORER_DESCRIPTION_ID,
    TREE_ITEM_ID_VARIABLE,
)
from modelexplorer.domain.tree_models import (
    Document,
    EditingContext,
    ModelElement,
    RepresentationMetadata,
    TreeDescription,
)


def test_identity_and_contents(editing_context):
    services = build_explorer_services(editing_context)
    document = editing_context.documents[0]
    root = document.contents[0]

    assert services.identity_service.get_id(document) == "doc"
    assert services.identity_service.get_id(root) == "R"
    assert [e.id for e in services.content_service.get_contents(document)] == ["R", "S"]
    assert [e.id for e in services.content_service.get_contents(root)] == ["A", "B"]
    assert services.content_service.get_contents("not a model object") == []

    with pytest.raises(TypeError):
        services.identity_service.get_id(42)


def test_ancestors_walk_up_to_the_document(editing_context, explorer_tree):
    navigation = build_explorer_services(editing_context).navigation_service

    assert [a.id for a in navigation.get_ancestors(editing_context, explorer_tree, "C")] == ["A", "R", "doc"]
    assert [a.id for a in navigation.get_ancestors(editing_context, explorer_tree, "R")] == ["doc"]
    assert navigation.get_ancestors(editing_context, explorer_tree, "doc") == []
    assert navigation.get_ancestors(editing_context, explorer_tree, "unknown") == []


def test_ancestors_of_another_context_are_computed_on_demand(editing_context, explorer_tree):
    navigation = build_explorer_services(editing_context).navigation_service
    other = EditingContext(id="other", documents=[
        Document(id="d2", contents=[ModelElement(id="X", children=[ModelElement(id="Y")])]),
    ])

    assert [a.id for a in navigation.get_ancestors(other, explorer_tree, "Y")] == ["X", "d2"]


def test_representation_search(editing_context):
    search = build_explorer_services(editing_context).representation_data_search_service

    assert search.exist_any_representation_for_target_object_id("B") is True
    assert search.exist_any_representation_for_target_object_id("A") is False


def test_explorer_description_resolves_tree_items(editing_context):
    search = build_explorer_services(editing_context).representation_description_search_service
    description = search.find_by_id(editing_context, EXPLORER_DESCRIPTION_ID)

    assert isinstance(description, TreeDescription)
    provider = description.tree_item_object_provider
    resolved = provider({EDITING_CONTEXT_VARIABLE: editing_context, TREE_ITEM_ID_VARIABLE: "C"})
    assert isinstance(resolved, ModelElement) and resolved.id == "C"
    assert isinstance(provider({EDITING_CONTEXT_VARIABLE: editing_context, TREE_ITEM_ID_VARIABLE: "doc"}), Document)
    assert provider({EDITING_CONTEXT_VARIABLE: editing_context, TREE_ITEM_ID_VARIABLE: "nope"}) is None
    assert provider({TREE_ITEM_ID_VARIABLE: "C"}) is None
    assert search.find_by_id(editing_context, "unknown") is None


def test_index_refresh_picks_up_new_elements(editing_context):
    services = build_explorer_services(editing_context)
    editing_context.documents[0].contents[1].children.append(ModelElement(id="T"))

    assert services.index.find("T") is None
    services.index.refresh()
    assert services.index.find("T").id == "T"
    assert services.index.container_of("T").id == "S"


def _single_child_context(context_id, represented_id):
    """doc > R > B, with one representation targeting represented_id."""
    return EditingContext(
        id=context_id,
        documents=[Document(id="doc", contents=[ModelElement(id="R", children=[ModelElement(id="B")])])],
        representations=[RepresentationMetadata(id=f"{context_id}-diagram", target_object_id=represented_id)],
    )


def _provider_for(services):
    return ExpandAllTreePathProvider(
        services.identity_service,
        services.content_service,
        services.navigation_service,
        services.representation_description_search_service,
        services.representation_data_search_service,
    )


def test_representation_search_follows_the_requested_context(explorer_tree):
    first = _single_child_context("c1", "nothing")
    second = _single_child_context("c2", "B")
    services = build_explorer_services(first)
    provider = _provider_for(services)

    shared = provider.compute_expansion(second, explorer_tree, "R")
    dedicated = _provider_for(build_explorer_services(second)).compute_expansion(second, explorer_tree, "R")

    assert shared == dedicated
    assert shared.tree_item_ids == ["R", "B"]
    assert shared.max_depth == 3

    # Back on the first context the leaf has no representation again
    assert provider.compute_expansion(first, explorer_tree, "R").max_depth == 2
    assert services.representation_data_search_service.exist_any_representation_for_target_object_id("B") is False
