from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures for model documents and explorer services.
"""

import os
import sys
from typing import Any, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from modelexplorer.core.services.editing_context import build_explorer_services  # noqa: E402
from modelexplorer.core.services.expand_all import ExpandAllTreePathProvider  # noqa: E402
from modelexplorer.core.services.model_loader import load_editing_context  # noqa: E402
from modelexplorer.domain.constants import EXPLORER_DESCRIPTION_ID  # noqa: E402
from modelexplorer.domain.tree_models import EditingContext, Tree  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def model_document() -> Dict[str, Any]:
    """
    Return a model document with a single document holding root R.

    Structure:
    doc
      R
        A
          C        (leaf, no representation)
        B          (leaf, diagram attached)
      S            (leaf, no representation)
    """
    return {
        "id": "ctx-1",
        "documents": [
            {
                "id": "doc",
                "name": "family.model",
                "contents": [
                    {
                        "id": "R",
                        "label": "Root",
                        "kind": "Package",
                        "children": [
                            {"id": "A", "label": "A", "children": [{"id": "C", "label": "C"}]},
                            {"id": "B", "label": "B"},
                        ],
                    },
                    {"id": "S", "label": "Standalone"},
                ],
            }
        ],
        "representations": [
            {"id": "diagram-b", "targetObjectId": "B", "label": "B Diagram", "kind": "Diagram"},
        ],
    }


@pytest.fixture
def editing_context(model_document: Dict[str, Any]) -> EditingContext:
    return load_editing_context(model_document)


@pytest.fixture
def explorer_tree() -> Tree:
    return Tree(id="explorer", description_id=EXPLORER_DESCRIPTION_ID)


@pytest.fixture
def provider(editing_context: EditingContext) -> ExpandAllTreePathProvider:
    """Provider wired on the in-memory services of the sample context."""
    services = build_explorer_services(editing_context)
    return ExpandAllTreePathProvider(
        services.identity_service,
        services.content_service,
        services.navigation_service,
        services.representation_description_search_service,
        services.representation_data_search_service,
    )
