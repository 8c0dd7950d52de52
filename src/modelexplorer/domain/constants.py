from __future__ import annotations

"""
Domain Constants.

Provides centralized access to application-wide constants: configuration
versioning, explorer tree identifiers, variable names shared with tree
description providers, and style defaults.
"""

CURRENT_CONFIG_VERSION = "1.0.0"

# -----------------------------------------------------------------------------
# EXPLORER TREE
# -----------------------------------------------------------------------------
EXPLORER_DESCRIPTION_ID = "explorer_tree_description"
EXPLORER_DESCRIPTION_LABEL = "Explorer"
DEFAULT_TREE_ID = "explorer"

# Variable names passed to tree item object providers
EDITING_CONTEXT_VARIABLE = "editingContext"
TREE_ITEM_ID_VARIABLE = "id"

# -----------------------------------------------------------------------------
# DIAGRAM STYLES
# -----------------------------------------------------------------------------
DEFAULT_COLOR = "black"
TRANSPARENT_COLOR = "transparent"
CUSTOM_IMAGE_URL_PREFIX = "/custom/"
DEFAULT_IMAGE_SCALING_FACTOR = 1
