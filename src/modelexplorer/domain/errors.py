from __future__ import annotations

"""
Domain Exception Hierarchy.

All failures raised by the explorer and style services inherit from
ModelExplorerError so interface layers can trap them uniformly.
"""


class ModelExplorerError(Exception):
    """Base exception for all model explorer errors."""

    def __init__(self, message: str, kind: str = "Unknown"):
        self.kind = kind
        super().__init__(message)


class MissingContextError(ModelExplorerError):
    """An image style was requested without an editing context identifier."""

    def __init__(self, message: str):
        super().__init__(message, kind="MissingContext")


class ModelLoadError(ModelExplorerError):
    """A model or view document could not be turned into domain objects."""

    def __init__(self, message: str):
        super().__init__(message, kind="ModelLoad")
