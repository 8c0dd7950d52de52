from __future__ import annotations

USER_AGENT = "ModelExplorer-Client/1.0.0"
DEFAULT_TIMEOUT = 10

REMOTE_SCHEMES = ("http://", "https://")


def is_remote_source(source: str) -> bool:
    """Tell whether a document source must be fetched over HTTP."""
    return (source or "").strip().lower().startswith(REMOTE_SCHEMES)
