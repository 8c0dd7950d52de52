from __future__ import annotations

"""
Network Communication Infrastructure.

Orchestrates external HTTP interactions via specialized clients.
"""

from modelexplorer.infra.network.common import is_remote_source
from modelexplorer.infra.network.documents_client import fetch_remote_document

__all__ = [
    "fetch_remote_document",
    "is_remote_source",
]
