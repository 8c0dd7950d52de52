from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides cross-platform path resolution for persistent application data and
safe loading of JSON documents from disk.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "ModelExplorer"
UNIX_APP_DIR_NAME = ".modelexplorer"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Directory holding the saved session and the log files.

    %LOCALAPPDATA%\\ModelExplorer on Windows, ~/.modelexplorer elsewhere.
    Created on first use.
    """
    base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA") if os.name == "nt" else None
    if base:
        data_dir = os.path.join(base, APP_DIR_NAME)
    else:
        data_dir = os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME)

    if not os.path.isdir(data_dir):
        try:
            os.makedirs(data_dir, exist_ok=True)
        except OSError as e:
            logger.debug(f"Cannot create data directory '{data_dir}': {e}")
    return os.path.abspath(data_dir)


def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Absolute form of a user supplied path, with ~ and environment
    variables expanded. Blank input resolves the fallback instead.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)

# -----------------------------------------------------------------------------
# DOCUMENT LOADING API
# -----------------------------------------------------------------------------

def read_json_file(path: str) -> Optional[Dict[str, Any]]:
    """
    Read a JSON document whose root must be an object.

    Args:
        path: Path to the document.

    Returns:
        Optional[Dict[str, Any]]: Parsed document, or None if it is missing,
                                  unreadable, malformed or not an object.
    """
    file_path = normalize_path(path, fallback=path)
    if not os.path.isfile(file_path):
        logger.error(f"Document not found: {file_path}")
        return None

    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to read document '{file_path}': {e}")
        return None

    if not isinstance(data, dict):
        logger.warning(f"Malformed document '{file_path}' (Root is not an object).")
        return None

    logger.debug(f"Document loaded from {file_path}")
    return data
