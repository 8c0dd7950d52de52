from __future__ import annotations

"""
Persistent CLI Session.

The options of the last saved CLI run live in 'config.json' in the user
data directory, wrapped in a versioned envelope:

    {"version": "1.0.0", "last_session": {...options...}}

Reading never fails: a missing, unreadable or malformed file yields the
defaults, and options the file lacks are taken from the defaults too.
"""

import json
import logging
import os
from typing import Any, Dict

from modelexplorer.domain.constants import (
    CURRENT_CONFIG_VERSION,
    DEFAULT_TREE_ID,
    EXPLORER_DESCRIPTION_ID,
)
from modelexplorer.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

CONFIG_FILE = os.path.join(get_user_data_dir(), "config.json")

# -----------------------------------------------------------------------------
# DEFAULTS
# -----------------------------------------------------------------------------

def get_default_config() -> Dict[str, Any]:
    """Options used when nothing was saved or passed on the command line."""
    return {
        # Sources: local paths or http(s) URLs
        "model_path": "",
        "view_path": "",
        # Explorer tree
        "tree_id": DEFAULT_TREE_ID,
        "tree_description_id": EXPLORER_DESCRIPTION_ID,
        "print_tree": False,
        # Image URLs of custom shapes
        "editing_context_id": "",
        "log_level": "INFO",
    }


def get_default_app_state() -> Dict[str, Any]:
    return {"version": CURRENT_CONFIG_VERSION, "last_session": get_default_config()}

# -----------------------------------------------------------------------------
# PERSISTENCE
# -----------------------------------------------------------------------------

def load_app_state() -> Dict[str, Any]:
    """
    Read the saved envelope.

    Returns:
        Dict[str, Any]: The envelope, its session completed with defaults.
    """
    state = get_default_app_state()
    if not os.path.isfile(CONFIG_FILE):
        logger.debug(f"No saved session at {CONFIG_FILE}")
        return state

    try:
        with open(CONFIG_FILE, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Saved session unreadable ({e}), defaults used.")
        return state

    session = data.get("last_session") if isinstance(data, dict) else None
    if not isinstance(session, dict):
        logger.warning(f"Saved session in {CONFIG_FILE} is malformed, defaults used.")
        return state

    if data.get("version") != CURRENT_CONFIG_VERSION:
        logger.info(f"Upgrading saved session from version {data.get('version')} to {CURRENT_CONFIG_VERSION}")
    known = state["last_session"]
    dropped = sorted(k for k in session if k not in known)
    if dropped:
        logger.debug(f"Ignoring unknown saved options: {', '.join(dropped)}")
    known.update({k: v for k, v in session.items() if k in known})
    return state


def save_app_state(state: Dict[str, Any]) -> None:
    """
    Write the envelope, stamped with the current version.

    I/O failures are logged; the CLI run itself still succeeds.
    """
    payload = dict(state)
    payload["version"] = CURRENT_CONFIG_VERSION
    try:
        os.makedirs(os.path.dirname(CONFIG_FILE), exist_ok=True)
        with open(CONFIG_FILE, "w", encoding="utf-8") as f:
            json.dump(payload, f, ensure_ascii=False, indent=2)
    except OSError as e:
        logger.error(f"Cannot save session to {CONFIG_FILE}: {e}")
        return
    logger.debug(f"Session saved to {CONFIG_FILE}")

# -----------------------------------------------------------------------------
# SESSION SHORTCUTS
# -----------------------------------------------------------------------------

def load_config() -> Dict[str, Any]:
    return load_app_state()["last_session"]


def save_config(config: Dict[str, Any]) -> None:
    state = load_app_state()
    state["last_session"] = dict(config)
    save_app_state(state)
