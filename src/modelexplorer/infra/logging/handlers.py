from __future__ import annotations

"""
Handler Factories.

Every handler built here carries a marker attribute so a later
configure_logging call (or a test reset) removes exactly the handlers this
package installed and leaves foreign ones, such as pytest's capture
handler, in place.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

_HANDLER_TAG_ATTR: str = "_modelexplorer_handler"


def _tag_handler(handler: logging.Handler) -> logging.Handler:
    setattr(handler, _HANDLER_TAG_ATTR, True)
    return handler


def _is_our_handler(handler: logging.Handler) -> bool:
    return bool(getattr(handler, _HANDLER_TAG_ATTR, False))


def _create_console_handler(level_int: int, fmt: str) -> logging.Handler:
    """Stderr handler; stdout carries the explorer reports."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level_int)
    handler.setFormatter(logging.Formatter(fmt))
    return _tag_handler(handler)


def _create_rotating_file_handler(
        log_file: str,
        level_int: int,
        formatter: logging.Formatter,
        max_bytes: int,
        backup_count: int,
) -> Optional[RotatingFileHandler]:
    """
    Open the rotating log file, creating its directory when needed.

    Args:
        log_file: Path of the active log file.
        level_int: Minimum level written to the file.
        formatter: Record formatter.
        max_bytes: Rollover size.
        backup_count: Rolled files to keep.

    Returns:
        Optional[RotatingFileHandler]: The handler, or None when the file
                                       cannot be opened (a note is written
                                       to stderr instead).
    """
    directory = os.path.dirname(os.path.abspath(log_file))
    try:
        os.makedirs(directory, exist_ok=True)
        handler = RotatingFileHandler(
            log_file,
            maxBytes=int(max_bytes),
            backupCount=int(backup_count),
            encoding="utf-8",
        )
    except OSError as e:
        print(f"WARNING: log file '{log_file}' unavailable ({e}), file logging disabled.", file=sys.stderr)
        return None

    handler.setLevel(level_int)
    handler.setFormatter(formatter)
    _tag_handler(handler)
    return handler
