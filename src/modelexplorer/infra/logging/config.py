from __future__ import annotations

"""
Logging Settings.

Holds the immutable settings the CLI passes to configure_logging and the
translation of textual levels into numeric ones.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

_LEVEL_NAMES: Tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def parse_level(level: Optional[str]) -> int:
    """
    Translate a level name into its numeric value.

    Unknown or empty names resolve to INFO. 'WARN' is accepted as an alias.

    Args:
        level: Level name, case-insensitive.

    Returns:
        int: Numeric logging level.
    """
    name = str(level or "").strip().upper()
    if name == "WARN":
        name = "WARNING"
    if name not in _LEVEL_NAMES:
        return logging.INFO
    return logging.getLevelName(name)


@dataclass(frozen=True)
class LoggingConfig:
    """
    Settings for one configure_logging call.

    Attributes:
        level: Minimum level name for every handler.
        console: Mirror records on stderr. Stdout stays reserved for results.
        log_file: Optional rotating log file.
        max_bytes: Size at which the log file rolls over.
        backup_count: Rolled files kept next to the active one.
        quiet_loggers: Third-party loggers capped at WARNING (HTTP stack).
    """
    level: str = "INFO"
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 512 * 1024
    backup_count: int = 3

    quiet_loggers: Tuple[str, ...] = ("urllib3", "requests")

    console_fmt: str = "[%(levelname)s] %(name)s: %(message)s"
    file_fmt: str = "%(asctime)s %(levelname)-8s %(name)s %(message)s"
    datefmt: str = "%Y-%m-%dT%H:%M:%S"

    @property
    def level_int(self) -> int:
        return parse_level(self.level)
