from __future__ import annotations

"""
Logging Lifecycle.

configure_logging attaches a single QueueHandler to the root logger and
starts a QueueListener that feeds the real sinks (stderr, rotating file).
Calls after the first are no-ops unless force=True, which tears the
previous listener down before building a new one.
"""

import atexit
import logging
import queue
import sys
from logging.handlers import QueueHandler, QueueListener
from typing import List

from modelexplorer.infra.logging.config import LoggingConfig
from modelexplorer.infra.logging.handlers import (
    _create_console_handler,
    _create_rotating_file_handler,
    _is_our_handler,
    _tag_handler,
)

_CONFIGURED_FLAG_ATTR: str = "_modelexplorer_configured"
_QUEUE_LISTENER_ATTR: str = "_modelexplorer_queue_listener"

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Configure the root logger once per process.

    Args:
        cfg: Logging settings.
        force: Rebuild the sinks even if logging is already configured.

    Returns:
        logging.Logger: The root logger.
    """
    root = logging.getLogger()
    if getattr(root, _CONFIGURED_FLAG_ATTR, False) and not force:
        return root

    level_int = cfg.level_int
    root.setLevel(level_int)
    _reset(root)

    for name in cfg.quiet_loggers:
        logging.getLogger(name).setLevel(max(level_int, logging.WARNING))

    sinks = _build_sinks(cfg, level_int)
    if not sinks:
        return root

    try:
        _start_queue(root, sinks)
    except RuntimeError as e:
        # Listener thread could not start, write synchronously instead
        print(f"WARNING: asynchronous logging unavailable ({e}).", file=sys.stderr)
        for sink in sinks:
            root.addHandler(sink)

    setattr(root, _CONFIGURED_FLAG_ATTR, True)
    return root


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _build_sinks(cfg: LoggingConfig, level_int: int) -> List[logging.Handler]:
    sinks: List[logging.Handler] = []
    if cfg.console:
        sinks.append(_create_console_handler(level_int, cfg.console_fmt))
    if cfg.log_file:
        fh = _create_rotating_file_handler(
            cfg.log_file,
            level_int,
            logging.Formatter(cfg.file_fmt, datefmt=cfg.datefmt),
            cfg.max_bytes,
            cfg.backup_count,
        )
        if fh is not None:
            sinks.append(fh)
    return sinks


def _start_queue(root: logging.Logger, sinks: List[logging.Handler]) -> None:
    records: queue.Queue[logging.LogRecord] = queue.Queue()
    listener = QueueListener(records, *sinks, respect_handler_level=True)
    listener.start()

    root.addHandler(_tag_handler(QueueHandler(records)))
    setattr(root, _QUEUE_LISTENER_ATTR, listener)
    atexit.register(_stop_listener, listener)


def _reset(root: logging.Logger) -> None:
    """Stop the running listener and detach the handlers installed here."""
    listener = getattr(root, _QUEUE_LISTENER_ATTR, None)
    if listener is not None:
        _stop_listener(listener)
        setattr(root, _QUEUE_LISTENER_ATTR, None)

    for handler in list(root.handlers):
        if _is_our_handler(handler):
            root.removeHandler(handler)
            handler.close()


def _stop_listener(listener: QueueListener) -> None:
    # stop() on an already stopped listener fails on older interpreters
    if getattr(listener, "_thread", None) is not None:
        listener.stop()
