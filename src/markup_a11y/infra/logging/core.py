from __future__ import annotations

"""
Logging Core Orchestrator.

Maintains the idempotent lifecycle of the logging subsystem. Records are
pushed through a queue so that handler I/O (console, rotating file) runs
on a listener thread and never slows down a host that analyzes many files
in a row.
"""

import atexit
import logging
import queue
import sys
from logging.handlers import QueueHandler, QueueListener
from typing import List, Optional

from markup_a11y.infra.logging.config import _LEVEL_MAP, LoggingConfig
from markup_a11y.infra.logging.handlers import (
    _create_rotating_file_handler,
    _is_our_handler,
    _tag_handler,
)

# Internal state flags for idempotency and lifecycle tracking
_CONFIGURED_FLAG_ATTR: str = "_markup_a11y_configured"
_QUEUE_LISTENER_ATTR: str = "_markup_a11y_queue_listener"

PACKAGE_LOGGER = "markup_a11y"


# ==============================================================================
# PUBLIC API
# ==============================================================================

def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Configure the package logger once, using non-blocking I/O.

    Only the `markup_a11y` logger is touched; the host's root logger and
    its handlers are left alone. Calling again is a no-op unless `force`
    is set, in which case our previous handlers are replaced.

    Args:
        cfg: Structural configuration for the logging system.
        force: If True, bypass idempotency checks and re-initialize handlers.

    Returns:
        logging.Logger: The package logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)

    # 1. Idempotency Check
    already_configured = bool(getattr(logger, _CONFIGURED_FLAG_ATTR, False))
    if already_configured and not force:
        return logger

    level_int = _parse_level(cfg.level)
    logger.setLevel(level_int)

    # Cleanup existing infrastructure to prevent handler leakage
    _remove_our_handlers(logger)
    _stop_existing_listener(logger)

    # 2. Handler Definition
    handlers_list: List[logging.Handler] = []

    if cfg.console:
        sh = logging.StreamHandler(sys.stderr)
        sh.setLevel(level_int)
        sh.setFormatter(logging.Formatter(cfg.console_fmt))
        _tag_handler(sh)
        handlers_list.append(sh)

    if cfg.log_file:
        fh = _create_rotating_file_handler(
            cfg.log_file,
            level_int,
            logging.Formatter(cfg.file_fmt, datefmt=cfg.datefmt),
            cfg.max_bytes,
            cfg.backup_count,
        )
        if fh:
            handlers_list.append(fh)

    if not handlers_list:
        setattr(logger, _CONFIGURED_FLAG_ATTR, True)
        return logger

    # 3. Queue-Based Orchestration (Non-blocking I/O)
    log_queue: queue.Queue[logging.LogRecord] = queue.Queue(-1)

    queue_handler = QueueHandler(log_queue)
    _tag_handler(queue_handler)

    listener = QueueListener(log_queue, *handlers_list, respect_handler_level=True)
    listener.start()

    logger.addHandler(queue_handler)
    logger.propagate = False

    setattr(logger, _QUEUE_LISTENER_ATTR, listener)
    setattr(logger, _CONFIGURED_FLAG_ATTR, True)

    # Flush pending records on interpreter shutdown
    atexit.register(_safe_stop_listener, listener)

    return logger


def reset_logging() -> None:
    """Detach our handlers and restore the package logger to its defaults."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    _remove_our_handlers(logger)
    _stop_existing_listener(logger)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    setattr(logger, _CONFIGURED_FLAG_ATTR, False)


def get_logger(name: str) -> logging.Logger:
    """
    Acquire a named logger instance under the package hierarchy.

    Args:
        name: Hierarchical name for the logger (usually __name__).

    Returns:
        logging.Logger: The requested logger instance.
    """
    return logging.getLogger(name)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _parse_level(level: str) -> int:
    """Convert a string-based logging level to its numeric constant."""
    if not level:
        return logging.WARNING
    return _LEVEL_MAP.get(str(level).strip().upper(), logging.WARNING)


def _remove_our_handlers(logger: logging.Logger) -> None:
    """Detach all internally-managed handlers from a logger."""
    for h in list(logger.handlers):
        if _is_our_handler(h):
            logger.removeHandler(h)
            h.close()


def _stop_existing_listener(logger: logging.Logger) -> None:
    """Terminate and release the existing QueueListener to reset state."""
    listener = getattr(logger, _QUEUE_LISTENER_ATTR, None)
    if listener:
        _safe_stop_listener(listener)
        setattr(logger, _QUEUE_LISTENER_ATTR, None)


def _safe_stop_listener(listener: Optional[QueueListener]) -> None:
    """
    Stop a QueueListener, tolerating a listener that is already stopped.

    Covers the atexit hook running after an explicit reset.
    """
    if not listener:
        return
    if getattr(listener, "_thread", None) is not None:
        listener.stop()
