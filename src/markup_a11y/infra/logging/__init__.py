from __future__ import annotations

from .config import LoggingConfig
from .core import (
    _CONFIGURED_FLAG_ATTR,
    _QUEUE_LISTENER_ATTR,
    PACKAGE_LOGGER,
    configure_logging,
    get_logger,
    reset_logging,
)
from .handlers import _HANDLER_TAG_ATTR

__all__ = [
    "LoggingConfig",
    "PACKAGE_LOGGER",
    "configure_logging",
    "get_logger",
    "reset_logging",
]
