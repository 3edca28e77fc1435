# Area: Shared
"""
Shared utilities used by the leaderboard, rotation and round layers.

This package contains:
- Logging configuration
- Host event dispatch
- Command sink implementations
- Message texts
"""

from .logging_config import (
    setup_logging,
    log_error,
    enable_quiet_mode,
    disable_quiet_mode,
    is_quiet_mode_enabled,
)
from .event_dispatcher import EVENT_HANDLERS, EventDispatcher
from .command_sink import BufferedCommandSink, JsonLinesCommandSink

__all__ = [
    "setup_logging",
    "log_error",
    "enable_quiet_mode",
    "disable_quiet_mode",
    "is_quiet_mode_enabled",
    "EVENT_HANDLERS",
    "EventDispatcher",
    "BufferedCommandSink",
    "JsonLinesCommandSink",
]
