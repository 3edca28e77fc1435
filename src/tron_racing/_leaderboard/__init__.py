# Area: Leaderboard
"""
Per-map leaderboards.

This package contains:
- MapLog: ranked best times for one map
- LogManager: selection of the MapLog for the active map
"""

from .map_log import MapLog, PlayerRecord, to_decimal
from .log_manager import LogManager

__all__ = [
    "MapLog",
    "PlayerRecord",
    "to_decimal",
    "LogManager",
]
