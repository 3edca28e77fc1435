# Area: Leaderboard
"""
tron_racing._leaderboard.log_manager — Leaderboard selection
============================================================

Keeps one MapLog per map for the life of the process and tracks which
one belongs to the map currently being raced.
"""

from __future__ import annotations
import logging
from typing import Dict, Optional

from .map_log import MapLog

logger = logging.getLogger("tron_racing.leaderboard")


class LogManager:
    """
    Registry of MapLogs keyed by map name.

    Attributes:
        current_log: MapLog for the active map, or None before any selection
    """

    def __init__(self):
        self._logs: Dict[str, MapLog] = {}
        self.current_log: Optional[MapLog] = None

    def get_log(self, map_name: str) -> MapLog:
        """Return the MapLog for a map, creating an empty one if needed."""
        log = self._logs.get(map_name)
        if log is None:
            log = MapLog(map_name)
            self._logs[map_name] = log
            logger.info(f"Created empty leaderboard for {map_name}")
        return log

    def select(self, map_name: str) -> MapLog:
        """Make a map's MapLog the current one and return it."""
        self.current_log = self.get_log(map_name)
        return self.current_log

    def has_log(self, map_name: str) -> bool:
        return map_name in self._logs

    def rename_player(self, player: str, new_player: str) -> int:
        """
        Rename a player's records across every map.

        Returns:
            Number of maps where a record was moved
        """
        renamed = 0
        for log in self._logs.values():
            if log.rename_record(player, new_player):
                renamed += 1
        return renamed
