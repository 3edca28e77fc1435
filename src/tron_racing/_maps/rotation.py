# Area: Maps
"""
tron_racing._maps.rotation — Cyclic map rotation
================================================

Walks the known maps in name order, wrapping from the last back to
the first. The cursor is -1 before the first ``next()``.
"""

from __future__ import annotations
import logging
from typing import List, Optional

from .map_manager import MapManager, RacingMap

logger = logging.getLogger("tron_racing.rotation")


class Rotation:
    """
    Map rotation over a MapManager's maps.

    Attributes:
        current_index: 0-based cursor, -1 when not yet started
    """

    def __init__(self, map_manager: Optional[MapManager] = None):
        self.current_index = -1
        self._maps: List[RacingMap] = []
        if map_manager is not None:
            self.update_from_manager(map_manager)

    @property
    def maps(self) -> List[RacingMap]:
        return list(self._maps)

    def size(self) -> int:
        return len(self._maps)

    def update_from_manager(self, map_manager: MapManager) -> None:
        """
        Replace the rotation with the manager's maps, sorted by name.

        The cursor stays on the current map if it is still known,
        otherwise the rotation starts over.
        """
        current = self.current()
        self._maps = sorted(map_manager.get_maps().values(), key=lambda m: m.name)

        self.current_index = -1
        if current is not None:
            for index, racing_map in enumerate(self._maps):
                if racing_map.name == current.name:
                    self.current_index = index
                    break
        logger.info(f"Rotation updated: {len(self._maps)} maps")

    def current(self) -> Optional[RacingMap]:
        """Map under the cursor, or None before the first next()."""
        if 0 <= self.current_index < len(self._maps):
            return self._maps[self.current_index]
        return None

    def next(self) -> Optional[RacingMap]:
        """Advance the cursor cyclically and return the map it lands on."""
        if not self._maps:
            logger.warning("No maps loaded, rotation cannot advance")
            return None
        if self.current_index >= len(self._maps) - 1:
            self.current_index = 0
        else:
            self.current_index += 1
        return self._maps[self.current_index]

    def go_to(self, index: int) -> None:
        """
        Make the following next() land on the 1-based ``index``.

        0 wraps to the last map. Anything outside 0..size() is ignored.
        """
        size = len(self._maps)
        if size == 0 or index < 0 or index > size:
            logger.debug(f"Ignoring rotation jump to {index} ({size} maps)")
            return
        target = (index - 1) % size
        self.current_index = target - 1
