# Area: Leaderboard
"""
tron_racing._leaderboard.map_log — Per-map leaderboard
======================================================

Holds the ranked list of best completion times for one map.
Records are kept in ascending time order and a lookup index from
player id to record is rebuilt after every reordering, so reads of
rank and time are O(1) and always agree with the ordering.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, List, Optional, Tuple, Union

logger = logging.getLogger("tron_racing.leaderboard")

TimeValue = Union[Decimal, int, float, str]


def to_decimal(value: TimeValue) -> Decimal:
    """Convert a host-reported time to an exact Decimal."""
    if isinstance(value, Decimal):
        return value
    # str() first so that floats keep their shortest repr, not binary noise
    return Decimal(str(value))


@dataclass
class PlayerRecord:
    """
    One player's best time on a map.

    Attributes:
        player: Player identity the time belongs to
        time: Best completion time
        rank: 1-based position in the map's ordering (0 until ranked)
    """

    player: str
    time: Decimal
    rank: int = 0


class MapLog:
    """
    Leaderboard for a single map.

    Usage:
        log = MapLog("track1")
        log.update_record("A", Decimal("10.5"))   # -> Decimal("0")
        log.get_rank("A")                         # -> 1
    """

    def __init__(self, map_name: str):
        self.map_name = map_name
        self._records: List[PlayerRecord] = []
        self._ranks: Dict[str, PlayerRecord] = {}

    @property
    def records(self) -> Tuple[PlayerRecord, ...]:
        """Records in rank order (read-only view)."""
        return tuple(self._records)

    def update_record(self, player: str, time: TimeValue) -> Decimal:
        """
        Record a completion time for a player.

        A first entry is inserted and ranked, and the returned delta is
        zero. For an existing entry the delta is ``new - old``; only a
        strictly faster time replaces the stored one and reorders the log.

        Args:
            player: The player id
            time: The completion time

        Returns:
            Time difference, negative for an improvement
        """
        new_time = to_decimal(time)
        existing = self._ranks.get(player)

        if existing is None:
            self._records.append(PlayerRecord(player=player, time=new_time))
            logger.debug(f"[{self.map_name}] New record for {player}: {new_time}")
            self.sort()
            return Decimal(0)

        difference = new_time - existing.time
        if difference < 0:
            existing.time = new_time
            self.sort()
        return difference

    def get_rank(self, player: str) -> Optional[int]:
        """Rank of a player, or None when they have no record."""
        record = self._ranks.get(player)
        if record is None:
            return None
        return record.rank

    def get_time(self, player: str) -> Optional[Decimal]:
        """Best time of a player, or None when they have no record."""
        record = self._ranks.get(player)
        if record is None:
            return None
        return record.time

    def get_player_from_rank(self, rank: int) -> Optional[PlayerRecord]:
        if 1 <= rank <= len(self._records):
            return self._records[rank - 1]
        return None

    def rename_record(self, player: str, new_player: str) -> bool:
        """
        Move a player's record to a new id, keeping rank and time.

        Returns:
            False if the old id has no record or the new id already has one
        """
        record = self._ranks.get(player)
        if record is None:
            return False
        if player == new_player:
            return True
        if new_player in self._ranks:
            logger.warning(
                f"[{self.map_name}] Cannot rename {player} to {new_player}: record exists"
            )
            return False

        record.player = new_player
        del self._ranks[player]
        self._ranks[new_player] = record
        return True

    def count(self) -> int:
        """Number of ranked players on this map."""
        return len(self._ranks)

    def sort(self) -> None:
        """Re-establish ascending time order and rebuild the rank index."""
        # list.sort is stable: equal times keep the order they were set in
        self._records.sort(key=lambda r: r.time)
        self._cache()
        logger.debug(f"[{self.map_name}] Sorted {len(self._records)} records")

    def _cache(self) -> None:
        ranks: Dict[str, PlayerRecord] = {}
        for index, record in enumerate(self._records):
            record.rank = index + 1
            ranks[record.player] = record
        self._ranks = ranks

    def __len__(self) -> int:
        return self.count()

    def __repr__(self) -> str:
        return f"MapLog(map_name={self.map_name!r}, count={self.count()})"
