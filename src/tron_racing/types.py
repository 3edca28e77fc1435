"""
tron_racing.types — TypedDict schemas for events and rank feedback
==================================================================

Documents the structure of event records accepted by EventDispatcher
and of the reports RacingServer returns after finishes and map changes.
All types are exported from the main package:

    from tron_racing import RaceEvent, FinishReport, PlayerRankInfo
"""

from decimal import Decimal
from typing import Any, Dict, List, Optional, TypedDict, Union


class RaceEvent(TypedDict):
    """One host event.

    Fields
    ------
    event : str
        Host event name, e.g. "CYCLE_CREATED".
    args : list or dict
        Positional arguments, or keyword arguments by listener parameter name.
    """
    event: str
    args: Union[List[Any], Dict[str, Any]]


class PlayerRankInfo(TypedDict):
    """A player's standing on the active map."""
    player: str
    map_name: str
    time: Optional[Decimal]     # None when unranked
    rank: Optional[int]         # None when unranked
    total_ranks: int


class FinishReport(TypedDict):
    """Result of recording one goal entry."""
    player: str
    map_name: str
    time: Decimal               # time of this run
    delta: Decimal              # run time minus previous best, 0 on first entry
    first_time: bool
    rank: int
    total_ranks: int
    round_winner: bool          # first to reach the goal this round
