# Area: Round
"""
tron_racing._round.player — Per-player session state
=====================================================

One PlayerSession exists for every player the tracker knows about.
The three round flags are cleared at the start of every round.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class PlayerSession:
    """
    Tracks one player's progress through the current round.

    Attributes:
        player_id: Player identity used by the host and the leaderboards
        display_name: Name shown in game, if the host reported one
        queues: Map queue credits
        alive: Cycle exists and has not died this round
        finished: Reached the goal this round
        racing: Spawned this round
    """
    player_id: str
    display_name: Optional[str] = None
    queues: int = 0
    alive: bool = False
    finished: bool = False
    racing: bool = False

    @property
    def still_racing(self) -> bool:
        """Alive and not yet through the goal."""
        return self.alive and not self.finished

    def reset_for_new_round(self) -> None:
        self.alive = False
        self.finished = False
        self.racing = False
