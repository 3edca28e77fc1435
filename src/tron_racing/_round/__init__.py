# Area: Round
"""
Round lifecycle tracking.

This package handles:
- Player membership and per-round flags
- Round phase transitions
- Winner determination and end-of-round kills
"""

from .enums import RoundPhase, RoundEvent
from .player import PlayerSession
from .state_machine import RoundStateMachine
from .tracker import PlayerTracker

__all__ = [
    "RoundPhase",
    "RoundEvent",
    "PlayerSession",
    "RoundStateMachine",
    "PlayerTracker",
]
