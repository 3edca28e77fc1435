# Area: Round
"""
tron_racing._round.enums — Round phase enums
============================================

Defines the phases of one racing round and the events that move a
round between them.
"""

from enum import Enum


class RoundPhase(Enum):
    """
    Phases of a racing round.

    State transitions:
    IDLE -> COMMENCING (on ROUND_COMMENCING)
    COMMENCING -> RACING (on RACER_SPAWNED)
    RACING -> ENDED (on ROUND_ENDED)
    COMMENCING, RACING or ENDED -> COMMENCING (on ROUND_COMMENCING)
    COMMENCING -> ENDED (on ROUND_ENDED)
    """
    IDLE = "IDLE"
    COMMENCING = "COMMENCING"
    RACING = "RACING"
    ENDED = "ENDED"


class RoundEvent(Enum):
    """
    Events that trigger round phase transitions.

    - ROUND_COMMENCING: host announced a new round
    - RACER_SPAWNED: a player's cycle was created
    - ROUND_ENDED: the round was ended (winner declared, racers stopped)
    """
    ROUND_COMMENCING = "ROUND_COMMENCING"
    RACER_SPAWNED = "RACER_SPAWNED"
    ROUND_ENDED = "ROUND_ENDED"
