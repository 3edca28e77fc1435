# Area: Round
"""
tron_racing._round.state_machine — Round phase state machine
============================================================

Tracks which phase the current round is in. The host can be attached
mid-round (spawns arriving before any ROUND_COMMENCING), so the
tracker uses forced transitions for events that may arrive out of order.
"""

import logging
from typing import Optional

from .enums import RoundEvent, RoundPhase

logger = logging.getLogger("tron_racing.round.state_machine")


# Valid state transitions: {current_phase: {event: next_phase}}
TRANSITIONS = {
    RoundPhase.IDLE: {
        RoundEvent.ROUND_COMMENCING: RoundPhase.COMMENCING,
    },
    RoundPhase.COMMENCING: {
        RoundEvent.ROUND_COMMENCING: RoundPhase.COMMENCING,
        RoundEvent.RACER_SPAWNED: RoundPhase.RACING,
        RoundEvent.ROUND_ENDED: RoundPhase.ENDED,
    },
    RoundPhase.RACING: {
        RoundEvent.ROUND_COMMENCING: RoundPhase.COMMENCING,
        RoundEvent.RACER_SPAWNED: RoundPhase.RACING,
        RoundEvent.ROUND_ENDED: RoundPhase.ENDED,
    },
    RoundPhase.ENDED: {
        RoundEvent.ROUND_COMMENCING: RoundPhase.COMMENCING,
    },
}


class RoundStateMachine:
    """
    State machine for one server's round phases.

    Attributes:
        current_phase: The phase the current round is in
        previous_phase: The phase before the last transition
    """

    def __init__(self):
        self.current_phase = RoundPhase.IDLE
        self.previous_phase: Optional[RoundPhase] = None

    def can_transition(self, event: RoundEvent) -> bool:
        return event in TRANSITIONS.get(self.current_phase, {})

    def transition(self, event: RoundEvent, force: bool = False) -> RoundPhase:
        """
        Execute a phase transition.

        Args:
            event: The event triggering the transition
            force: If True, allow transition even if not valid (out-of-order events)

        Returns:
            The new phase after transition

        Raises:
            ValueError: If the transition is not valid and force=False
        """
        if not self.can_transition(event):
            if not force:
                raise ValueError(
                    f"Invalid transition: {event.value} from {self.current_phase.value}"
                )
            logger.warning(
                f"Forced transition: {event.value} from {self.current_phase.value}"
            )
            for transitions in TRANSITIONS.values():
                if event in transitions:
                    return self._move_to(transitions[event])
            return self.current_phase

        return self._move_to(TRANSITIONS[self.current_phase][event])

    def is_racing(self) -> bool:
        return self.current_phase == RoundPhase.RACING

    def is_ended(self) -> bool:
        return self.current_phase == RoundPhase.ENDED

    def reset(self) -> None:
        self.current_phase = RoundPhase.IDLE
        self.previous_phase = None

    def _move_to(self, phase: RoundPhase) -> RoundPhase:
        if phase != self.current_phase:
            logger.debug(f"Round phase: {self.current_phase.value} → {phase.value}")
        self.previous_phase = self.current_phase
        self.current_phase = phase
        return phase
