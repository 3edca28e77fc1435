# Area: Round
"""
tron_racing._round.tracker — Round and player tracker
=====================================================

Follows every player through enter/spawn/race/finish/death and keeps
the per-round counters. Also decides the round winner and stops any
racer still on the track when the round ends.

Winner rule: the first player to reach the goal this round wins. If
nobody reached it, the first player in join order who raced wins.
"""

from __future__ import annotations
import logging
from typing import Dict, List, Optional

from ..callbacks import CommandSink, ServerEventListener
from .enums import RoundEvent
from .player import PlayerSession
from .state_machine import RoundStateMachine
from .._shared import messages

logger = logging.getLogger("tron_racing.round")

class PlayerTracker(ServerEventListener):
    """
    Tracks membership and round state for all players on the server.

    Attributes:
        commands: Outbound command sink
        state_machine: Round phase tracker
        winner: First player to reach the goal this round ("" if none)
    """

    def __init__(self, commands: CommandSink):
        self.commands = commands
        self.state_machine = RoundStateMachine()
        self.winner = ""
        self._players: Dict[str, PlayerSession] = {}
        self._round_finished = 0
        self._round_racers = 0

    # ── Membership ───────────────────────────────────────────────

    @property
    def players(self) -> List[PlayerSession]:
        """Tracked players in join order."""
        return list(self._players.values())

    def player_from_id(self, player_id: str) -> Optional[PlayerSession]:
        return self._players.get(player_id)

    def add_player(self, session: PlayerSession) -> bool:
        if session.player_id in self._players:
            return False
        self._players[session.player_id] = session
        return True

    def remove_player(self, player_id: str) -> bool:
        return self._players.pop(player_id, None) is not None

    def reset(self) -> None:
        """Forget every tracked player and return to the idle phase."""
        self._players = {}
        self._round_finished = 0
        self._round_racers = 0
        self.winner = ""
        self.state_machine.reset()

    def _ensure_player(self, player_id: str) -> PlayerSession:
        session = self._players.get(player_id)
        if session is None:
            session = PlayerSession(player_id)
            self.add_player(session)
            logger.warning(
                f"Player {player_id} created without entering, "
                f"was the server attached during gameplay?"
            )
        return session

    def _relabel(self, old_id: str, new_id: str) -> None:
        session = self._players[old_id]
        session.player_id = new_id
        relabelled: Dict[str, PlayerSession] = {}
        for player_id, existing in self._players.items():
            if player_id == old_id:
                relabelled[new_id] = session
            elif player_id != new_id:
                relabelled[player_id] = existing
        self._players = relabelled
        if self.winner == old_id:
            self.winner = new_id

    # ── Round counters ───────────────────────────────────────────

    def players_alive(self) -> int:
        return sum(1 for p in self._players.values() if p.alive)

    def players_finished(self) -> int:
        """Players through the goal this round."""
        return self._round_finished

    def players_racing(self) -> int:
        """Players alive and not yet finished."""
        return sum(1 for p in self._players.values() if p.still_racing)

    def players_started(self) -> int:
        """Players who spawned this round."""
        return self._round_racers

    def set_finished(self, player_id: str) -> bool:
        """
        Mark a player as through the goal.

        Returns:
            True the first time a known player finishes this round
        """
        session = self._players.get(player_id)
        if session is None or session.finished:
            return False
        session.finished = True
        self._round_finished += 1
        return True

    # ── Round end ────────────────────────────────────────────────

    def round_winner(self) -> Optional[str]:
        """The player end_round() would declare, or None."""
        if self.winner and self.winner in self._players:
            return self.winner
        for session in self._players.values():
            if session.racing:
                return session.player_id
        return None

    def declare_winner(self) -> Optional[str]:
        """Announce the winner on screen, then end the round."""
        winner = self.round_winner()
        if winner is not None:
            self.commands.center_message(messages.winner(winner))
        return self.end_round()

    def end_round(self) -> Optional[str]:
        """
        Declare the round winner and stop everyone still racing.

        Returns:
            The declared winner, or None if nobody raced
        """
        winner = self.round_winner()
        if winner is not None:
            self.commands.declare_round_winner(winner)
            logger.info(f"Round winner: {winner}")

        for session in self._players.values():
            if session.racing and session.still_racing:
                self.commands.kill(session.player_id)

        self.state_machine.transition(RoundEvent.ROUND_ENDED, force=True)
        return winner

    def kill_all(self) -> None:
        for session in self._players.values():
            self.commands.kill(session.player_id)

    # ── ServerEventListener ──────────────────────────────────────

    def round_commencing(self) -> None:
        self._round_finished = 0
        self._round_racers = 0
        self.winner = ""
        for session in self._players.values():
            session.reset_for_new_round()
        self.state_machine.transition(RoundEvent.ROUND_COMMENCING)

    def player_entered(self, name: str, ip: str, display_name: str) -> None:
        session = self._players.get(name)
        if session is None:
            session = PlayerSession(name)
            self.add_player(session)
        session.display_name = display_name

    def player_left(self, name: str, ip: str) -> None:
        self.remove_player(name)

    def player_renamed(
        self, old_name: str, new_name: str, ip: str, display_name: str
    ) -> None:
        if old_name in self._players:
            self._relabel(old_name, new_name)
        elif new_name not in self._players:
            self.add_player(PlayerSession(new_name))
        self._players[new_name].display_name = display_name

    def online_player(self, name: str) -> None:
        self._ensure_player(name)

    def cycle_created(
        self, player: str, x: float, y: float, x_dir: float, y_dir: float
    ) -> None:
        session = self._ensure_player(player)
        if self.state_machine.is_ended():
            logger.debug(f"Round already ended, ignoring spawn of {player}")
            return
        session.alive = True
        if not session.racing:
            session.racing = True
            self._round_racers += 1
        self.state_machine.transition(RoundEvent.RACER_SPAWNED, force=True)

    def target_zone_player_enter(
        self,
        zone_id: int,
        zone_x: float,
        zone_y: float,
        player: str,
        player_x: float,
        player_y: float,
        player_x_dir: float,
        player_y_dir: float,
        time: float,
    ) -> None:
        if player not in self._players:
            logger.warning(f"Goal entered by unknown player {player}, ignoring")
            return
        if not self.winner:
            self.winner = player
        self.set_finished(player)

    def death(self, player: str) -> None:
        session = self._players.get(player)
        if session is not None:
            session.alive = False

    def death_suicide(self, player: str) -> None:
        self.death(player)

    def death_frag(self, victim: str, killer: str) -> None:
        self.death(victim)

    def death_deathzone(self, player: str) -> None:
        self.death(player)

    def death_rubberzone(self, player: str) -> None:
        self.death(player)

    def player_killed(
        self, player: str, ip: str, x: float, y: float, reason: float, cause: float
    ) -> None:
        self.death(player)
