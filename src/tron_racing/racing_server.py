# Area: Server
"""
tron_racing.racing_server — Racing server coordinator
=====================================================

Wires the map rotation, the per-map leaderboards and the round
tracker together behind one ServerEventListener.

Per round:
1. ROUND_COMMENCING resets the tracker, advances the rotation, selects
   the map's leaderboard and tells every player their standing.
2. Goal entries record the run time on the active leaderboard and send
   the player their time, rank and improvement.
3. Once everyone who spawned has died or finished, the round ends:
   the winner is declared and remaining racers are stopped.
"""

from __future__ import annotations
import logging
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, List, Optional

from .callbacks import CommandSink, ServerEventListener
from .config import RacingConfig
from .errors import EventFormatError
from .types import FinishReport, PlayerRankInfo
from ._leaderboard import LogManager, to_decimal
from ._maps import MapManager, RacingMap, Rotation
from ._round import PlayerTracker
from ._shared import EventDispatcher, messages

logger = logging.getLogger("tron_racing.server")


class RacingServer(ServerEventListener):
    """
    Coordinates rotation, leaderboards and round tracking.

    Usage:
        server = RacingServer(config, BufferedCommandSink())
        server.handle_event({"event": "ROUND_COMMENCING", "args": []})
    """

    def __init__(
        self,
        config: RacingConfig,
        commands: CommandSink,
        map_manager: Optional[MapManager] = None,
    ):
        self.config = config
        self.commands = commands
        if map_manager is None:
            map_manager = MapManager.from_resources(config.maps)
        self.map_manager = map_manager
        self.rotation = Rotation(self.map_manager)
        self.logs = LogManager()
        self.tracker = PlayerTracker(commands)
        self.current_map: Optional[RacingMap] = None
        self._dispatcher = EventDispatcher(self)

    def handle_event(self, record: Any) -> bool:
        """Dispatch one host event record (see EventDispatcher)."""
        return self._dispatcher.dispatch(record)

    # ── Maps ─────────────────────────────────────────────────────

    def reload_maps(self) -> None:
        """Pick up maps added to or removed from the map manager."""
        self.rotation.update_from_manager(self.map_manager)

    def go_to(self, index: int) -> None:
        """Queue the 1-based rotation position for the next round."""
        self.rotation.go_to(index)

    def _advance_map(self) -> None:
        racing_map = self.rotation.next()
        if racing_map is None:
            return
        self.current_map = racing_map
        self.logs.select(racing_map.name)
        self.commands.console_message(
            messages.map_announce(
                racing_map.name, self.rotation.current_index + 1, self.rotation.size()
            )
        )
        logger.info(f"Map: {racing_map.name}")

    def notify_map_data(self) -> List[PlayerRankInfo]:
        """Tell every tracked player their standing on the active map."""
        log = self.logs.current_log
        if log is None:
            return []

        total = log.count()
        infos: List[PlayerRankInfo] = []
        for session in self.tracker.players:
            rank = log.get_rank(session.player_id)
            time = log.get_time(session.player_id)
            if rank is not None:
                text = messages.player_data(log.map_name, time, rank, total)
            else:
                text = messages.player_data_unranked(log.map_name, total)
            self.commands.player_message(session.player_id, text)
            infos.append(PlayerRankInfo(
                player=session.player_id,
                map_name=log.map_name,
                time=time,
                rank=rank,
                total_ranks=total,
            ))
        return infos

    # ── Finishes and round end ───────────────────────────────────

    def _run_time(self, time: Any) -> Decimal:
        """
        Convert a host-reported time to a Decimal at the configured precision.

        Raises:
            EventFormatError: If the time is not a finite number
        """
        step = Decimal(10) ** -self.config.time_precision
        try:
            run_time = to_decimal(time).quantize(step, rounding=ROUND_HALF_UP)
        except InvalidOperation as e:
            raise EventFormatError(
                "TARGETZONE_PLAYER_ENTER", {"time": time}, f"invalid finish time {time!r}"
            ) from e
        if not run_time.is_finite():
            raise EventFormatError(
                "TARGETZONE_PLAYER_ENTER", {"time": time}, f"invalid finish time {time!r}"
            )
        return run_time

    def record_finish(self, player: str, time: Any) -> Optional[FinishReport]:
        """
        Record a run on the active leaderboard and send rank feedback.

        Returns:
            The finish report, or None when no map is active

        Raises:
            EventFormatError: If the time is not a finite number
        """
        log = self.logs.current_log
        if log is None:
            logger.warning(f"No active map, finish of {player} not recorded")
            return None

        run_time = self._run_time(time)
        first_time = log.get_rank(player) is None
        delta = log.update_record(player, run_time)
        rank = log.get_rank(player)
        total = log.count()

        self.commands.player_message(
            player, messages.finish(run_time, delta, first_time, rank, total)
        )
        if rank == 1 and (first_time or delta < 0):
            self.commands.console_message(messages.map_record(log.map_name, player, run_time))

        return FinishReport(
            player=player,
            map_name=log.map_name,
            time=run_time,
            delta=delta,
            first_time=first_time,
            rank=rank,
            total_ranks=total,
            round_winner=self.tracker.winner == player,
        )

    def check_round_end(self) -> Optional[str]:
        """
        End the round once every racer has died or finished.

        Returns:
            The declared winner if the round was ended now
        """
        if not self.config.end_round_when_idle:
            return None
        if not self.tracker.state_machine.is_racing():
            return None
        if self.tracker.players_started() == 0 or self.tracker.players_racing() > 0:
            return None

        if self.config.announce_winner:
            return self.tracker.declare_winner()
        return self.tracker.end_round()

    # ── ServerEventListener ──────────────────────────────────────

    def round_commencing(self) -> None:
        self.tracker.round_commencing()
        self._advance_map()
        self.notify_map_data()

    def player_entered(self, name: str, ip: str, display_name: str) -> None:
        self.tracker.player_entered(name, ip, display_name)

    def player_left(self, name: str, ip: str) -> None:
        self.tracker.player_left(name, ip)
        self.check_round_end()

    def player_renamed(
        self, old_name: str, new_name: str, ip: str, display_name: str
    ) -> None:
        self.tracker.player_renamed(old_name, new_name, ip, display_name)
        if old_name != new_name:
            self.logs.rename_player(old_name, new_name)

    def online_player(self, name: str) -> None:
        self.tracker.online_player(name)

    def cycle_created(
        self, player: str, x: float, y: float, x_dir: float, y_dir: float
    ) -> None:
        self.tracker.cycle_created(player, x, y, x_dir, y_dir)

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
        session = self.tracker.player_from_id(player)
        counted = session is not None and not session.finished
        # Convert first so a bad time leaves the tracker untouched
        run_time = self._run_time(time) if counted else None
        self.tracker.target_zone_player_enter(
            zone_id, zone_x, zone_y, player,
            player_x, player_y, player_x_dir, player_y_dir, time,
        )
        if not counted:
            return
        self.record_finish(player, run_time)
        self.check_round_end()

    def death_suicide(self, player: str) -> None:
        self.tracker.death_suicide(player)
        self.check_round_end()

    def death_frag(self, victim: str, killer: str) -> None:
        self.tracker.death_frag(victim, killer)
        self.check_round_end()

    def death_deathzone(self, player: str) -> None:
        self.tracker.death_deathzone(player)
        self.check_round_end()

    def death_rubberzone(self, player: str) -> None:
        self.tracker.death_rubberzone(player)
        self.check_round_end()

    def player_killed(
        self, player: str, ip: str, x: float, y: float, reason: float, cause: float
    ) -> None:
        self.tracker.player_killed(player, ip, x, y, reason, cause)
        self.check_round_end()
