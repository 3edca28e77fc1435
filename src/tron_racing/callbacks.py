# Area: Interfaces
"""
tron_racing.callbacks — Inbound event and outbound command interfaces
=====================================================================

The host game server talks to the racing logic through two fixed
capability sets:

- ServerEventListener: notifications the host delivers (round start,
  joins, spawns, goal entries, deaths, ...). Implementations are
  registered with an EventDispatcher by direct reference.
- CommandSink: effects the racing logic asks the host to perform
  (kill a cycle, declare the round winner, print messages).

All listener methods are called synchronously, one at a time, in the
order the host delivers events.
"""

from abc import ABC, abstractmethod


class ServerEventListener(ABC):
    """
    Abstract base class for receivers of host game events.

    Argument order follows the host's event lines. Positions and
    directions are floats in map units; ``time`` is seconds since the
    round started.
    """

    # ──────────────────────────────────────────────────────────────
    # Round lifecycle
    # ──────────────────────────────────────────────────────────────
    @abstractmethod
    def round_commencing(self) -> None:
        """Called when a new round is about to start."""
        ...

    # ──────────────────────────────────────────────────────────────
    # Membership
    # ──────────────────────────────────────────────────────────────
    @abstractmethod
    def player_entered(self, name: str, ip: str, display_name: str) -> None:
        """Called when a player joins the server."""
        ...

    @abstractmethod
    def player_left(self, name: str, ip: str) -> None:
        """Called when a player leaves the server."""
        ...

    @abstractmethod
    def player_renamed(
        self, old_name: str, new_name: str, ip: str, display_name: str
    ) -> None:
        """Called when a player's identity changes (login, nick change)."""
        ...

    @abstractmethod
    def online_player(self, name: str) -> None:
        """Called for every player the host lists as currently online."""
        ...

    # ──────────────────────────────────────────────────────────────
    # Racing
    # ──────────────────────────────────────────────────────────────
    @abstractmethod
    def cycle_created(
        self, player: str, x: float, y: float, x_dir: float, y_dir: float
    ) -> None:
        """Called when a player's cycle spawns and their race begins."""
        ...

    @abstractmethod
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
        """Called when a player drives into the goal zone."""
        ...

    # ──────────────────────────────────────────────────────────────
    # Deaths
    # ──────────────────────────────────────────────────────────────
    @abstractmethod
    def death_suicide(self, player: str) -> None:
        ...

    @abstractmethod
    def death_frag(self, victim: str, killer: str) -> None:
        ...

    @abstractmethod
    def death_deathzone(self, player: str) -> None:
        ...

    @abstractmethod
    def death_rubberzone(self, player: str) -> None:
        ...

    @abstractmethod
    def player_killed(
        self, player: str, ip: str, x: float, y: float, reason: float, cause: float
    ) -> None:
        """Called when the host kills a player's cycle (admin or script kill)."""
        ...


class CommandSink(ABC):
    """
    Abstract base class for the outbound command interface.

    Implementations forward each command to the host. Commands are
    fire-and-forget: nothing is returned and nothing is retried.
    """

    @abstractmethod
    def kill(self, player: str) -> None:
        """Stop a player's cycle."""
        ...

    @abstractmethod
    def declare_round_winner(self, player: str) -> None:
        ...

    @abstractmethod
    def center_message(self, text: str) -> None:
        """Show text in the middle of every player's screen."""
        ...

    @abstractmethod
    def console_message(self, text: str) -> None:
        """Print text to every player's console."""
        ...

    @abstractmethod
    def player_message(self, player: str, text: str) -> None:
        """Print text to one player's console."""
        ...
