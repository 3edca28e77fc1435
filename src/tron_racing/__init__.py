"""
tron_racing — Time-trial racing rounds and leaderboards
=======================================================

Round and leaderboard logic for a time-trial racing mode hosted by an
external game server. The host delivers events (spawns, goal entries,
deaths, ...) and receives commands (kill, declare winner, messages).

Quick Start:
    from tron_racing import RacingServer, RacingConfig, BufferedCommandSink
    sink = BufferedCommandSink()
    server = RacingServer(RacingConfig(maps=["me/race/track1-1.0.aamap.xml"]), sink)
    server.handle_event({"event": "ROUND_COMMENCING", "args": []})
    for command in sink.get_pending():
        ...

Building blocks:
    MapLog        ranked best times for one map
    Rotation      cyclic map sequence with index jumps
    PlayerTracker round membership, flags, counters and winner
"""

from .callbacks import ServerEventListener, CommandSink
from .config import RacingConfig, load_config
from .errors import (
    TronRacingError,
    ConfigurationError,
    EventFormatError,
)
from .types import RaceEvent, PlayerRankInfo, FinishReport
from .racing_server import RacingServer
from ._leaderboard import MapLog, PlayerRecord, LogManager
from ._maps import RacingMap, MapManager, Rotation
from ._round import PlayerTracker, PlayerSession, RoundPhase
from ._shared import (
    BufferedCommandSink,
    JsonLinesCommandSink,
    EventDispatcher,
    setup_logging,
)

__all__ = [
    # Interfaces
    "ServerEventListener",
    "CommandSink",
    # Config
    "RacingConfig",
    "load_config",
    # Errors
    "TronRacingError",
    "ConfigurationError",
    "EventFormatError",
    # Types
    "RaceEvent",
    "PlayerRankInfo",
    "FinishReport",
    # Components
    "RacingServer",
    "MapLog",
    "PlayerRecord",
    "LogManager",
    "RacingMap",
    "MapManager",
    "Rotation",
    "PlayerTracker",
    "PlayerSession",
    "RoundPhase",
    "BufferedCommandSink",
    "JsonLinesCommandSink",
    "EventDispatcher",
    "setup_logging",
]
__version__ = "1.0.0"
