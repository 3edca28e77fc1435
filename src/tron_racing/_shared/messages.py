# Area: Shared
"""
tron_racing._shared.messages — Message texts
============================================

Plain text shapes for the messages sent through the CommandSink.
"""

from decimal import Decimal


def winner(player: str) -> str:
    return f"Winner: {player}"


def map_announce(map_name: str, position: int, total: int) -> str:
    return f"Now racing: {map_name} ({position}/{total})"


def map_record(map_name: str, player: str, time: Decimal) -> str:
    return f"New record on {map_name}: {player} in {time}s"


def player_data(map_name: str, time: Decimal, rank: int, total: int) -> str:
    return f"{map_name}: your best is {time}s, rank {rank} of {total}"


def player_data_unranked(map_name: str, total: int) -> str:
    return f"{map_name}: no time yet, {total} ranked"


def finish(time: Decimal, delta: Decimal, first_time: bool, rank: int, total: int) -> str:
    """Feedback line after a player reaches the goal."""
    if first_time:
        result = "first time on this map"
    elif delta < 0:
        result = f"new personal best by {-delta}s"
    elif delta > 0:
        result = f"{delta}s off your best"
    else:
        result = "matched your best"
    return f"Finished in {time}s, {result}. Rank {rank} of {total}"
