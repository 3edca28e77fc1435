"""
main.py — Run a scripted racing round
=====================================

Drives a RacingServer through two rounds without a game server
attached, printing every command the server would send to the host.

    python main.py

To replay a recorded event log instead:

    RACING_MAPS=Lucifer/race/wiggles-1.0.aamap.xml \
        python -m tron_racing --summary events.jsonl
"""

import logging
from tron_racing import BufferedCommandSink, RacingConfig, RacingServer

# ── Setup logging (so you can see what's happening) ──
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    datefmt="%H:%M:%S",
)

# ── Configuration ──
config = RacingConfig(
    maps=[
        "Lucifer/race/wiggles-1.0.aamap.xml",
        "Lucifer/race/speedway-2.aamap.xml",
    ],
    log_file="",
    time_precision=2,
)

sink = BufferedCommandSink()
server = RacingServer(config, sink)


def send(event, *args):
    server.handle_event({"event": event, "args": list(args)})
    for command in sink.get_pending():
        print("  ->", *command)


# ── Two racers join ──
send("PLAYER_ENTERED", "ghost", "10.0.0.1", "Ghost")
send("PLAYER_ENTERED", "blaze", "10.0.0.2", "Blaze")

for round_times in ({"ghost": 41.27, "blaze": 39.8}, {"ghost": 37.015, "blaze": None}):
    send("ROUND_COMMENCING")
    for player in round_times:
        send("CYCLE_CREATED", player, 0.0, 0.0, 0.0, 1.0)
    for player, time in round_times.items():
        if time is None:
            send("DEATH_SUICIDE", player)
        else:
            send("TARGETZONE_PLAYER_ENTER", 1, 250.0, 500.0, player,
                 250.0, 498.5, 0.0, 1.0, time)

# ── Leaderboards ──
for racing_map in server.rotation.maps:
    log = server.logs.get_log(racing_map.name)
    print(f"{log.map_name}: {[(r.rank, r.player, str(r.time)) for r in log.records]}")
