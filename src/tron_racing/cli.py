# Area: Shared
"""
tron_racing.cli — Command-line interface
========================================

Replays a recorded event log through a RacingServer and prints the
resulting commands as JSON lines on stdout.

Usage:
    python -m tron_racing events.jsonl
    python -m tron_racing --config racing.json events.jsonl
    cat events.jsonl | python -m tron_racing -

Each input line is one event record, e.g.
    {"event": "CYCLE_CREATED", "args": ["racer", 0, 0, 0, 1]}
Blank lines and lines starting with '#' are skipped.
"""

import argparse
import json
import sys
from typing import IO, Iterable, List, Optional

from .config import load_config
from .errors import EventFormatError, TronRacingError
from .racing_server import RacingServer
from ._shared import (
    JsonLinesCommandSink,
    enable_quiet_mode,
    log_error,
    setup_logging,
)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="tron-racing",
        description="Tron Racing - replay host events through the racing server",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m tron_racing events.jsonl
  python -m tron_racing --config racing.json events.jsonl
  RACING_MAPS=a/race/one-1.aamap.xml python -m tron_racing events.jsonl
        """,
    )

    parser.add_argument(
        "events",
        help="Path to a JSON-lines event log, or '-' for stdin",
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to JSON config file",
    )

    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress log output on the terminal (file logging continues)",
    )

    parser.add_argument(
        "--summary",
        action="store_true",
        help="Print the leaderboard of every raced map when the replay ends",
    )

    return parser.parse_args(argv)


def read_events(lines: Iterable[str]):
    """Yield (line_number, record) pairs from JSON-lines input."""
    for number, line in enumerate(lines, start=1):
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        try:
            yield number, json.loads(line)
        except json.JSONDecodeError as e:
            raise EventFormatError("", line, f"line {number}: {e}") from e


def replay(server: RacingServer, lines: Iterable[str]) -> int:
    """
    Feed every event to the server.

    Returns:
        Number of events delivered
    """
    delivered = 0
    for _, record in read_events(lines):
        if server.handle_event(record):
            delivered += 1
    return delivered


def print_summary(server: RacingServer, out: IO[str]) -> None:
    for racing_map in server.rotation.maps:
        if not server.logs.has_log(racing_map.name):
            continue
        log = server.logs.get_log(racing_map.name)
        out.write(f"# {log.map_name} ({log.count()} ranked)\n")
        for record in log.records:
            out.write(f"#  {record.rank:>3}. {record.player} {record.time}\n")


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = parse_args(argv)

    try:
        config = load_config(args.config)
        setup_logging(log_file_path=config.log_file, level=config.log_level)
        if args.quiet:
            enable_quiet_mode()

        server = RacingServer(config, JsonLinesCommandSink(sys.stdout))
        if args.events == "-":
            replay(server, sys.stdin)
        else:
            with open(args.events, encoding="utf-8") as f:
                replay(server, f)
    except TronRacingError as e:
        log_error(e)
        return 1
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.summary:
        print_summary(server, sys.stdout)
    return 0
