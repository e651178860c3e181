"""Console replay of a recorded telemetry CSV.

Prints one line per tick until the last sample is reached.  Press Ctrl+C to
stop early.

Usage:
    uv run python scripts/replay_session.py session.csv
    uv run python scripts/replay_session.py session.csv --speed 4x --start 120
    uv run python scripts/replay_session.py session.csv --verbose
"""

from __future__ import annotations

import argparse
import logging
import sys
import threading

from dotenv import load_dotenv

load_dotenv()

from telemetry_replay.playback.session import ReplaySession  # noqa: E402
from telemetry_replay.playback.speeds import PlaybackSpeed  # noqa: E402
from telemetry_replay.playback.state import PlaybackState  # noqa: E402
from telemetry_replay.telemetry.channels import gauge_readings  # noqa: E402
from telemetry_replay.telemetry.reader import TelemetryReadError  # noqa: E402


def _format_line(session: ReplaySession, state: PlaybackState) -> str:
    sample = session.current_sample()
    gauges = "  ".join(
        f"{r.channel.name}={r.value:.1f}{r.channel.unit}"
        for r in gauge_readings(sample)
    )
    return f"[{state.current_index:>6}] t={sample.time!s:>8}  {gauges}"


def main() -> None:
    ap = argparse.ArgumentParser(description="Replay a telemetry CSV in the terminal")
    ap.add_argument("path", help="Session CSV file")
    ap.add_argument(
        "--speed",
        default=PlaybackSpeed.NORMAL.label,
        choices=[s.label for s in PlaybackSpeed],
        help="Playback speed",
    )
    ap.add_argument("--start", type=int, default=0, help="Sample index to start from")
    ap.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = ap.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(asctime)s %(name)s %(message)s")

    finished = threading.Event()
    session: ReplaySession

    def _on_tick(state: PlaybackState) -> None:
        print(_format_line(session, state), flush=True)
        if state.current_index >= len(session.series) - 1:
            finished.set()

    session = ReplaySession(speed=PlaybackSpeed.from_label(args.speed), on_tick=_on_tick)
    try:
        series = session.load_file(args.path)
    except TelemetryReadError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        sys.exit(1)

    if not series:
        print("No samples with a time value; nothing to replay.")
        return

    session.scrub(args.start)
    print(f"Loaded {len(series)} sample(s). Columns: {', '.join(series.columns())}")
    print(_format_line(session, session.state), flush=True)
    if session.state.current_index >= len(series) - 1:
        return

    session.play()
    try:
        finished.wait()
    except KeyboardInterrupt:
        pass
    finally:
        session.close()
        print("\nReplay stopped.")


if __name__ == "__main__":
    main()
