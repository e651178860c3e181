"""Playback of a loaded telemetry series.

Public API
----------
PlaybackEngine      - play/pause/scrub/speed state machine on a timer
PlaybackState       - immutable snapshot of index, playing flag and speed
PlaybackSpeed       - the four tick intervals (0.5x, 1x, 2x, 4x)
ReplaySession       - pipeline + engine for one recording
ThreadingScheduler  - wall-clock timers on daemon threads
ManualScheduler     - virtual clock advanced explicitly (tests, stepping)
"""

from telemetry_replay.playback.engine import PlaybackEngine
from telemetry_replay.playback.scheduler import ManualScheduler, ThreadingScheduler
from telemetry_replay.playback.session import ReplaySession
from telemetry_replay.playback.speeds import DEFAULT_SPEED, PlaybackSpeed
from telemetry_replay.playback.state import PlaybackState

__all__ = [
    "DEFAULT_SPEED",
    "ManualScheduler",
    "PlaybackEngine",
    "PlaybackSpeed",
    "PlaybackState",
    "ReplaySession",
    "ThreadingScheduler",
]
