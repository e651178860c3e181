"""Playback state snapshot."""

from __future__ import annotations

from dataclasses import dataclass

from telemetry_replay.playback.speeds import DEFAULT_SPEED


@dataclass(frozen=True)
class PlaybackState:
    """Where playback is and whether it is advancing.

    Instances are immutable; the engine replaces its state on every
    transition, so a snapshot handed to a consumer never changes under it.
    """

    current_index: int = 0
    """Index into the series, in ``[0, N-1]`` (0 for an empty series)."""

    is_playing: bool = False

    speed_ms: int = int(DEFAULT_SPEED)
    """Tick interval in milliseconds."""
