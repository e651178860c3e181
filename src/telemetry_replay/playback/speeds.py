"""Playback speed options — tick intervals in milliseconds."""

from __future__ import annotations

from enum import IntEnum


class PlaybackSpeed(IntEnum):
    """The four selectable tick intervals.  Smaller interval = faster replay."""

    HALF = 500
    NORMAL = 200
    DOUBLE = 100
    QUADRUPLE = 50

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def interval_s(self) -> float:
        return self.value / 1000.0

    @classmethod
    def from_label(cls, label: str) -> PlaybackSpeed:
        """Look up a speed by its label, e.g. ``"2x"``.

        Raises
        ------
        ValueError
            If *label* is not one of the four labels.
        """
        for speed, text in _LABELS.items():
            if text == label.strip().lower():
                return speed
        raise ValueError(f"Unknown playback speed label: {label!r}")


_LABELS: dict[PlaybackSpeed, str] = {
    PlaybackSpeed.HALF: "0.5x",
    PlaybackSpeed.NORMAL: "1x",
    PlaybackSpeed.DOUBLE: "2x",
    PlaybackSpeed.QUADRUPLE: "4x",
}

DEFAULT_SPEED = PlaybackSpeed.NORMAL
