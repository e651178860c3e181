"""Fixed gauge channel set — throttle, speed and rpm with their display ranges."""

from __future__ import annotations

from dataclasses import dataclass

from telemetry_replay.telemetry.models import NormalizedSample, numeric_or_zero


@dataclass(frozen=True)
class Channel:
    """A gauge channel and the range its dial covers."""

    name: str
    label: str
    unit: str
    min_value: float
    max_value: float

    def fraction(self, value: float) -> float:
        """Position of *value* on the dial, clamped to [0.0, 1.0]."""
        span = self.max_value - self.min_value
        if span <= 0:
            return 0.0
        return min(max((value - self.min_value) / span, 0.0), 1.0)


THROTTLE = Channel("throttle", "Throttle", "%", 0.0, 100.0)
SPEED = Channel("speed", "Speed", "km/h", 0.0, 300.0)
RPM = Channel("rpm", "Engine RPM", "rpm", 0.0, 14000.0)

GAUGE_CHANNELS: tuple[Channel, ...] = (THROTTLE, SPEED, RPM)


@dataclass(frozen=True)
class GaugeReading:
    """The value a gauge should show for one sample."""

    channel: Channel
    value: float
    fraction: float


def gauge_readings(sample: NormalizedSample) -> list[GaugeReading]:
    """Return one reading per gauge channel; missing values read as 0."""
    readings: list[GaugeReading] = []
    for channel in GAUGE_CHANNELS:
        value = numeric_or_zero(sample.get(channel.name))
        readings.append(GaugeReading(channel, value, channel.fraction(value)))
    return readings
