"""Pydantic request/response schemas for the replay API."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    version: str


class SeriesSummary(BaseModel):
    sample_count: int
    columns: list[str]


class StateResponse(BaseModel):
    current_index: int
    is_playing: bool
    speed_ms: int
    sample_count: int


class ScrubRequest(BaseModel):
    index: int


class SpeedRequest(BaseModel):
    speed_ms: int


class SpeedOption(BaseModel):
    speed_ms: int
    label: str


class GaugeResponse(BaseModel):
    name: str
    label: str
    unit: str
    value: float
    min_value: float
    max_value: float
    fraction: float


class CurrentResponse(BaseModel):
    state: StateResponse
    sample: dict[str, Any]
    gauges: list[GaugeResponse]


class TrackPoint(BaseModel):
    x: float
    y: float


class ChannelResponse(BaseModel):
    name: str
    time: list[Any]
    values: list[Any]
