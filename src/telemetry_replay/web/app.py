"""FastAPI application — the replay API a dashboard polls and drives."""

from __future__ import annotations

import logging
import os
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import Depends, FastAPI, HTTPException, Request

from telemetry_replay.playback.session import ReplaySession
from telemetry_replay.playback.speeds import PlaybackSpeed
from telemetry_replay.telemetry.channels import gauge_readings
from telemetry_replay.telemetry.reader import TelemetryReadError
from telemetry_replay.web.schemas import (
    ChannelResponse,
    CurrentResponse,
    GaugeResponse,
    HealthResponse,
    ScrubRequest,
    SeriesSummary,
    SpeedOption,
    SpeedRequest,
    StateResponse,
    TrackPoint,
)

load_dotenv()  # loads .env from project root; must run before env vars are consumed

_logger = logging.getLogger(__name__)

_VERSION = "0.1.0"

# ---------------------------------------------------------------------------
# Session
# ---------------------------------------------------------------------------

_session: ReplaySession | None = None


def get_session() -> ReplaySession:
    """Return the process-wide session, creating it on first use."""
    global _session
    if _session is None:
        _session = ReplaySession()
    return _session


def _preload(session: ReplaySession) -> None:
    path = os.environ.get("TELEMETRY_REPLAY_CSV", "")
    if not path:
        return
    try:
        series = session.load_file(path)
    except TelemetryReadError as exc:
        _logger.warning("Could not preload %s: %s", path, exc)
        return
    _logger.info("Preloaded %d sample(s) from %s", len(series), path)


@asynccontextmanager
async def _lifespan(_app: FastAPI) -> AsyncIterator[None]:
    _preload(get_session())
    yield
    if _session is not None:
        _session.close()


# ---------------------------------------------------------------------------
# App setup
# ---------------------------------------------------------------------------

app = FastAPI(title="Telemetry Replay", version=_VERSION, lifespan=_lifespan)


def _state_response(session: ReplaySession) -> StateResponse:
    state = session.state
    return StateResponse(
        current_index=state.current_index,
        is_playing=state.is_playing,
        speed_ms=state.speed_ms,
        sample_count=len(session.series),
    )


# ---------------------------------------------------------------------------
# Endpoints — series
# ---------------------------------------------------------------------------


@app.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(status="ok", version=_VERSION)


@app.post("/api/session/upload", response_model=SeriesSummary)
async def upload(request: Request, session: ReplaySession = Depends(get_session)) -> SeriesSummary:
    """Install the CSV in the request body as the new series."""
    body = await request.body()
    try:
        text = body.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise HTTPException(status_code=422, detail=f"Body is not UTF-8 text: {exc}") from exc

    series = session.load_text(text)
    return SeriesSummary(sample_count=len(series), columns=series.columns())


@app.get("/api/session/series")
def series_samples(session: ReplaySession = Depends(get_session)) -> list[dict]:
    """Every sample, for history/path rendering."""
    return [sample.to_dict() for sample in session.series]


@app.get("/api/session/track", response_model=list[TrackPoint])
def track(session: ReplaySession = Depends(get_session)) -> list[TrackPoint]:
    return [TrackPoint(x=x, y=y) for x, y in session.series.track_points()]


@app.get("/api/session/channels/{name}", response_model=ChannelResponse)
def channel(name: str, session: ReplaySession = Depends(get_session)) -> ChannelResponse:
    """One channel against time, e.g. throttle for the throttle-vs-time chart."""
    series = session.series
    if not series or name not in series.columns():
        raise HTTPException(status_code=404, detail=f"Unknown channel: {name!r}")
    return ChannelResponse(name=name, time=series.column("time"), values=series.column(name))


@app.get("/api/session/current", response_model=CurrentResponse)
def current(session: ReplaySession = Depends(get_session)) -> CurrentResponse:
    """Playback state, the current sample and its gauge readings."""
    sample = session.current_sample()
    gauges = [
        GaugeResponse(
            name=r.channel.name,
            label=r.channel.label,
            unit=r.channel.unit,
            value=r.value,
            min_value=r.channel.min_value,
            max_value=r.channel.max_value,
            fraction=r.fraction,
        )
        for r in gauge_readings(sample)
    ]
    return CurrentResponse(state=_state_response(session), sample=sample.to_dict(), gauges=gauges)


# ---------------------------------------------------------------------------
# Endpoints — transport
# ---------------------------------------------------------------------------


@app.get("/api/playback/state", response_model=StateResponse)
def playback_state(session: ReplaySession = Depends(get_session)) -> StateResponse:
    return _state_response(session)


@app.get("/api/playback/speeds", response_model=list[SpeedOption])
def speeds() -> list[SpeedOption]:
    return [SpeedOption(speed_ms=int(s), label=s.label) for s in PlaybackSpeed]


@app.post("/api/playback/play", response_model=StateResponse)
def play(session: ReplaySession = Depends(get_session)) -> StateResponse:
    session.play()
    return _state_response(session)


@app.post("/api/playback/pause", response_model=StateResponse)
def pause(session: ReplaySession = Depends(get_session)) -> StateResponse:
    session.pause()
    return _state_response(session)


@app.post("/api/playback/scrub", response_model=StateResponse)
def scrub(req: ScrubRequest, session: ReplaySession = Depends(get_session)) -> StateResponse:
    """Jump to ``req.index`` (clamped); always pauses."""
    session.scrub(req.index)
    return _state_response(session)


@app.post("/api/playback/speed", response_model=StateResponse)
def set_speed(req: SpeedRequest, session: ReplaySession = Depends(get_session)) -> StateResponse:
    try:
        session.set_speed(req.speed_ms)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return _state_response(session)
