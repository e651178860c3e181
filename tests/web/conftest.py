"""Shared fixtures for web tests."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from telemetry_replay.playback.scheduler import ManualScheduler
from telemetry_replay.playback.session import ReplaySession
from telemetry_replay.web.app import app, get_session

SESSION_CSV = (
    "time,throttle,speed,rpm,lat,long,gear\n"
    "0,0,0,900,10,10,1\n"
    "1,25,60,4000,15,20,2\n"
    "2,50,120,8000,20,30,3\n"
    "3,100,240,12000,25,40,4\n"
)


@pytest.fixture
def sched() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def session(sched) -> ReplaySession:
    return ReplaySession(scheduler=sched)


@pytest.fixture
def client(session, monkeypatch):
    """FastAPI test client bound to a fresh session on a virtual clock."""
    monkeypatch.delenv("TELEMETRY_REPLAY_CSV", raising=False)
    app.dependency_overrides[get_session] = lambda: session
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def loaded_client(client):
    """Client with SESSION_CSV already uploaded."""
    resp = client.post(
        "/api/session/upload",
        content=SESSION_CSV,
        headers={"Content-Type": "text/csv"},
    )
    assert resp.status_code == 200
    return client
