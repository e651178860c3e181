"""Transport endpoints — play, pause, scrub, speed."""

from __future__ import annotations

import pytest


def test_speeds(client):
    resp = client.get("/api/playback/speeds")
    assert resp.json() == [
        {"speed_ms": 500, "label": "0.5x"},
        {"speed_ms": 200, "label": "1x"},
        {"speed_ms": 100, "label": "2x"},
        {"speed_ms": 50, "label": "4x"},
    ]


def test_play_advances_on_ticks(loaded_client, sched):
    resp = loaded_client.post("/api/playback/play")
    assert resp.json()["is_playing"] is True

    sched.advance(0.2)
    assert loaded_client.get("/api/playback/state").json()["current_index"] == 1


def test_play_without_series_is_noop(client):
    resp = client.post("/api/playback/play")
    assert resp.status_code == 200
    assert resp.json()["is_playing"] is False


def test_pause(loaded_client, sched):
    loaded_client.post("/api/playback/play")
    sched.advance(0.2)
    resp = loaded_client.post("/api/playback/pause")
    assert resp.json() == {"current_index": 1, "is_playing": False, "speed_ms": 200, "sample_count": 4}

    sched.advance(1.0)
    assert loaded_client.get("/api/playback/state").json()["current_index"] == 1


def test_playback_pins_at_last_sample(loaded_client, sched):
    loaded_client.post("/api/playback/play")
    sched.advance(2.0)
    state = loaded_client.get("/api/playback/state").json()
    assert state["current_index"] == 3
    assert state["is_playing"] is True


@pytest.mark.parametrize("requested,expected", [(1, 1), (-5, 0), (50, 3)])
def test_scrub_clamps_and_pauses(loaded_client, requested, expected):
    loaded_client.post("/api/playback/play")
    resp = loaded_client.post("/api/playback/scrub", json={"index": requested})
    assert resp.status_code == 200
    assert resp.json()["current_index"] == expected
    assert resp.json()["is_playing"] is False


def test_scrub_requires_index(loaded_client):
    resp = loaded_client.post("/api/playback/scrub", json={})
    assert resp.status_code == 422


def test_set_speed(loaded_client, sched):
    loaded_client.post("/api/playback/play")
    resp = loaded_client.post("/api/playback/speed", json={"speed_ms": 50})
    assert resp.json()["speed_ms"] == 50

    sched.advance(0.1)
    assert loaded_client.get("/api/playback/state").json()["current_index"] == 2


def test_set_speed_rejects_unknown_interval(loaded_client):
    resp = loaded_client.post("/api/playback/speed", json={"speed_ms": 300})
    assert resp.status_code == 422
    assert loaded_client.get("/api/playback/state").json()["speed_ms"] == 200
