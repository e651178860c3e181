"""Smoke test to verify the toolchain works."""


def test_import_telemetry_replay():
    """Verify the telemetry_replay package can be imported."""
    import telemetry_replay

    assert telemetry_replay is not None


def test_subpackages_importable():
    """Verify all subpackages can be imported."""
    import telemetry_replay.playback
    import telemetry_replay.telemetry
    import telemetry_replay.web.app

    assert telemetry_replay.telemetry is not None
    assert telemetry_replay.playback is not None
    assert telemetry_replay.web.app.app is not None
