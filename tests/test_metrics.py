from aztec_mcp.metrics import MAX_RECENT_DURATIONS, MetricsRecorder


def test_snapshot_counts():
    metrics = MetricsRecorder()
    metrics.incr_request()
    metrics.incr_unknown_tool()
    metrics.record_tool("aztec_get_block", success=True)
    metrics.record_tool("aztec_get_block", success=False)
    snap = metrics.snapshot()
    assert snap["requests"] == 1
    assert snap["unknown_tools"] == 1
    assert snap["tool_success"] == {"aztec_get_block": 1}
    assert snap["tool_error"] == {"aztec_get_block": 1}


def test_recent_durations_are_bounded():
    metrics = MetricsRecorder()
    for i in range(MAX_RECENT_DURATIONS + 5):
        metrics.record_duration(f"req-{i}", float(i))
    durations = metrics.snapshot()["recent_request_durations_ms"]
    assert len(durations) == MAX_RECENT_DURATIONS
    assert "req-0" not in durations
    assert f"req-{MAX_RECENT_DURATIONS + 4}" in durations


def test_reset_clears_everything():
    metrics = MetricsRecorder()
    metrics.incr_request()
    metrics.record_duration("a", 1.0)
    metrics.reset()
    assert metrics.snapshot() == {
        "requests": 0,
        "unknown_tools": 0,
        "tool_success": {},
        "tool_error": {},
        "recent_request_durations_ms": {},
    }
