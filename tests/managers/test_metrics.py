# tests/managers/test_metrics.py
"""Tests for request metrics and the timed decorator."""

import pytest

from blogdash.decorators import timed
from blogdash.managers import MetricsManager, RequestTimer, get_system_metrics


@pytest.fixture
def metrics() -> MetricsManager:
    return MetricsManager()


class TestRequestTimer:
    def test_records_request_and_time(self, metrics: MetricsManager) -> None:
        with RequestTimer("/blogs/list", metrics):
            pass

        snapshot = metrics.get_metrics()
        assert snapshot["request_counts"] == {"/blogs/list": 1}
        assert snapshot["error_counts"] == {}
        assert "/blogs/list" in snapshot["avg_response_times"]

    def test_records_error(self, metrics: MetricsManager) -> None:
        with pytest.raises(ValueError, match="boom"), RequestTimer("/blogs/create", metrics):
            raise ValueError("boom")

        assert metrics.get_metrics()["error_counts"] == {"/blogs/create": 1}

    def test_reset(self, metrics: MetricsManager) -> None:
        metrics.record_request("/users/list")
        metrics.record_rate_limit_hit()
        metrics.reset_metrics()

        snapshot = metrics.get_metrics()
        assert snapshot["request_counts"] == {}
        assert snapshot["rate_limit_hits"] == 0


class TestTimedDecorator:
    async def test_wraps_async_function(self, metrics: MetricsManager) -> None:
        @timed("/custom", metrics)
        async def handler(value: int) -> int:
            return value * 2

        assert await handler(21) == 42
        assert handler.__name__ == "handler"
        assert metrics.get_metrics()["request_counts"] == {"/custom": 1}

    async def test_defaults_to_function_name(self, metrics: MetricsManager) -> None:
        @timed(metrics=metrics)
        async def list_things() -> None:
            return None

        await list_things()
        assert metrics.get_metrics()["request_counts"] == {"list_things": 1}


async def test_system_metrics_shape() -> None:
    result = await get_system_metrics()
    assert set(result) == {"cpu_percent", "memory", "disk_percent"}
    assert "percent" in result["memory"]
