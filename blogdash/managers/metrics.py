"""
Request metrics for the dashboard API.

Per-endpoint request counts, error counts and a bounded window of response
times, plus a psutil snapshot of the host. Counters are guarded by a lock so
the collector can be shared by every request.
"""

from asyncio import to_thread
from collections import defaultdict, deque
from dataclasses import dataclass, field
from logging import getLogger
from threading import Lock
from time import perf_counter
from types import TracebackType
from typing import Any, Self

from psutil import cpu_percent, disk_usage, virtual_memory

from blogdash.configs import file_logger

logger = file_logger(getLogger(__name__))

_BYTES_PER_MB: int = 1024 * 1024
_WINDOW_SIZE: int = 1000
_CPU_SAMPLE_INTERVAL: float = 0.1


@dataclass(slots=True)
class LatencyWindow:
    """Last `_WINDOW_SIZE` durations of one endpoint with a running sum."""

    samples: deque[float] = field(default_factory=lambda: deque(maxlen=_WINDOW_SIZE))
    total: float = 0.0

    def push(self, duration: float) -> None:
        if len(self.samples) == self.samples.maxlen:
            self.total -= self.samples[0]
        self.samples.append(duration)
        self.total += duration

    @property
    def mean(self) -> float:
        return self.total / len(self.samples) if self.samples else 0.0


class MetricsManager:
    """Lock-protected counters for endpoint traffic."""

    __slots__ = ("_errors", "_latency", "_lock", "_rate_limited", "_requests")

    def __init__(self) -> None:
        self._lock = Lock()
        self._requests: dict[str, int] = defaultdict(int)
        self._errors: dict[str, int] = defaultdict(int)
        self._latency: dict[str, LatencyWindow] = defaultdict(LatencyWindow)
        self._rate_limited: int = 0

    def record_request(self, endpoint: str) -> None:
        with self._lock:
            self._requests[endpoint] += 1

    def record_error(self, endpoint: str) -> None:
        with self._lock:
            self._errors[endpoint] += 1

    def record_response_time(self, endpoint: str, duration: float) -> None:
        """
        Add one response time for `endpoint`.

        Args:
            endpoint: Route label given to `timed`.
            duration: Seconds spent in the handler.
        """
        with self._lock:
            self._latency[endpoint].push(duration)

    def record_rate_limit_hit(self) -> None:
        with self._lock:
            self._rate_limited += 1

    def get_metrics(self) -> dict[str, Any]:
        """
        Snapshot all counters.

        Returns:
            Dictionary with request/error counts, mean response times and
            the number of rate-limited requests.
        """
        with self._lock:
            return {
                "request_counts": dict(self._requests),
                "error_counts": dict(self._errors),
                "avg_response_times": {
                    endpoint: window.mean
                    for endpoint, window in self._latency.items()
                    if window.samples
                },
                "rate_limit_hits": self._rate_limited,
            }

    def reset_metrics(self) -> None:
        with self._lock:
            self._requests.clear()
            self._errors.clear()
            self._latency.clear()
            self._rate_limited = 0
        logger.info("Metrics reset")


metrics_manager = MetricsManager()


class RequestTimer:
    """
    Time a block and record it under `endpoint`.

    An exception leaving the block counts as an error for that endpoint.
    """

    __slots__ = ("_endpoint", "_metrics", "_started")

    def __init__(self, endpoint: str, metrics: MetricsManager | None = None) -> None:
        self._endpoint = endpoint
        self._metrics = metrics or metrics_manager
        self._started: float = 0.0

    def __enter__(self) -> Self:
        self._started = perf_counter()
        self._metrics.record_request(self._endpoint)
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        _exc_val: BaseException | None,
        _exc_tb: TracebackType | None,
    ) -> None:
        self._metrics.record_response_time(self._endpoint, perf_counter() - self._started)
        if exc_type is not None:
            self._metrics.record_error(self._endpoint)

    async def __aenter__(self) -> Self:
        return self.__enter__()

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.__exit__(exc_type, exc_val, exc_tb)


@dataclass(slots=True, frozen=True)
class SystemMetrics:
    cpu_percent: float
    memory_percent: float
    memory_used_mb: float
    disk_percent: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "cpu_percent": self.cpu_percent,
            "memory": {"percent": self.memory_percent, "used_mb": self.memory_used_mb},
            "disk_percent": self.disk_percent,
        }


def _sample_host() -> SystemMetrics:
    memory = virtual_memory()
    return SystemMetrics(
        cpu_percent=cpu_percent(interval=_CPU_SAMPLE_INTERVAL),
        memory_percent=memory.percent,
        memory_used_mb=round(memory.used / _BYTES_PER_MB, 2),
        disk_percent=disk_usage("/").percent,
    )


async def get_system_metrics() -> dict[str, Any]:
    """
    Collect host metrics without blocking the event loop.

    Returns:
        CPU, memory and disk usage, or an `error` entry if psutil fails.
    """
    try:
        snapshot = await to_thread(_sample_host)
    except OSError as e:
        logger.exception("Failed to get system metrics")
        return {"error": f"Failed to collect system metrics: {e}"}
    return snapshot.to_dict()
