from collections.abc import Awaitable, Callable
from functools import wraps

from blogdash.managers.metrics import MetricsManager, RequestTimer


def timed[**P, R](
    endpoint: str | None = None,
    metrics: MetricsManager | None = None,
) -> Callable[[Callable[P, Awaitable[R]]], Callable[P, Awaitable[R]]]:
    """
    Record count, latency and failures of an async route handler.

    Args:
        endpoint: Label the metrics are stored under (defaults to function name).
        metrics: Collector to use (defaults to the shared instance).

    Example:
        @timed("/blogs/list")
        async def list_blogs(...) -> list[BlogResponse]:
            ...
    """

    def decorator(func: Callable[P, Awaitable[R]]) -> Callable[P, Awaitable[R]]:
        label = endpoint or func.__name__

        @wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            async with RequestTimer(label, metrics):
                return await func(*args, **kwargs)

        return wrapper

    return decorator
