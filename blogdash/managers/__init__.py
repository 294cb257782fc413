from blogdash.managers.metrics import (
    MetricsManager,
    RequestTimer,
    get_system_metrics,
    metrics_manager,
)
from blogdash.managers.rate_limiter import get_identifier, limiter, rate_limit_exceeded_handler

__all__ = [
    "MetricsManager",
    "RequestTimer",
    "get_identifier",
    "get_system_metrics",
    "limiter",
    "metrics_manager",
    "rate_limit_exceeded_handler",
]
