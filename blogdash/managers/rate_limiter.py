"""Rate limiter configuration using slowapi."""

from logging import getLogger
from typing import cast

from fastapi import Request
from fastapi.responses import ORJSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.status import HTTP_429_TOO_MANY_REQUESTS

from blogdash.configs import LimiterConfig, file_logger
from blogdash.managers.metrics import metrics_manager

logger = file_logger(getLogger(__name__))


def get_identifier(request: Request) -> str:
    """
    Key a client for rate limiting.

    The `X-API-Key` header wins when present; otherwise the client IP is used.
    """
    api_key = request.headers.get("X-API-Key")
    if api_key:
        return f"apikey:{api_key}"
    return f"ip:{get_remote_address(request)}"


limiter = Limiter(**LimiterConfig().model_dump(), key_func=get_identifier)


async def rate_limit_exceeded_handler(request: Request, exc: Exception) -> ORJSONResponse:
    """
    Turn `RateLimitExceeded` into a 429 JSON response.

    Args:
        request: Rejected request.
        exc: The `RateLimitExceeded` raised by slowapi.

    Returns:
        ORJSONResponse: `{"detail", "allowed_requests"}` with status 429.
    """
    limit_exc = cast(RateLimitExceeded, exc)
    metrics_manager.record_rate_limit_hit()
    logger.warning(f"Rate limit exceeded for {get_identifier(request)} on {request.url.path}")
    return ORJSONResponse(
        status_code=HTTP_429_TOO_MANY_REQUESTS,
        content={"detail": "Rate limit exceeded", "allowed_requests": limit_exc.detail},
    )
