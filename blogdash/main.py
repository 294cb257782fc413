"""Blogdash Backend - blogging dashboard API over SQLModel."""

from datetime import UTC, datetime

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import ORJSONResponse, Response
from slowapi.errors import RateLimitExceeded
from uvicorn.middleware.proxy_headers import ProxyHeadersMiddleware

from blogdash.configs import settings
from blogdash.db import get_database
from blogdash.errors import (
    BaseAppError,
    DatabaseError,
    database_exception_handler,
    domain_exception_handler,
    validation_exception_handler,
)
from blogdash.managers import (
    get_system_metrics,
    limiter,
    metrics_manager,
    rate_limit_exceeded_handler,
)
from blogdash.middleware import (
    LoggingMiddleware,
    SecurityHeadersMiddleware,
    configure_cors,
    lifespan,
)
from blogdash.routes import blog_router, category_router, user_router
from blogdash.schemas import HealthCheckResponse
from blogdash.utils.helpers import today_str

app = FastAPI(
    title=settings.APP_NAME,
    description="Users, categories and blogs of a blogging dashboard",
    version=settings.APP_VERSION,
    lifespan=lifespan,
    default_response_class=ORJSONResponse,
    swagger_ui_parameters={"docExpansion": "none", "operationsSorter": "method"},
)

configure_cors(app)

app.add_middleware(LoggingMiddleware)
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(GZipMiddleware, minimum_size=1000)
app.add_middleware(ProxyHeadersMiddleware, trusted_hosts="*")

routes = [user_router, category_router, blog_router]

_ = [app.include_router(router) for router in routes]

errors = [
    (RateLimitExceeded, rate_limit_exceeded_handler),
    (DatabaseError, database_exception_handler),
    (BaseAppError, domain_exception_handler),
    (RequestValidationError, validation_exception_handler),
]

_ = [app.add_exception_handler(exc_type, handler) for exc_type, handler in errors]

app.state.limiter = limiter


@app.get(
    "/health",
    tags=["🩺 Health"],
    summary="Health check endpoint",
    response_model=HealthCheckResponse,
    response_class=ORJSONResponse,
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "version": "1.0.0",
                        "status": "ok",
                        "timestamp": "2025-01-01T08:30:00+00:00",
                        "database": "connected",
                    },
                },
            },
        },
    },
    operation_id="health_check",
)
@limiter.exempt
async def health_check(request: Request) -> HealthCheckResponse:
    """
    Report service and database status.

    `status` is "degraded" when the database does not answer.
    """
    reachable = await get_database(request).ping()
    return HealthCheckResponse(
        version=app.version,
        status="ok" if reachable else "degraded",
        timestamp=datetime.now(tz=UTC).isoformat(),
        database="connected" if reachable else "unreachable",
    )


@app.get(
    "/metrics",
    tags=["📈 Metrics"],
    response_class=ORJSONResponse,
    summary="Get metrics",
    description="Get API performance metrics.",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "timestamp": "2025-01-01 08:30:00",
                        "api_metrics": {"request_counts": {"/blogs/list": 12}},
                        "system_metrics": {"cpu_percent": 4.2},
                    },
                },
            },
        },
        429: {
            "description": "Rate limit exceeded",
            "content": {"application/json": {"example": {"detail": "Rate limit exceeded"}}},
        },
    },
    operation_id="get_metrics",
)
@limiter.limit("5/minute")
async def get_metrics(request: Request, response: Response) -> ORJSONResponse:
    """
    Get API performance metrics.

    Parameters
    ----------
    request : Request
        Current request context.
    response : Response
        Current response context.

    Returns
    -------
    ORJSONResponse
        Request counts, error counts, mean response times and host metrics.
    """
    return ORJSONResponse(
        content={
            "timestamp": today_str(),
            "api_metrics": metrics_manager.get_metrics(),
            "system_metrics": await get_system_metrics(),
        },
    )


if __name__ == "__main__":
    from uvicorn import run

    run(app, host="127.0.0.1", port=8000, log_level="info", loop="uvloop", http="httptools")
