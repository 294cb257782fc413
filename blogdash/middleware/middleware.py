"""
Middleware components for the blog dashboard API.

This module contains the request logging, security header and CORS setup,
plus the lifespan handler that owns the store client.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from logging import getLogger
from time import perf_counter
from uuid import uuid4

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from blogdash.configs import file_logger, settings
from blogdash.db import Database
from blogdash.monitoring import bind_request_id, clear_context, configure_logging
from blogdash.utils.helpers import get_summary, host

logger = file_logger(getLogger(__name__))

REQUEST_ID_HEADER = "X-Request-ID"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """Create the store client on startup and dispose of it on shutdown."""
    configure_logging()
    if settings.LOG_TO_FILE:
        logger.info("Logging to file enabled.")

    logger.info(f"Starting {app.title}...")
    database = Database(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)
    try:
        await database.create_all()
    except Exception:
        logger.exception("Failed to initialize services")
        await database.close()
        raise
    app.state.database = database

    logger.info("Services initialized successfully")
    logger.info("  - API Documentation: http://localhost:8000/docs")
    logger.info("  - Health Check: http://localhost:8000/health")
    logger.info("  - Metrics: http://localhost:8000/metrics")

    yield

    logger.info(f"Shutting down {app.title}...")
    await database.close()


def configure_cors(app: FastAPI) -> None:
    """Configure CORS middleware for the application."""
    allowed_origins: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]
    if frontend_url := settings.PRODUCTION_FRONTEND_URL:
        allowed_origins.append(frontend_url)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=[REQUEST_ID_HEADER],
    )


class LoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """
        Log request summary and timing, tagged with a request id.

        An incoming `X-Request-ID` is reused; otherwise one is generated. The id
        is bound to the logging context and echoed on the response.
        """
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid4().hex
        bind_request_id(request_id)
        start_time = perf_counter()

        route_info = get_summary(request) or f"{request.method} {request.url.path}"
        logger.info(f"Request: {route_info}, from ip: {host(request)}")

        try:
            response = await call_next(request)
            duration = perf_counter() - start_time
            logger.info(
                f"Response: {response.status_code} for {request.method} {request.url.path} "
                f"in {duration:.3f}s",
            )
            response.headers[REQUEST_ID_HEADER] = request_id
            return response
        finally:
            clear_context()


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """Add security headers to all responses."""
        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        return response
