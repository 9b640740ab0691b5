# blog_api/middleware/middleware.py
"""
Middleware components for the blog API.

This module contains middleware for security headers, request logging
and CORS handling, plus the lifespan event handler that builds and
tears down the database engine, the Identity Gate and the image host
client.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from logging import getLogger
from time import perf_counter

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from blog_api.auth import FirebaseTokenVerifier, IdentityGate
from blog_api.clients import ImageHostClient
from blog_api.configs import file_logger, settings
from blog_api.db import close_db, create_engine, create_session_maker, init_db
from blog_api.monitoring import configure_logging
from blog_api.utils.helpers import get_summary, host

logger = file_logger(getLogger(__name__))


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """Manage application startup and shutdown events with service initialization."""
    configure_logging()

    # Startup
    logger.info(f"Starting {app.title}...")

    try:
        if settings.LOG_TO_FILE:
            logger.info("Logging to file enabled.")

        engine = create_engine()
        await init_db(engine)
        app.state.engine = engine
        app.state.session_maker = create_session_maker(engine)

        app.state.identity_gate = IdentityGate(
            FirebaseTokenVerifier(settings.FIREBASE_PROJECT_ID),
            require_auth=settings.auth_required,
        )
        logger.info(f"Identity gate initialized, require_auth={settings.auth_required}")

        app.state.image_host = ImageHostClient(
            api_key=settings.IMGBB_API_KEY,
            upload_url=settings.IMGBB_UPLOAD_URL,
            timeout=settings.UPLOAD_TIMEOUT,
        )

        logger.info("Services initialized successfully")
        logger.info("Services:")
        logger.info("  - Backend API: http://localhost:8000")
        logger.info("  - API Documentation: http://localhost:8000/docs")
        logger.info("  - Health Check: http://localhost:8000/health")

    except Exception:
        logger.exception("Failed to initialize services")
        raise

    yield

    # Shutdown
    logger.info(f"Shutting down {app.title}...")

    try:
        await app.state.image_host.close()
        await close_db(app.state.engine)
        logger.info("Services cleaned up successfully")

    except Exception:
        logger.exception("Error during service cleanup")


def configure_cors(app: FastAPI) -> None:
    """Configure CORS middleware for the application."""
    allowed_origins: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:5173",  # Vite development
    ]

    if frontend_url := settings.PRODUCTION_FRONTEND_URL:
        allowed_origins.append(frontend_url)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )


class LoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """Log request summary and timing information."""

        start_time = perf_counter()
        summary = get_summary(request)

        route_info = summary or f"{request.method} {request.url.path}"
        logger.info(f"Request: {route_info}, from ip: {host(request)}")

        response = await call_next(request)
        duration = perf_counter() - start_time

        logger.info(
            f"Response: {response.status_code} for {request.method} {request.url.path} "
            f"in {duration:.2f}s",
        )

        return response


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
        if settings.ENVIRONMENT == "production":
            response.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"
        return response
