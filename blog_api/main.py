# blog_api/main.py

"""Blog API - posts, engagement, users and an audit trail behind a role-gated HTTP interface."""

from logging import getLogger

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse, PlainTextResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from blog_api.configs import file_logger, settings
from blog_api.errors import (
    AuthError,
    BaseAppError,
    DatabaseError,
    EngagementError,
    InvalidInputError,
    UploadError,
    auth_exception_handler,
    create_exception_handler,
    database_exception_handler,
    engagement_exception_handler,
    input_exception_handler,
    sqlalchemy_exception_handler,
    unhandled_exception_handler,
    upload_exception_handler,
    validation_exception_handler,
)
from blog_api.middleware import (
    LoggingMiddleware,
    RequestContextMiddleware,
    SecurityHeadersMiddleware,
    configure_cors,
    lifespan,
)
from blog_api.routes import (
    activity_router,
    admin_router,
    blog_router,
    contact_router,
    review_router,
    subscriber_router,
    upload_router,
    user_router,
)
from blog_api.schemas import HealthCheckResponse
from blog_api.utils.helpers import today_str

logger = file_logger(getLogger(__name__))

VERSION = "1.0.0"

app_exception_handler = create_exception_handler(logger)


async def root() -> PlainTextResponse:
    return PlainTextResponse(f"🚀 {settings.APP_NAME} running")


async def health_check(request: Request) -> HealthCheckResponse:
    """
    Health check endpoint.

    Parameters
    ----------
    request : Request
        Current request context.

    Returns
    -------
    HealthCheckResponse
        Version, status and whether the database answers a trivial query.

    Examples
    --------
    Request
        GET /health
    Response
        200 OK
        {"version": "1.0.0", "status": "ok", "timestamp": "2025-01-01 10:00:00", "database": "ok"}
    """
    database = "ok"
    try:
        async with request.app.state.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except (SQLAlchemyError, OSError, AttributeError) as e:
        logger.warning(f"Database health check failed: {e}")
        database = "unavailable"

    return HealthCheckResponse(
        version=VERSION,
        status="ok" if database == "ok" else "degraded",
        timestamp=today_str(),
        database=database,
    )


def create_app() -> FastAPI:
    """Build the application with its middleware, routers and exception handlers."""
    app = FastAPI(
        title=settings.APP_NAME,
        description="Blog backend API",
        version=VERSION,
        lifespan=lifespan,
        default_response_class=ORJSONResponse,
        swagger_ui_parameters={
            "docExpansion": "none",
            "operationsSorter": "method",
        },
    )

    configure_cors(app)

    app.add_middleware(LoggingMiddleware)
    app.add_middleware(SecurityHeadersMiddleware)
    # Added last so it runs first and every log line carries the request id
    app.add_middleware(RequestContextMiddleware)

    routes = [
        blog_router,
        review_router,
        activity_router,
        user_router,
        subscriber_router,
        contact_router,
        upload_router,
        admin_router,
    ]

    _ = [app.include_router(router) for router in routes]

    errors = [
        (AuthError, auth_exception_handler),
        (DatabaseError, database_exception_handler),
        (EngagementError, engagement_exception_handler),
        (UploadError, upload_exception_handler),
        (InvalidInputError, input_exception_handler),
        (BaseAppError, app_exception_handler),
        (RequestValidationError, validation_exception_handler),
        (SQLAlchemyError, sqlalchemy_exception_handler),
        (Exception, unhandled_exception_handler),
    ]

    _ = [app.add_exception_handler(exc_type, handler) for exc_type, handler in errors]

    app.add_api_route("/", root, methods=["GET"], tags=["🏠 Root"], include_in_schema=False)
    app.add_api_route(
        "/health",
        health_check,
        methods=["GET"],
        tags=["🩺 Health"],
        summary="Health check endpoint",
        response_model=HealthCheckResponse,
        operation_id="health_check",
    )

    return app


app = create_app()
