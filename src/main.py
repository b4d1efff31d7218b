"""
Main FastAPI application entry point.

Wires configuration, middleware, exception handlers and routers. The schema
is managed by Alembic (`alembic upgrade head`); the application never
creates tables on startup.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.core.config import settings
from src.application.services.credential_lifecycle import wait_for_deliveries
from src.core.container import get_database, get_logger
from src.presentation.routers import system_router
from src.presentation.api.middleware.trace_middleware import TraceMiddleware
from src.presentation.routers.api.v1 import v1_router
from src.presentation.routers.api.v1.errors import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    - Startup: log configuration summary
    - Shutdown: finish pending notifications, dispose the database engine

    Args:
        app: FastAPI application instance.

    Yields:
        None during application lifetime.
    """
    logger = get_logger()
    logger.info(
        "Application starting",
        environment=settings.environment.value,
        version=settings.app_version,
    )

    yield

    await wait_for_deliveries()
    await get_database().close()
    logger.info("Application stopped")


# Initialize FastAPI application with settings and lifespan
app = FastAPI(
    title=settings.app_name,
    description="User and company administration with credential lifecycle",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    debug=settings.debug,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["X-Trace-Id"],
)

# Wire trace middleware (request correlation)
app.add_middleware(TraceMiddleware)

# Register global exception handlers (RFC 9457 error responses)
register_exception_handlers(app)

app.include_router(system_router)
app.include_router(v1_router)
