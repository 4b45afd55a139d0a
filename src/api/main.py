"""Main FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from authorization.presentation import records_router
from authorization.presentation import router as authorization_router
from infrastructure.database.dependencies import close_database_connections
from infrastructure.logging import configure_logging
from infrastructure.settings import get_auth_settings, get_settings
from infrastructure.version import __version__
from shared_kernel.middleware import RequestIdMiddleware


@asynccontextmanager
async def warden_lifespan(app: FastAPI):
    """Application lifespan context.

    Manages:
    - structlog configuration
    - Auth settings validation (no bearer secret, no startup)
    - Database engine lifecycle (created lazily, disposed on shutdown)
    """
    configure_logging(debug=get_settings().debug)
    get_auth_settings()

    yield

    await close_database_connections()


settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    description="Role- and relationship-based authorization decisions",
    version=__version__,
    lifespan=warden_lifespan,
)

app.add_middleware(RequestIdMiddleware)

app.include_router(authorization_router)
app.include_router(records_router)


@app.get("/health")
def health():
    """Basic health check endpoint."""
    return {"status": "ok"}
