"""FastAPI application entry point with lifespan management."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError

from client_hub.api.clients import router as clients_router
from client_hub.api.dashboard import router as dashboard_router
from client_hub.api.health import router as health_router
from client_hub.api.middleware import RequestContextMiddleware
from client_hub.api.projects import router as projects_router
from client_hub.api.tasks import router as tasks_router
from client_hub.core.config import settings
from client_hub.core.database import create_engine, create_session_factory, create_tables
from client_hub.core.logging import configure_logging, get_logger
from client_hub.core.sentry import init_sentry

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifecycle resources.

    Startup:
        - Configure structured logging
        - Initialize Sentry error tracking
        - Create database engine and session factory
        - Create tables when running on SQLite

    Shutdown:
        - Dispose database engine
    """
    configure_logging()
    logger.info("Starting application", environment=settings.environment)

    if init_sentry():
        logger.info("Sentry initialized")

    app.state.db_engine = create_engine()
    app.state.async_session = create_session_factory(app.state.db_engine)
    if app.state.db_engine.dialect.name == "sqlite":
        await create_tables(app.state.db_engine)
    logger.info("Database engine created", dialect=app.state.db_engine.dialect.name)

    yield

    logger.info("Shutting down application")
    await app.state.db_engine.dispose()
    logger.info("Database engine disposed")


app = FastAPI(
    title="Client Hub",
    description="Clients, projects and tasks for a small business",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(RequestContextMiddleware)


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Report store failures as 500 with the underlying message."""
    logger.error(
        "database_error", path=request.url.path, error=str(exc), exc_info=exc
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": str(exc)},
    )


# Include routers
app.include_router(health_router)
app.include_router(dashboard_router)
app.include_router(clients_router)
app.include_router(projects_router)
app.include_router(tasks_router)

# Built web UI, mounted last so API routes take precedence
if Path(settings.frontend_dist_dir).is_dir():
    app.mount(
        "/",
        StaticFiles(directory=settings.frontend_dist_dir, html=True),
        name="frontend",
    )
