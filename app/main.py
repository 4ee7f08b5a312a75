"""FastAPI application entry point."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app import routes
from app.config import Settings
from app.database import build_engine, init_db
from app.errors import register_error_handlers
from app.logging_config import setup_logging
from app.schemas import HealthResponse

logger = logging.getLogger(__name__)

# English paths first; Portuguese paths kept for existing clients
TASK_PREFIXES = ("/api/tasks", "/api/tarefas")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings: Settings = app.state.settings
    if settings.create_tables:
        init_db(app.state.engine)
    yield
    app.state.engine.dispose()
    logger.info("Database engine disposed")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the Task Tracker application for ``settings`` (defaults to the environment)."""
    settings = settings or Settings.from_env()
    setup_logging(settings.log_level)

    app = FastAPI(
        title="Task Tracker API",
        description="Create, list, flag and delete to-do items.",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.engine = build_engine(settings)

    # Permissive CORS for the browser frontend
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )
    register_error_handlers(app)

    @app.get("/api/health", response_model=HealthResponse, tags=["System"])
    async def health_check() -> HealthResponse:
        """Health check endpoint."""
        return HealthResponse()

    for prefix in TASK_PREFIXES:
        app.include_router(routes.router, prefix=prefix, tags=["Tasks"])

    return app


app = create_app()
