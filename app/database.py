"""Engine and session management."""

import logging
from collections.abc import Iterator

from fastapi import Request
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from app.config import Settings

logger = logging.getLogger(__name__)


def build_engine(settings: Settings) -> Engine:
    """Create the SQLAlchemy engine described by ``settings``."""
    url = settings.sqlalchemy_url
    kwargs: dict = {"echo": settings.db_echo}
    if url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if ":memory:" in url or url in ("sqlite://", "sqlite+pysqlite://"):
            kwargs["poolclass"] = StaticPool
    else:
        kwargs["pool_pre_ping"] = True
    engine = create_engine(url, **kwargs)
    logger.info("Database engine ready dialect=%s env=%s", engine.dialect.name, settings.app_env)
    return engine


def init_db(engine: Engine) -> None:
    """Create the Tasks table when it does not exist yet."""
    # registers Task on SQLModel.metadata
    from app import models  # noqa: F401

    SQLModel.metadata.create_all(engine)
    logger.info("Database schema ready")


def get_session(request: Request) -> Iterator[Session]:
    """FastAPI dependency: one session per request, bound to the app's engine."""
    with Session(request.app.state.engine) as session:
        yield session
