"""Application settings loaded from environment variables (+ optional .env)."""

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv(override=False)


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_list(name: str, default: list[str]) -> list[str]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return [item.strip() for item in raw.split(",") if item.strip()]


@dataclass(frozen=True)
class Settings:
    """Runtime configuration for the Task Tracker API."""

    app_env: str = "development"
    database_url: str | None = None
    db_username: str = "postgres"
    db_password: str = "postgres"
    db_name: str = "tasks"
    db_host: str = "database"
    db_port: int = 5432
    db_echo: bool = False
    create_tables: bool = True
    cors_origins: list[str] = field(default_factory=lambda: ["*"])
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from the current process environment."""
        return cls(
            app_env=os.getenv("APP_ENV") or os.getenv("NODE_ENV") or "development",
            database_url=os.getenv("DATABASE_URL") or None,
            db_username=os.getenv("DB_USERNAME", "postgres"),
            db_password=os.getenv("DB_PASSWORD", "postgres"),
            db_name=os.getenv("DB_NAME", "tasks"),
            db_host=os.getenv("DB_HOST", "database"),
            db_port=int(os.getenv("DB_PORT", "5432")),
            db_echo=_env_bool("DB_ECHO", False),
            create_tables=_env_bool("DB_CREATE_TABLES", True),
            cors_origins=_env_list("CORS_ORIGINS", ["*"]),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"

    @property
    def sqlalchemy_url(self) -> str:
        """Connection URL for SQLAlchemy; DATABASE_URL wins over the DB_* parts."""
        if self.database_url:
            return self.database_url
        url = (
            f"postgresql+psycopg://{self.db_username}:{self.db_password}"
            f"@{self.db_host}:{self.db_port}/{self.db_name}"
        )
        if self.is_production:
            url += "?sslmode=require"
        return url
