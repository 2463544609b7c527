"""Database engine bootstrap.

Builds the single SQLAlchemy async engine the backend shares. Creating
the engine only allocates client-side state; no connection is opened
until the first query or the connectivity probe.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import lru_cache

import structlog
from pydantic import SecretStr
from sqlalchemy.engine import URL
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from stock_manager.config import Settings, get_settings

logger = structlog.get_logger()


class Dialect(str, Enum):
    """SQLAlchemy dialect+driver names the backend can speak."""

    MYSQL = "mysql+aiomysql"


@dataclass(frozen=True)
class ConnectionConfig:
    """Connection parameters for one database server."""

    host: str
    database: str
    username: str
    password: SecretStr
    dialect: Dialect = Dialect.MYSQL

    @classmethod
    def from_settings(cls, settings: Settings) -> ConnectionConfig:
        return cls(
            host=settings.db_host,
            database=settings.db_name,
            username=settings.db_user,
            password=settings.db_password,
        )

    def url(self) -> URL:
        """Return the SQLAlchemy URL. Its string form masks the password."""
        return URL.create(
            drivername=self.dialect.value,
            username=self.username,
            password=self.password.get_secret_value(),
            host=self.host,
            database=self.database,
        )


def initialize(config: ConnectionConfig) -> AsyncEngine:
    """Create an engine for ``config`` without touching the network.

    Args:
        config: Connection parameters.

    Returns:
        A new AsyncEngine. Prefer get_engine() outside of tests so the
        process keeps a single pool.
    """
    engine = create_async_engine(config.url())
    logger.info(
        "database_engine_created",
        host=config.host,
        database=config.database,
        username=config.username,
        dialect=config.dialect.value,
    )
    return engine


@lru_cache
def get_engine() -> AsyncEngine:
    """Get the process-wide engine built from the cached settings."""
    return initialize(ConnectionConfig.from_settings(get_settings()))


def reset_engine() -> None:
    """Forget the cached engine. The caller disposes it first."""
    get_engine.cache_clear()
