"""AsyncPG adapter for SQLFacade."""

from sqlfacade.adapters.asyncpg._types import AsyncpgConnection
from sqlfacade.adapters.asyncpg.config import AsyncpgConfig, AsyncpgConnectionConfig, create_pg_connection
from sqlfacade.adapters.asyncpg.session import AsyncpgSession, parse_asyncpg_status

__all__ = (
    "AsyncpgConfig",
    "AsyncpgConnection",
    "AsyncpgConnectionConfig",
    "AsyncpgSession",
    "create_pg_connection",
    "parse_asyncpg_status",
)
