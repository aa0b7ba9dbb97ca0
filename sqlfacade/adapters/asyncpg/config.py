"""AsyncPG configuration with direct field-based configuration."""

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, Any, Optional, TypedDict, Union

from typing_extensions import NotRequired

from sqlfacade.adapters.asyncpg.session import AsyncpgSession
from sqlfacade.config import AdapterOptions, normalize_options
from sqlfacade.driver.connection import MainConnection
from sqlfacade.utils.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Callable


__all__ = ("AsyncpgConfig", "AsyncpgConnectionConfig", "create_pg_connection")

logger = get_logger("adapters.asyncpg")


class AsyncpgConnectionConfig(TypedDict, total=False):
    """TypedDict for AsyncPG connection parameters."""

    dsn: NotRequired[str]
    host: NotRequired[str]
    port: NotRequired[int]
    user: NotRequired[str]
    password: NotRequired[str]
    database: NotRequired[str]
    ssl: NotRequired[Any]
    passfile: NotRequired[str]
    direct_tls: NotRequired[bool]
    timeout: NotRequired[float]
    command_timeout: NotRequired[float]
    statement_cache_size: NotRequired[int]
    max_cached_statement_lifetime: NotRequired[int]
    max_cacheable_statement_size: NotRequired[int]
    server_settings: NotRequired[dict[str, str]]
    extra: NotRequired[dict[str, Any]]


def _connection_config_dict(config: "Union[str, AsyncpgConnectionConfig, dict[str, Any], None]") -> "dict[str, Any]":
    if isinstance(config, str):
        return {"dsn": config}
    result: dict[str, Any] = dict(config or {})
    result.update(result.pop("extra", {}))
    return {k: v for k, v in result.items() if v is not None}


async def create_pg_connection(config: "Union[str, AsyncpgConnectionConfig, dict[str, Any]]") -> AsyncpgSession:
    """Open an asyncpg engine session.

    Args:
        config: A DSN string or connection parameters.

    Returns:
        A connected session.
    """
    session = AsyncpgSession(_connection_config_dict(config))
    await session.connect()
    return session


class AsyncpgConfig:
    """Configuration for AsyncPG connections wrapped in the uniform connection contract."""

    __slots__ = ("connection_config", "options", "statement_id_factory")

    def __init__(
        self,
        *,
        connection_config: "Optional[Union[str, AsyncpgConnectionConfig, dict[str, Any]]]" = None,
        options: "Optional[Union[AdapterOptions, dict[str, Any]]]" = None,
        statement_id_factory: "Optional[Callable[[], str]]" = None,
    ) -> None:
        """Initialize AsyncPG configuration.

        Args:
            connection_config: DSN string or connection parameters (TypedDict or dict)
            options: Adapter options controlling RETURNING rewrites and cursors
            statement_id_factory: Generator of prepared statement identifiers
        """
        self.connection_config = _connection_config_dict(connection_config)
        self.options = normalize_options(options)
        self.statement_id_factory = statement_id_factory

    def __repr__(self) -> str:
        return f"{type(self).__name__}(options={self.options!r})"

    async def create_connection(self) -> MainConnection:
        """Open a session and wrap it in a connection.

        Returns:
            A connection owning a freshly connected session.
        """
        session = await create_pg_connection(self.connection_config)
        return MainConnection(session, self.options, self.statement_id_factory)

    @asynccontextmanager
    async def provide_connection(self) -> "AsyncGenerator[MainConnection, None]":
        """Provide a connection that is closed on exit.

        Yields:
            A connected :class:`MainConnection`.
        """
        connection = await self.create_connection()
        try:
            yield connection
        finally:
            await connection.close()
