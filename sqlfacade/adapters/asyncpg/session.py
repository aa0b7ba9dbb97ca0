"""Engine session backed by a single asyncpg connection."""

import re
from typing import TYPE_CHECKING, Any, Final, Optional, Union

import asyncpg

from sqlfacade.driver._common import QueryConfig, QueryResult
from sqlfacade.exceptions import ConnectionClosedError, StatementIdConflictError
from sqlfacade.utils.logging import get_logger

if TYPE_CHECKING:
    from sqlfacade.adapters.asyncpg._types import AsyncpgConnection, AsyncpgPreparedStatement

__all__ = ("ASYNC_PG_STATUS_REGEX", "AsyncpgSession", "parse_asyncpg_status")

logger = get_logger("adapters.asyncpg")

ASYNC_PG_STATUS_REGEX: Final[re.Pattern[str]] = re.compile(r"^([A-Z]+)(?:\s+(\d+))?\s+(\d+)$", re.IGNORECASE)


def parse_asyncpg_status(status: Optional[str]) -> int:
    """Parse an asyncpg command status tag to extract the row count.

    Args:
        status: Status string like "INSERT 0 1", "UPDATE 3", "SELECT 2"

    Returns:
        Number of affected rows, or 0 if it cannot be parsed
    """
    if not status:
        return 0
    match = ASYNC_PG_STATUS_REGEX.match(status.strip())
    if match is None:
        return 0
    return int(match.group(3))


class AsyncpgSession:
    """Engine session over one asyncpg connection.

    Statements sent with a ``statement_id`` are prepared once and reused for later
    calls with the same identifier until :meth:`end`.
    """

    __slots__ = ("_statements", "connection", "connection_config")

    def __init__(
        self,
        connection_config: "Optional[dict[str, Any]]" = None,
        connection: "Optional[AsyncpgConnection]" = None,
    ) -> None:
        self.connection_config: dict[str, Any] = {
            k: v for k, v in (connection_config or {}).items() if v is not None
        }
        self.connection = connection
        self._statements: dict[str, tuple[str, AsyncpgPreparedStatement]] = {}

    async def connect(self) -> None:
        if self.connection is not None:
            return
        self.connection = await asyncpg.connect(**self.connection_config)
        logger.debug("Opened asyncpg connection")

    def _require_connection(self) -> "AsyncpgConnection":
        if self.connection is None:
            msg = "Session is not connected"
            raise ConnectionClosedError(msg)
        return self.connection

    async def _prepare(self, connection: "AsyncpgConnection", query: QueryConfig) -> "AsyncpgPreparedStatement":
        if query.statement_id is None:
            return await connection.prepare(query.text)
        cached = self._statements.get(query.statement_id)
        if cached is not None:
            text, statement = cached
            if text != query.text:
                raise StatementIdConflictError(query.statement_id)
            return statement
        statement = await connection.prepare(query.text)
        self._statements[query.statement_id] = (query.text, statement)
        logger.debug("Registered prepared statement %s", query.statement_id)
        return statement

    async def query(self, query: "Union[QueryConfig, str]") -> QueryResult:
        """Run a statement and collect its rows.

        A plain string runs as a script through the simple query protocol, which
        accepts several statements and no parameters.
        """
        connection = self._require_connection()
        if isinstance(query, str):
            status = await connection.execute(query)
            return QueryResult(rows=[], row_count=parse_asyncpg_status(status))
        statement = await self._prepare(connection, query)
        records = await statement.fetch(*(query.values or ()))
        return QueryResult(
            rows=[dict(record) for record in records], row_count=parse_asyncpg_status(statement.get_statusmsg())
        )

    async def end(self) -> None:
        connection, self.connection = self.connection, None
        self._statements.clear()
        if connection is not None:
            await connection.close()
            logger.debug("Closed asyncpg connection")
