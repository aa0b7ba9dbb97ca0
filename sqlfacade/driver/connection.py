"""Connection facade exposing the uniform connection contract over an engine session."""

import itertools
from typing import TYPE_CHECKING, Any, Callable, Optional

from sqlfacade.config import normalize_options
from sqlfacade.driver._execute import execute_statement, fetch_cursor, fetch_rows
from sqlfacade.driver.prepared import PreparedStatement
from sqlfacade.exceptions import ConnectionClosedError
from sqlfacade.utils.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Mapping
    from types import TracebackType

    from typing_extensions import Self

    from sqlfacade.config import AdapterOptions
    from sqlfacade.driver.cursor import InMemoryCursor
    from sqlfacade.driver.result import ExecResult
    from sqlfacade.protocols import EngineSession
    from sqlfacade.typing import SqlParameters

__all__ = ("STATEMENT_ID_PREFIX", "MainConnection", "sequential_statement_ids")

logger = get_logger("driver.connection")

STATEMENT_ID_PREFIX = "sqlfacade-ps"


def sequential_statement_ids(prefix: str = STATEMENT_ID_PREFIX) -> "Callable[[], str]":
    """Return a generator of increasing statement identifiers, ``<prefix>-1`` first."""
    counter = itertools.count(1)
    return lambda: f"{prefix}-{next(counter)}"


class MainConnection:
    """Uniform connection over a single engine session.

    The connection owns the session: :meth:`close` ends it. Operations are not
    serialized, callers must await one before issuing the next.
    """

    __slots__ = ("_closed", "_next_statement_id", "options", "session")

    def __init__(
        self,
        session: "EngineSession",
        options: "Optional[Mapping[str, Any]]" = None,
        statement_id_factory: "Optional[Callable[[], str]]" = None,
    ) -> None:
        self.session = session
        self.options: AdapterOptions = normalize_options(options)
        self._next_statement_id = statement_id_factory or sequential_statement_ids()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def _require_open(self) -> "EngineSession":
        if self._closed:
            raise ConnectionClosedError
        return self.session

    async def prepare(self, sql: str, params: "Optional[SqlParameters]" = None) -> PreparedStatement:
        """Create a reusable statement with ``params`` as its initial bound parameters."""
        session = self._require_open()
        statement = PreparedStatement(session, self.options, sql, self._next_statement_id(), params)
        logger.debug("Prepared statement %s", statement.statement_id, extra={"statement_id": statement.statement_id})
        return statement

    async def exec(self, sql: str, params: "Optional[SqlParameters]" = None) -> "ExecResult":
        return await execute_statement(self._require_open(), self.options, sql, params)

    async def all(self, sql: str, params: "Optional[SqlParameters]" = None) -> "list[dict[str, Any]]":
        return await fetch_rows(self._require_open(), self.options, sql, params)

    async def cursor(self, sql: str, params: "Optional[SqlParameters]" = None) -> "InMemoryCursor":
        """Run a query and iterate its rows.

        Raises:
            FeatureDisabledError: Unless the ``in_memory_cursor`` option is enabled.
        """
        return await fetch_cursor(self._require_open(), self.options, sql, params)

    async def script(self, sql: str) -> None:
        """Run a multi-statement script as-is, without parameters or rewriting."""
        await self._require_open().query(sql)

    async def close(self) -> None:
        if self._closed:
            return
        await self.session.end()
        self._closed = True
        logger.debug("Connection closed")

    async def __aenter__(self) -> "Self":
        return self

    async def __aexit__(
        self,
        exc_type: "Optional[type[BaseException]]",
        exc_val: "Optional[BaseException]",
        exc_tb: "Optional[TracebackType]",
    ) -> None:
        await self.close()
