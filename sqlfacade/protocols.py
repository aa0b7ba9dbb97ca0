"""Runtime-checkable protocols describing the uniform connection contract.

The facade in :mod:`sqlfacade.driver` implements :class:`BasicConnection` and
:class:`BasicPreparedStatement` on top of any object satisfying
:class:`EngineSession`.
"""

from typing import TYPE_CHECKING, Any, Optional, Protocol, Union, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from sqlfacade.driver._common import QueryConfig, QueryResult
    from sqlfacade.driver.result import ExecResult
    from sqlfacade.typing import SqlParameters

__all__ = (
    "BasicConnection",
    "BasicPreparedStatement",
    "EngineSession",
)


@runtime_checkable
class EngineSession(Protocol):
    """Live session with the underlying SQL engine."""

    async def connect(self) -> None:
        """Open the session."""
        ...

    async def query(self, query: "Union[QueryConfig, str]") -> "QueryResult":
        """Run a parameterized statement, or a raw multi-statement script when given a string."""
        ...

    async def end(self) -> None:
        """Terminate the session."""
        ...


@runtime_checkable
class BasicPreparedStatement(Protocol):
    """Reusable statement with persistent bound parameters."""

    async def bind(self, key: "Union[int, str]", value: Any) -> None: ...

    async def unbind(self, key: "Union[int, str]") -> None: ...

    async def exec(self, params: "Optional[SqlParameters]" = None) -> "ExecResult": ...

    async def all(self, params: "Optional[SqlParameters]" = None) -> "list[dict[str, Any]]": ...

    async def cursor(self, params: "Optional[SqlParameters]" = None) -> "AsyncIterator[dict[str, Any]]": ...

    async def close(self) -> None: ...


@runtime_checkable
class BasicConnection(Protocol):
    """Uniform connection contract."""

    async def prepare(self, sql: str, params: "Optional[SqlParameters]" = None) -> BasicPreparedStatement: ...

    async def exec(self, sql: str, params: "Optional[SqlParameters]" = None) -> "ExecResult": ...

    async def all(self, sql: str, params: "Optional[SqlParameters]" = None) -> "list[dict[str, Any]]": ...

    async def cursor(self, sql: str, params: "Optional[SqlParameters]" = None) -> "AsyncIterator[dict[str, Any]]": ...

    async def script(self, sql: str) -> None: ...

    async def close(self) -> None: ...
