"""Named, reusable statements with persistent bound parameters."""

from typing import TYPE_CHECKING, Any, Optional, Union

from sqlfacade.driver._execute import execute_statement, fetch_cursor, fetch_rows, require_cursor_support
from sqlfacade.exceptions import NamedParametersNotImplementedError, ParameterStyleMismatchError
from sqlfacade.parameters import ParameterStyle, detect_parameter_style, merge_parameters
from sqlfacade.utils.type_guards import is_named_parameters

if TYPE_CHECKING:
    from sqlfacade.config import AdapterOptions
    from sqlfacade.driver.cursor import InMemoryCursor
    from sqlfacade.driver.result import ExecResult
    from sqlfacade.protocols import EngineSession
    from sqlfacade.typing import SqlParameters

__all__ = ("PreparedStatement",)


class PreparedStatement:
    """Statement bound to one engine session under a fixed identifier.

    Parameters set with :meth:`bind` persist across executions. Parameters given to
    :meth:`exec`, :meth:`all` or :meth:`cursor` override bound ones position by
    position for that call only.
    """

    __slots__ = ("_bound_params", "_options", "_session", "sql", "statement_id")

    def __init__(
        self,
        session: "EngineSession",
        options: "AdapterOptions",
        sql: str,
        statement_id: str,
        params: "Optional[SqlParameters]" = None,
    ) -> None:
        self._session = session
        self._options = options
        self.sql = sql
        self.statement_id = statement_id
        self._bound_params: Optional[Any] = None
        if params is not None:
            style = detect_parameter_style(params)
            self._bound_params = dict(params) if style is ParameterStyle.NAMED else list(params)

    @property
    def bound_params(self) -> "Optional[SqlParameters]":
        return self._bound_params

    async def bind(self, key: "Union[int, str]", value: Any) -> None:
        """Bind ``value`` to the 1-based position ``key``.

        Raises:
            NamedParametersNotImplementedError: If ``key`` is a name.
            ParameterStyleMismatchError: If named parameters were given to ``prepare``.
        """
        if isinstance(key, str):
            raise NamedParametersNotImplementedError
        if self._bound_params is None:
            self._bound_params = []
        elif is_named_parameters(self._bound_params):
            raise ParameterStyleMismatchError
        _set_slot(self._bound_params, key - 1, value)

    async def unbind(self, key: "Union[int, str]") -> None:
        """Clear the slot at the 0-based index ``key``, unlike the 1-based :meth:`bind`."""
        if self._bound_params is None or is_named_parameters(self._bound_params):
            return
        if isinstance(key, str):
            raise NamedParametersNotImplementedError
        _set_slot(self._bound_params, key, None)

    async def exec(self, params: "Optional[SqlParameters]" = None) -> "ExecResult":
        return await execute_statement(self._session, self._options, self.sql, self._merged(params), self.statement_id)

    async def all(self, params: "Optional[SqlParameters]" = None) -> "list[dict[str, Any]]":
        return await fetch_rows(self._session, self._options, self.sql, self._merged(params), self.statement_id)

    async def cursor(self, params: "Optional[SqlParameters]" = None) -> "InMemoryCursor":
        require_cursor_support(self._options)
        return await fetch_cursor(self._session, self._options, self.sql, self._merged(params), self.statement_id)

    async def close(self) -> None:
        """Dispose of the statement.

        The engine-side statement is left allocated until the session ends.
        """

    def _merged(self, params: "Optional[SqlParameters]") -> "Optional[SqlParameters]":
        return merge_parameters(self._bound_params, params)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(statement_id={self.statement_id!r}, sql={self.sql!r})"


def _set_slot(values: "list[Any]", index: int, value: Any) -> None:
    if index < 0:
        msg = f"Parameter position out of range: {index}"
        raise IndexError(msg)
    if index >= len(values):
        values.extend([None] * (index + 1 - len(values)))
    values[index] = value
