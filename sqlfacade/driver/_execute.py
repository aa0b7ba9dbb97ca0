"""Statement execution shared by connections and prepared statements."""

from typing import TYPE_CHECKING, Any, Optional

from sqlfacade.driver._common import QueryConfig
from sqlfacade.driver.cursor import InMemoryCursor
from sqlfacade.driver.result import to_exec_result, to_rows
from sqlfacade.driver.returning import add_returning_to_insert
from sqlfacade.exceptions import FeatureDisabledError
from sqlfacade.parameters import to_positional_parameters
from sqlfacade.utils.logging import get_logger

if TYPE_CHECKING:
    from sqlfacade.config import AdapterOptions
    from sqlfacade.driver._common import QueryResult
    from sqlfacade.driver.result import ExecResult
    from sqlfacade.driver.returning import ReturningRewrite
    from sqlfacade.protocols import EngineSession
    from sqlfacade.typing import SqlParameters

__all__ = ("execute_statement", "fetch_cursor", "fetch_rows", "require_cursor_support")

logger = get_logger("driver")


def require_cursor_support(options: "AdapterOptions") -> None:
    if not options.get("in_memory_cursor"):
        raise FeatureDisabledError("Cursor", "in_memory_cursor")


async def _query(
    session: "EngineSession",
    rewrite: "ReturningRewrite",
    params: "Optional[SqlParameters]",
    statement_id: Optional[str],
) -> "QueryResult":
    query = QueryConfig(text=rewrite.sql, values=to_positional_parameters(params), statement_id=statement_id)
    result = await session.query(query)
    logger.debug(
        "Executed statement",
        extra={
            "statement_id": statement_id,
            "row_count": result.row_count,
            "insert_table": rewrite.insert_table,
            "id_column": rewrite.id_column,
        },
    )
    return result


async def execute_statement(
    session: "EngineSession",
    options: "AdapterOptions",
    sql: str,
    params: "Optional[SqlParameters]" = None,
    statement_id: Optional[str] = None,
) -> "ExecResult":
    rewrite = add_returning_to_insert(sql, options)
    result = await _query(session, rewrite, params, statement_id)
    return to_exec_result(result, rewrite.insert_table, rewrite.id_column)


async def fetch_rows(
    session: "EngineSession",
    options: "AdapterOptions",
    sql: str,
    params: "Optional[SqlParameters]" = None,
    statement_id: Optional[str] = None,
) -> "list[dict[str, Any]]":
    rewrite = add_returning_to_insert(sql, options)
    return to_rows(await _query(session, rewrite, params, statement_id))


async def fetch_cursor(
    session: "EngineSession",
    options: "AdapterOptions",
    sql: str,
    params: "Optional[SqlParameters]" = None,
    statement_id: Optional[str] = None,
) -> InMemoryCursor:
    require_cursor_support(options)
    return InMemoryCursor(await fetch_rows(session, options, sql, params, statement_id))
