"""Driver layer adapting an engine session to the uniform connection contract."""

from sqlfacade.driver._common import QueryConfig, QueryResult
from sqlfacade.driver.connection import MainConnection, sequential_statement_ids
from sqlfacade.driver.cursor import CursorState, CursorStep, InMemoryCursor
from sqlfacade.driver.prepared import PreparedStatement
from sqlfacade.driver.result import ExecResult, to_exec_result, to_rows
from sqlfacade.driver.returning import ReturningRewrite, add_returning_to_insert

__all__ = (
    "CursorState",
    "CursorStep",
    "ExecResult",
    "InMemoryCursor",
    "MainConnection",
    "PreparedStatement",
    "QueryConfig",
    "QueryResult",
    "ReturningRewrite",
    "add_returning_to_insert",
    "sequential_statement_ids",
    "to_exec_result",
    "to_rows",
)
