"""SQLFacade: a uniform async connection contract over positional-only SQL engines."""

from sqlfacade import adapters, driver, exceptions, parameters, typing, utils
from sqlfacade.config import AdapterOptions, normalize_options
from sqlfacade.driver import (
    CursorState,
    ExecResult,
    InMemoryCursor,
    MainConnection,
    PreparedStatement,
    QueryConfig,
    QueryResult,
)
from sqlfacade.exceptions import (
    AmbiguousOrMissingRowError,
    FeatureDisabledError,
    NamedParametersNotImplementedError,
    ParameterStyleMismatchError,
    SQLFacadeError,
    UnknownColumnError,
    UnresolvedInsertedIdError,
)
from sqlfacade.protocols import BasicConnection, BasicPreparedStatement, EngineSession
from sqlfacade.typing import DictRow, SqlParameters

__version__ = "0.1.0"

__all__ = (
    "AdapterOptions",
    "AmbiguousOrMissingRowError",
    "BasicConnection",
    "BasicPreparedStatement",
    "CursorState",
    "DictRow",
    "EngineSession",
    "ExecResult",
    "FeatureDisabledError",
    "InMemoryCursor",
    "MainConnection",
    "NamedParametersNotImplementedError",
    "ParameterStyleMismatchError",
    "PreparedStatement",
    "QueryConfig",
    "QueryResult",
    "SQLFacadeError",
    "SqlParameters",
    "UnknownColumnError",
    "UnresolvedInsertedIdError",
    "__version__",
    "adapters",
    "driver",
    "exceptions",
    "normalize_options",
    "parameters",
    "typing",
    "utils",
)
