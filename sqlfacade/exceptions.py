from collections.abc import Iterable
from typing import Any, Optional

__all__ = (
    "AmbiguousOrMissingRowError",
    "ConnectionClosedError",
    "FeatureDisabledError",
    "ImproperConfigurationError",
    "InsertedIdError",
    "NamedParametersNotImplementedError",
    "ParameterStyleMismatchError",
    "SQLFacadeError",
    "StatementIdConflictError",
    "UnknownColumnError",
    "UnresolvedInsertedIdError",
)


class SQLFacadeError(Exception):
    """Base exception class from which all SQLFacade exceptions inherit."""

    detail: str

    def __init__(self, *args: Any, detail: str = "") -> None:
        """Initialize ``SQLFacadeError``.

        Args:
            *args: args are converted to :class:`str` before passing to :class:`Exception`
            detail: detail of the exception.
        """
        str_args = [str(arg) for arg in args if arg]
        if not detail:
            if str_args:
                detail, *str_args = str_args
            elif hasattr(self, "detail"):
                detail = self.detail
        self.detail = detail
        super().__init__(*str_args)

    def __repr__(self) -> str:
        if self.detail:
            return f"{self.__class__.__name__} - {self.detail}"
        return self.__class__.__name__

    def __str__(self) -> str:
        return " ".join((*self.args, self.detail)).strip()


class ImproperConfigurationError(SQLFacadeError):
    """Improper Configuration error.

    Raised when adapter options are malformed or a feature is used without its option.
    """


class FeatureDisabledError(ImproperConfigurationError):
    """A feature was requested but its configuration flag is not enabled."""

    option: str

    def __init__(self, feature: str, option: str) -> None:
        super().__init__(f"{feature} is not available. Maybe enable the option {option!r}.")
        self.option = option


# -- Parameter Errors --
class NamedParametersNotImplementedError(SQLFacadeError, NotImplementedError):
    """Named parameters were supplied to an engine that only binds positionally."""

    def __init__(self, message: Optional[str] = None) -> None:
        if message is None:
            message = "Named parameters are not implemented"
        super().__init__(message)


class ParameterStyleMismatchError(SQLFacadeError):
    """Error when positional and named parameter sets are combined."""

    def __init__(self, message: Optional[str] = None) -> None:
        if message is None:
            message = "Cannot merge named parameters with positioned parameters"
        super().__init__(message)


# -- Inserted ID Errors --
class InsertedIdError(SQLFacadeError):
    """Base class for failures while resolving a generated identifier."""


class AmbiguousOrMissingRowError(InsertedIdError):
    """The result does not hold exactly one row to read the inserted ID from."""

    row_count: int

    def __init__(self, row_count: int) -> None:
        if row_count == 0:
            message = "Cannot get the inserted ID, please append 'RETURNING your_id_column' to your query"
        else:
            message = f"Cannot get the inserted ID, there must be one result row ({row_count})"
        super().__init__(message)
        self.row_count = row_count


class UnknownColumnError(InsertedIdError):
    """The requested ID column is not present on the returned row."""

    column: str
    available: "tuple[str, ...]"

    def __init__(self, column: str, available: "Iterable[str]") -> None:
        self.column = column
        self.available = tuple(available)
        super().__init__(
            f"Cannot get the inserted ID {column!r}, available columns are: {', '.join(self.available)}"
        )


class UnresolvedInsertedIdError(InsertedIdError):
    """No column of the returned row could be identified as the inserted ID."""

    available: "tuple[str, ...]"

    def __init__(self, available: "Iterable[str]") -> None:
        self.available = tuple(available)
        super().__init__(f"Cannot get the inserted ID, available columns are: {', '.join(self.available)}")


# -- Connection Errors --
class ConnectionClosedError(SQLFacadeError):
    """An operation was issued on a connection that has been closed."""

    def __init__(self, message: Optional[str] = None) -> None:
        if message is None:
            message = "Connection is closed"
        super().__init__(message)


class StatementIdConflictError(SQLFacadeError):
    """A statement identifier was reused with a different SQL text."""

    statement_id: str

    def __init__(self, statement_id: str) -> None:
        super().__init__(f"Prepared statement {statement_id!r} is already registered with a different SQL text")
        self.statement_id = statement_id
