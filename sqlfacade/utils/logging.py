"""Logging helpers for SQLFacade.

Library loggers live under the ``sqlfacade`` namespace. Statement execution
records carry ``statement_id``, ``row_count``, ``insert_table`` and ``id_column``
attributes, which :class:`StatementFormatter` renders as JSON next to the
request correlation ID.
"""

from __future__ import annotations

import logging
from contextvars import ContextVar
from typing import TYPE_CHECKING, Any, Final

import msgspec

if TYPE_CHECKING:
    from logging import LogRecord

__all__ = (
    "STATEMENT_FIELDS",
    "CorrelationIDFilter",
    "StatementFormatter",
    "configure_logging",
    "correlation_id_var",
    "get_correlation_id",
    "get_logger",
    "set_correlation_id",
)

STATEMENT_FIELDS: Final = ("statement_id", "row_count", "insert_table", "id_column")

correlation_id_var: ContextVar[str | None] = ContextVar("correlation_id", default=None)

_encoder = msgspec.json.Encoder(enc_hook=repr)


def set_correlation_id(correlation_id: str | None) -> None:
    correlation_id_var.set(correlation_id)


def get_correlation_id() -> str | None:
    return correlation_id_var.get()


class CorrelationIDFilter(logging.Filter):
    """Attach the current correlation ID to every record as ``correlation_id``."""

    def filter(self, record: LogRecord) -> bool:
        record.correlation_id = get_correlation_id()  # type: ignore[attr-defined]
        return True


class StatementFormatter(logging.Formatter):
    """One JSON object per record, with the statement fields that are set on it.

    Parameter values are never part of a record, so they never reach the output.
    """

    def format(self, record: LogRecord) -> str:
        entry: dict[str, Any] = {
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        correlation_id = getattr(record, "correlation_id", None)
        if correlation_id:
            entry["correlation_id"] = correlation_id
        for name in STATEMENT_FIELDS:
            value = getattr(record, name, None)
            if value is not None:
                entry[name] = value
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return _encoder.encode(entry).decode("utf-8")


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger under the ``sqlfacade`` namespace.

    Args:
        name: Dotted suffix, e.g. ``"driver"``. Defaults to the package root logger.

    Returns:
        Logger carrying a :class:`CorrelationIDFilter`.
    """
    if name is None:
        name = "sqlfacade"
    elif not name.startswith("sqlfacade"):
        name = f"sqlfacade.{name}"

    logger = logging.getLogger(name)
    if not any(isinstance(f, CorrelationIDFilter) for f in logger.filters):
        logger.addFilter(CorrelationIDFilter())
    return logger


def configure_logging(level: int | str = logging.DEBUG, handler: logging.Handler | None = None) -> logging.Handler:
    """Send ``sqlfacade`` records to ``handler`` as JSON statement logs.

    Replaces handlers installed by an earlier call, so calling it twice does not
    duplicate output.

    Args:
        level: Level applied to the ``sqlfacade`` logger.
        handler: Destination, a stderr stream handler by default.

    Returns:
        The installed handler.
    """
    root = get_logger()
    for previous in [h for h in root.handlers if isinstance(h.formatter, StatementFormatter)]:
        root.removeHandler(previous)
    handler = handler or logging.StreamHandler()
    handler.setFormatter(StatementFormatter())
    # filters on a logger do not run for records from its children
    handler.addFilter(CorrelationIDFilter())
    root.addHandler(handler)
    root.setLevel(level)
    return handler
