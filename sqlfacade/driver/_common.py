"""Shapes exchanged between the connection facade and an engine session."""

from typing import Any, NamedTuple, Optional

__all__ = ("QueryConfig", "QueryResult")


class QueryConfig(NamedTuple):
    """A single parameterized statement sent to the engine.

    Attributes:
        text: Engine-native SQL text.
        values: Positional values for ``$1``, ``$2``, ... placeholders.
        statement_id: Name under which the engine may keep the parsed statement for reuse.
    """

    text: str
    values: Optional["list[Any]"] = None
    statement_id: Optional[str] = None


class QueryResult(NamedTuple):
    """Rows and affected row count reported by the engine.

    Attributes:
        rows: Result rows as dictionaries in engine column order.
        row_count: Number of rows affected or returned, as reported by the engine.
    """

    rows: "list[dict[str, Any]]"
    row_count: Optional[int]
