"""Convert engine results into rows and exec results."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Optional

from sqlfacade.exceptions import AmbiguousOrMissingRowError, UnknownColumnError, UnresolvedInsertedIdError

if TYPE_CHECKING:
    from sqlfacade.driver._common import QueryResult

__all__ = ("ExecResult", "to_exec_result", "to_rows")


@dataclass(frozen=True)
class ExecResult:
    """Outcome of a data-modifying statement.

    The inserted ID is not resolved up front. :meth:`get_inserted_id` inspects the
    returned row only when called, so statements that never ask for it cannot fail
    on it.

    Attributes:
        affected_rows: Row count reported by the engine.
        rows: Rows returned by the statement, typically from a ``RETURNING`` clause.
        insert_table: Insert target recorded by the ``RETURNING`` rewrite.
        id_column: Identifier column recorded by the ``RETURNING`` rewrite.
    """

    affected_rows: int
    rows: "list[dict[str, Any]]" = field(default_factory=list, repr=False)
    insert_table: Optional[str] = None
    id_column: Optional[str] = None

    def get_inserted_id(self, column: Optional[str] = None) -> Any:
        """Return the generated identifier from the single returned row.

        Column precedence: ``column`` if given, else the rewrite's id column, else
        ``id``, ``<table>_id`` then ``<TABLE>_ID`` when the insert table is known.

        Args:
            column: Column holding the identifier.

        Raises:
            AmbiguousOrMissingRowError: If the result has zero or several rows.
            UnknownColumnError: If an explicitly chosen column is missing from the row.
            UnresolvedInsertedIdError: If no column could be chosen.

        Returns:
            The identifier value.
        """
        if len(self.rows) != 1:
            raise AmbiguousOrMissingRowError(len(self.rows))
        row = self.rows[0]
        resolved = self._resolve_column(row, column)
        if resolved is None:
            raise UnresolvedInsertedIdError(row)
        return row[resolved]

    def _resolve_column(self, row: "dict[str, Any]", column: Optional[str]) -> Optional[str]:
        explicit = column or self.id_column
        if explicit:
            if explicit not in row:
                raise UnknownColumnError(explicit, row)
            return explicit
        if not self.insert_table:
            return None
        composed = f"{self.insert_table.lower()}_id"
        for candidate in ("id", composed, composed.upper()):
            if candidate in row:
                return candidate
        return None


def to_rows(result: "QueryResult") -> "list[dict[str, Any]]":
    return result.rows


def to_exec_result(
    result: "QueryResult", insert_table: Optional[str] = None, id_column: Optional[str] = None
) -> ExecResult:
    return ExecResult(
        affected_rows=result.row_count or 0, rows=result.rows, insert_table=insert_table, id_column=id_column
    )
