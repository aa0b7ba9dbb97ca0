"""Append a ``RETURNING`` clause to simple ``INSERT ... VALUES`` statements.

The match is purely syntactic. Statements outside the recognized shape are left
untouched and simply get no automatic inserted-id support.
"""

import re
from typing import TYPE_CHECKING, Final, NamedTuple, Optional

from sqlfacade.utils.logging import get_logger

if TYPE_CHECKING:
    from sqlfacade.config import AdapterOptions

__all__ = ("INSERT_REGEX", "ReturningRewrite", "add_returning_to_insert")

logger = get_logger("driver.returning")

INSERT_REGEX: Final[re.Pattern[str]] = re.compile(
    r"^\s*insert\s+into\s+([^\s(]+)\s*(?:\([^)]+\))?\s*values\s*\([\s\S]*\)\s*$", re.IGNORECASE
)


class ReturningRewrite(NamedTuple):
    """Outcome of inspecting a statement for insert-id retrieval.

    Attributes:
        sql: Statement text to send, possibly with an appended ``RETURNING`` clause.
        insert_table: Target table when a clause was appended.
        id_column: Identifier column when it came from ``autoinc_mapping``.
    """

    sql: str
    insert_table: Optional[str] = None
    id_column: Optional[str] = None


def add_returning_to_insert(sql: str, options: "AdapterOptions") -> ReturningRewrite:
    """Rewrite ``sql`` so the engine returns the columns holding the generated id.

    Args:
        sql: Engine-native statement text.
        options: Normalized adapter options.

    Returns:
        The rewritten statement with the table and id column it targets.
    """
    match = INSERT_REGEX.match(sql)
    if match is None:
        return ReturningRewrite(sql)
    insert_table = match.group(1)
    id_column = (options.get("autoinc_mapping") or {}).get(insert_table)
    if id_column:
        logger.debug("Appending RETURNING %s to insert into %s", id_column, insert_table)
        return ReturningRewrite(f"{sql} returning {id_column}", insert_table, id_column)
    if options.get("use_returning_all"):
        logger.debug("Appending RETURNING * to insert into %s", insert_table)
        return ReturningRewrite(f"{sql} returning *", insert_table)
    return ReturningRewrite(sql)
