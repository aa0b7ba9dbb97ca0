from typing import TYPE_CHECKING

from asyncpg import Connection
from asyncpg.prepared_stmt import PreparedStatement

if TYPE_CHECKING:
    from typing import TypeAlias

    from asyncpg import Record


if TYPE_CHECKING:
    AsyncpgConnection: TypeAlias = Connection[Record]
    AsyncpgPreparedStatement: TypeAlias = PreparedStatement[Record]
else:
    AsyncpgConnection = Connection
    AsyncpgPreparedStatement = PreparedStatement


__all__ = ("AsyncpgConnection", "AsyncpgPreparedStatement")
