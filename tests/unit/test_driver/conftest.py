from __future__ import annotations

from typing import Any, Callable
from unittest.mock import AsyncMock

import pytest

from sqlfacade.driver import MainConnection, QueryResult

SessionFactory = Callable[..., AsyncMock]


@pytest.fixture
def make_session() -> SessionFactory:
    """Build mock engine sessions whose ``query`` returns the given rows."""

    def factory(rows: list[dict[str, Any]] | None = None, row_count: int | None = None) -> AsyncMock:
        session = AsyncMock()
        result_rows = rows or []
        session.query.return_value = QueryResult(
            rows=result_rows, row_count=len(result_rows) if row_count is None else row_count
        )
        return session

    return factory


@pytest.fixture
def session(make_session: SessionFactory) -> AsyncMock:
    """Engine session returning one ``{"id": 42}`` row."""
    return make_session([{"id": 42}], row_count=1)


@pytest.fixture
def connection(session: AsyncMock) -> MainConnection:
    return MainConnection(session, {"autoinc_mapping": {"users": "id"}, "in_memory_cursor": True})
