import io
import json
import logging
from collections.abc import Iterator
from unittest.mock import AsyncMock

import pytest

from sqlfacade.driver import MainConnection, QueryResult
from sqlfacade.utils.logging import (
    CorrelationIDFilter,
    StatementFormatter,
    configure_logging,
    get_logger,
    set_correlation_id,
)


@pytest.fixture
def log_stream() -> "Iterator[io.StringIO]":
    stream = io.StringIO()
    handler = configure_logging(logging.DEBUG, logging.StreamHandler(stream))
    yield stream
    get_logger().removeHandler(handler)
    get_logger().setLevel(logging.NOTSET)


def test_get_logger_namespaces_names() -> None:
    assert get_logger().name == "sqlfacade"
    assert get_logger("driver").name == "sqlfacade.driver"
    assert get_logger("sqlfacade.adapters").name == "sqlfacade.adapters"


def test_get_logger_adds_filter_once() -> None:
    logger = get_logger("test.filters")
    get_logger("test.filters")
    assert sum(isinstance(f, CorrelationIDFilter) for f in logger.filters) == 1


def test_formatter_renders_statement_fields() -> None:
    record = logging.LogRecord("sqlfacade.driver", logging.DEBUG, __file__, 10, "Executed statement", (), None)
    record.statement_id = "sqlfacade-ps-1"
    record.row_count = 1
    record.insert_table = None
    record.correlation_id = "req-1"
    payload = json.loads(StatementFormatter().format(record))
    assert payload == {
        "level": "DEBUG",
        "logger": "sqlfacade.driver",
        "message": "Executed statement",
        "correlation_id": "req-1",
        "statement_id": "sqlfacade-ps-1",
        "row_count": 1,
    }


def test_configure_logging_replaces_previous_handler(log_stream: "io.StringIO") -> None:
    second = configure_logging(logging.DEBUG, logging.StreamHandler(io.StringIO()))
    try:
        formatted = [h for h in get_logger().handlers if isinstance(h.formatter, StatementFormatter)]
        assert formatted == [second]
    finally:
        get_logger().removeHandler(second)


@pytest.mark.anyio
async def test_exec_logs_statement_context(log_stream: "io.StringIO") -> None:
    session = AsyncMock()
    session.query.return_value = QueryResult(rows=[{"id": 7}], row_count=1)
    connection = MainConnection(session, {"autoinc_mapping": {"users": "id"}})
    statement = await connection.prepare("insert into users values ($1)")

    set_correlation_id("req-9")
    try:
        await statement.exec(["secret"])
    finally:
        set_correlation_id(None)

    entries = [json.loads(line) for line in log_stream.getvalue().splitlines()]
    executed = next(e for e in entries if e["message"] == "Executed statement")
    assert executed["statement_id"] == statement.statement_id
    assert executed["row_count"] == 1
    assert executed["insert_table"] == "users"
    assert executed["id_column"] == "id"
    assert executed["correlation_id"] == "req-9"
    assert "secret" not in log_stream.getvalue()
