"""Unit tests for the in-memory cursor."""

import pytest

from sqlfacade.driver import CursorState, CursorStep, InMemoryCursor

pytestmark = pytest.mark.anyio

R1 = {"id": 1}
R2 = {"id": 2}


async def test_next_yields_rows_then_terminates_forever() -> None:
    cursor = InMemoryCursor([R1, R2])
    assert await cursor.next() == CursorStep(R1, False)
    assert await cursor.next() == CursorStep(R2, False)
    for _ in range(3):
        assert await cursor.next() == CursorStep(None, True)
    assert cursor.state is CursorState.EXHAUSTED


async def test_async_for_iterates_once() -> None:
    cursor = InMemoryCursor([R1, R2])
    assert [row async for row in cursor] == [R1, R2]
    assert [row async for row in cursor] == []


async def test_none_rows_start_exhausted() -> None:
    cursor = InMemoryCursor(None)
    assert cursor.state is CursorState.EXHAUSTED
    assert await cursor.next() == CursorStep(None, True)


async def test_empty_rows_exhaust_on_first_next() -> None:
    cursor = InMemoryCursor([])
    assert cursor.state is CursorState.READY
    assert (await cursor.next()).done
    assert cursor.state is CursorState.EXHAUSTED


async def test_aclose_is_idempotent() -> None:
    cursor = InMemoryCursor([R1, R2])
    assert await cursor.next() == CursorStep(R1, False)
    assert await cursor.aclose() == CursorStep(None, True)
    assert await cursor.aclose() == CursorStep(None, True)
    assert await cursor.next() == CursorStep(None, True)


async def test_athrow_releases_rows_and_reraises() -> None:
    cursor = InMemoryCursor([R1])
    with pytest.raises(ValueError, match="stop"):
        await cursor.athrow(ValueError("stop"))
    assert cursor.state is CursorState.EXHAUSTED
    with pytest.raises(KeyError):
        await cursor.athrow(KeyError("again"))
    assert await cursor.next() == CursorStep(None, True)


async def test_break_out_of_loop_then_close() -> None:
    cursor = InMemoryCursor([R1, R2])
    async for row in cursor:
        assert row == R1
        break
    cursor.close()
    assert cursor.advance() is None
