"""Forward-only cursor over an already materialized result.

This is not a server-side cursor: the whole result is held in memory until the
cursor is exhausted or closed.
"""

from enum import Enum
from typing import TYPE_CHECKING, Any, NamedTuple, NoReturn, Optional

if TYPE_CHECKING:
    from typing_extensions import Self

__all__ = ("CursorState", "CursorStep", "InMemoryCursor")


class CursorState(str, Enum):
    READY = "ready"
    EXHAUSTED = "exhausted"


class CursorStep(NamedTuple):
    """Result of one :meth:`InMemoryCursor.next` call."""

    value: "Optional[dict[str, Any]]"
    done: bool


_DONE = CursorStep(None, True)


class InMemoryCursor:
    """Single-pass async iterator over a list of rows.

    ``EXHAUSTED`` is absorbing: once the rows run out, or the cursor is closed or
    thrown into, the row list is released and every further call reports
    termination.
    """

    __slots__ = ("_position", "_rows")

    def __init__(self, rows: "Optional[list[dict[str, Any]]]" = None) -> None:
        self._rows = rows
        self._position = 0

    @property
    def state(self) -> CursorState:
        return CursorState.EXHAUSTED if self._rows is None else CursorState.READY

    def advance(self) -> "Optional[dict[str, Any]]":
        """Return the next row, or None once the cursor is exhausted."""
        if self._rows is None:
            return None
        if self._position >= len(self._rows):
            self._rows = None
            return None
        row = self._rows[self._position]
        self._position += 1
        return row

    def close(self) -> None:
        self._rows = None

    async def next(self) -> CursorStep:
        row = self.advance()
        if row is None:
            return _DONE
        return CursorStep(row, False)

    async def aclose(self) -> CursorStep:
        """Stop iterating early and release the rows."""
        self.close()
        return _DONE

    async def athrow(self, exc: BaseException) -> NoReturn:
        """Release the rows and raise ``exc`` to the consumer."""
        self.close()
        raise exc

    def __aiter__(self) -> "Self":
        return self

    async def __anext__(self) -> "dict[str, Any]":
        step = await self.next()
        if step.done:
            raise StopAsyncIteration
        return step.value  # type: ignore[return-value]
