"""Carousel navigation: a cyclic cursor over an immutable item collection.

`left`/`right` wrap around the ends, `first`/`last` jump to them. All four are
total: on an empty collection they return the current cursor unchanged.

`dispatch()` is the single command entry for the UI. It never exits the
process itself; a close request comes back as `Outcome.TERMINATE` and the host
event loop decides how to shut down.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from .logger import get_logger

_logger = get_logger("carousel")


class Command(str, Enum):
    CHANGE_LEFT = "changeLeft"
    CHANGE_RIGHT = "changeRight"
    CHANGE_TO_START = "changeToStart"
    CHANGE_TO_END = "changeToEnd"
    REQUEST_CLOSE = "requestClose"


class Outcome(Enum):
    STATE_CHANGED = "stateChanged"
    TERMINATE = "terminate"
    IGNORED = "ignored"


class CarouselState:
    """Cursor over the loaded items.

    `cursor` is in `[0, count)` whenever `count > 0` and stays `0` for an empty
    collection. Only `dispatch()` moves it.
    """

    def __init__(self, items: Iterable[str] = ()) -> None:
        self._items: tuple[str, ...] = tuple(items)
        self._cursor = 0

    def __repr__(self) -> str:
        return f"CarouselState(count={self.count}, cursor={self._cursor})"

    # ---- queries ----
    @property
    def items(self) -> tuple[str, ...]:
        return self._items

    @property
    def count(self) -> int:
        return len(self._items)

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def is_empty(self) -> bool:
        return not self._items

    @property
    def current_item(self) -> str | None:
        if self.is_empty:
            return None
        return self._items[self._cursor]

    # ---- transitions (pure: return the next cursor) ----
    def left(self) -> int:
        if self.is_empty:
            return self._cursor
        if self._cursor == 0:
            return self.count - 1
        return self._cursor - 1

    def right(self) -> int:
        if self.is_empty:
            return self._cursor
        if self._cursor == self.count - 1:
            return 0
        return self._cursor + 1

    def first(self) -> int:
        return 0

    def last(self) -> int:
        if self.is_empty:
            return self._cursor
        return self.count - 1

    # ---- command entry ----
    def dispatch(self, cmd: Command | str) -> Outcome:
        try:
            command = Command(cmd)
        except ValueError:
            _logger.debug("dispatch: ignoring unknown command %r", cmd)
            return Outcome.IGNORED

        if command is Command.REQUEST_CLOSE:
            return Outcome.TERMINATE

        if command is Command.CHANGE_LEFT:
            new_cursor = self.left()
        elif command is Command.CHANGE_RIGHT:
            new_cursor = self.right()
        elif command is Command.CHANGE_TO_START:
            new_cursor = self.first()
        else:
            new_cursor = self.last()

        _logger.debug("dispatch: %s cursor %d -> %d (count=%d)", command.value, self._cursor, new_cursor, self.count)
        self._cursor = new_cursor
        return Outcome.STATE_CHANGED
