"""Cursor blink state machine."""

from __future__ import annotations

import copy
import time
from enum import Enum
from typing import Any, Callable, Optional

from vimcanvas.scheduling import REDRAW_SCHEDULER


class BlinkState(Enum):
    WAITING = "waiting"
    ON = "on"
    OFF = "off"


_NEXT_STATE = {
    BlinkState.WAITING: BlinkState.ON,
    BlinkState.ON: BlinkState.OFF,
    BlinkState.OFF: BlinkState.ON,
}


class BlinkStatus:
    """Tracks whether a blinking cursor is currently visible.

    The cursor is any object with ``blinkwait``, ``blinkon`` and ``blinkoff``
    attributes holding milliseconds or ``None``, and comparable for equality.
    """

    def __init__(
        self,
        clock: Callable[[], float] = time.monotonic,
        scheduler: Optional[Any] = None,
    ) -> None:
        self._clock = clock
        self._scheduler = scheduler if scheduler is not None else REDRAW_SCHEDULER
        self._state = BlinkState.WAITING
        self._last_transition = clock()
        self._previous_cursor: Optional[Any] = None

    @property
    def state(self) -> BlinkState:
        return self._state

    def _delay_for_state(self, cursor: Any) -> Optional[int]:
        if self._state is BlinkState.WAITING:
            return cursor.blinkwait
        if self._state is BlinkState.OFF:
            return cursor.blinkoff
        return cursor.blinkon

    def update_status(self, cursor: Any) -> bool:
        """Advance the blink state for ``cursor`` and return whether it is visible."""
        if self._previous_cursor is None or cursor != self._previous_cursor:
            self._previous_cursor = copy.copy(cursor)
            self._last_transition = self._clock()
            if cursor.blinkwait is not None and cursor.blinkwait != 0:
                self._state = BlinkState.WAITING
            else:
                self._state = BlinkState.ON

        if 0 in (cursor.blinkwait, cursor.blinkoff, cursor.blinkon):
            return True

        delay = self._delay_for_state(cursor)
        if delay is not None and delay > 0:
            if self._last_transition + delay / 1000.0 < self._clock():
                self._state = _NEXT_STATE[self._state]
                self._last_transition = self._clock()

        scheduled = self._delay_for_state(cursor)
        if scheduled is not None:
            self._scheduler.schedule(self._last_transition + scheduled / 1000.0)

        return self._state is not BlinkState.OFF