"""Frame redraw scheduling and application run state."""

from __future__ import annotations

import logging
import threading
import time
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class RedrawScheduler:
    """Decides whether the next frame needs to be drawn."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._lock = threading.Lock()
        self._scheduled_frame: Optional[float] = None
        self._frame_queued = True

    def schedule(self, new_scheduled: float) -> None:
        """Request a redraw at the given clock time, keeping the earliest request."""
        logger.debug("Redraw scheduled for %r", new_scheduled)
        with self._lock:
            if self._scheduled_frame is None or new_scheduled < self._scheduled_frame:
                self._scheduled_frame = new_scheduled

    def queue_next_frame(self) -> None:
        logger.debug("Next frame queued")
        self._frame_queued = True

    def should_draw(self) -> bool:
        if self._frame_queued:
            self._frame_queued = False
            return True
        with self._lock:
            if self._scheduled_frame is not None and self._scheduled_frame < self._clock():
                self._scheduled_frame = None
                return True
            return False


class RunningTracker:
    """Tracks whether the application should keep running and its exit code."""

    def __init__(self) -> None:
        self._running = True
        self._exit_code = 0

    def quit(self, reason: str) -> None:
        self._running = False
        logger.info("Quit %s", reason)

    def quit_with_code(self, code: int, reason: str) -> None:
        self._exit_code = code
        self._running = False
        logger.info("Quit with code %d: %s", code, reason)

    def is_running(self) -> bool:
        return self._running

    def exit_code(self) -> int:
        return self._exit_code


REDRAW_SCHEDULER = RedrawScheduler()
RUNNING_TRACKER = RunningTracker()