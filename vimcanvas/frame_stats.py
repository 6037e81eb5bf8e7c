"""Frame time statistics for the on-screen profiler overlay."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterable

from vimcanvas.animation import Point, lerp

FLOAT32_EPSILON = 1.1920929e-07
FRAMETIMES_COUNT = 48


@dataclass(frozen=True)
class FrameSummary:
    """Minimum, maximum and average frame time, in milliseconds."""

    min: float
    max: float
    avg: float

    def labels(self) -> tuple[str, str, str]:
        """Text shown next to the graph for the minimum, average and maximum."""
        return (
            f"min: {self.min:.1f}ms",
            f"avg: {self.avg:.1f}ms",
            f"max: {self.max:.1f}ms",
        )


class FrameStats:
    """A rolling window of the most recent frame times."""

    def __init__(self, capacity: int = FRAMETIMES_COUNT) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._frametimes: deque[float] = deque(maxlen=capacity)

    @property
    def frametimes(self) -> tuple[float, ...]:
        """Recorded frame times in milliseconds, oldest first."""
        return tuple(self._frametimes)

    def __len__(self) -> int:
        return len(self._frametimes)

    def record(self, dt: float) -> None:
        """Record a frame that took ``dt`` seconds."""
        self._frametimes.append(dt * 1000.0)

    def fps(self, dt: float) -> float:
        """Frames per second for a frame of ``dt`` seconds."""
        return 1.0 / max(dt, FLOAT32_EPSILON)

    def fps_label(self, dt: float) -> str:
        return f"{self.fps(dt):.0f}FPS"

    def summary(self) -> FrameSummary:
        """Summarise the recorded frame times; raise if nothing was recorded."""
        if not self._frametimes:
            raise ValueError("no frame times recorded")
        values: Iterable[float] = self._frametimes
        total = sum(values)
        return FrameSummary(
            min=min(self._frametimes),
            max=max(self._frametimes),
            avg=total / len(self._frametimes),
        )

    def graph_points(
        self, left: float, right: float, bottom: float, height: float
    ) -> list[Point]:
        """Points of the frame time graph, scaled to fit between ``bottom`` and ``bottom - height``."""
        if not self._frametimes:
            return []
        summary = self.summary()
        min_g = summary.min * 0.8
        max_g = summary.max * 1.1
        diff = max_g - min_g
        count = len(self._frametimes)

        points = []
        for i, frame_time in enumerate(self._frametimes):
            x = lerp(left, right, i / count)
            if diff > 0.0:
                y = bottom - height * (frame_time - min_g) / diff
            else:
                y = bottom
            points.append(Point(x, y))
        return points