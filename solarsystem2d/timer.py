"""Frame timer measuring delta and total running time, with pause support."""

from __future__ import annotations

import time
from typing import Callable


class GameTimer:
    """Counts time from a monotonic counter; stopped periods are not counted."""

    def __init__(
        self,
        clock: Callable[[], int] = time.perf_counter_ns,
        counts_per_second: int = 1_000_000_000,
    ) -> None:
        self._clock = clock
        self._seconds_per_count = 1.0 / counts_per_second
        self._delta_time = -1.0
        self._base_time = 0
        self._paused_time = 0
        self._stop_time = 0
        self._prev_time = 0
        self._curr_time = 0
        self._stopped = False

    def total_time(self) -> float:
        """Seconds since reset, excluding time spent stopped."""
        end = self._stop_time if self._stopped else self._curr_time
        return ((end - self._paused_time) - self._base_time) * self._seconds_per_count

    def delta_time(self) -> float:
        """Seconds between the last two ticks."""
        return self._delta_time

    def delta_time_ms(self) -> float:
        return self._delta_time * 1000.0

    def reset(self) -> None:
        now = self._clock()
        self._base_time = now
        self._prev_time = now
        self._stop_time = 0
        self._stopped = False

    def start(self) -> None:
        """Resume after a stop; the stopped interval is added to paused time."""
        if self._stopped:
            now = self._clock()
            self._paused_time += now - self._stop_time
            self._prev_time = now
            self._stop_time = 0
            self._stopped = False

    def stop(self) -> None:
        if not self._stopped:
            self._stop_time = self._clock()
            self._stopped = True

    def tick(self) -> None:
        """Advance one frame and update the delta time."""
        if self._stopped:
            self._delta_time = 0.0
            return
        self._curr_time = self._clock()
        self._delta_time = (self._curr_time - self._prev_time) * self._seconds_per_count
        self._prev_time = self._curr_time
        if self._delta_time < 0.0:
            self._delta_time = 0.0