"""Timing values for game updates and rendering."""

from __future__ import annotations

import logging
import time
from typing import Callable

__all__ = ["GameTime", "MAX_FRAME_SECONDS"]

MAX_FRAME_SECONDS = 0.2

_log = logging.getLogger(__name__)


class GameTime:
    """Tracks the time since the start and the time between frames."""

    def __init__(self, clock: Callable[[], float] | None = None) -> None:
        self._clock = clock if clock is not None else time.perf_counter
        self._previous_total_time = self._clock()
        self._current_total_time = self._clock()
        self._elapsed_time = 0.0

    def update(self) -> None:
        """Advance the clock; frame gaps over the limit keep the last elapsed time."""
        self._previous_total_time = self._current_total_time
        self._current_total_time = self._clock()
        delta = self._current_total_time - self._previous_total_time
        if delta <= MAX_FRAME_SECONDS:
            self._elapsed_time = delta
        else:
            _log.warning("Frame took %.3f seconds; hopefully you were debugging!", delta)

    @property
    def elapsed_time(self) -> float:
        """Seconds since the previous frame."""
        return self._elapsed_time

    @property
    def total_time(self) -> float:
        """Clock reading at the latest update."""
        return self._current_total_time