"""Progress reporting for long-running solves."""

from __future__ import annotations

import logging
from typing import Callable, Optional

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[float], None]


class ProgressSink:
    """Forwards fractional progress to an optional caller-owned callback.

    Values are clamped to ``[0, 1]`` and never go backwards within one solve.
    Callbacks run synchronously on the solving thread and must not call back
    into the finder that is reporting.
    """

    def __init__(self, callback: Optional[ProgressCallback] = None) -> None:
        self._callback = callback
        self._last = 0.0
        self._reports = 0

    @property
    def last_value(self) -> float:
        return self._last

    @property
    def report_count(self) -> int:
        return self._reports

    def report(self, value: float) -> None:
        value = min(1.0, max(0.0, float(value)))
        value = max(value, self._last)
        self._last = value
        self._reports += 1
        logger.debug(f"Route progress {value:.3f}")
        if self._callback is not None:
            self._callback(value)

    def finish(self) -> None:
        """Report completion unless 1.0 has already been sent."""
        if self._reports == 0 or self._last < 1.0:
            self.report(1.0)
