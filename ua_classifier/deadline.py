# ua_classifier/deadline.py

import time
from typing import Callable

from ua_classifier.errors import ClassificationTimeout


class Deadline:
    """
    Cooperative wall-clock budget for one classification.
    Checked between pipeline steps, inside the rule loop and before caching.
    """

    def __init__(self, timeout_seconds: float, clock: Callable[[], float] = time.monotonic):
        self.timeout_seconds = timeout_seconds
        self._clock = clock
        self.expires_at = clock() + timeout_seconds
        self.cancelled = False

    def remaining(self) -> float:
        if self.cancelled:
            return 0.0
        return max(0.0, self.expires_at - self._clock())

    def cancel(self) -> None:
        """Mark as abandoned by the caller; every later check fails"""
        self.cancelled = True

    def expired(self) -> bool:
        return self.cancelled or self._clock() >= self.expires_at

    def check(self) -> None:
        if self.expired():
            raise ClassificationTimeout(
                f"UA parsing timed out after {int(self.timeout_seconds * 1000)} ms"
            )
