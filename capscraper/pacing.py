"""
Request pacing policies.

The scraper calls ``wait()`` once after every season attempt.
"""
import time
from typing import Callable


class FixedDelay:
    """Sleep a fixed number of seconds on every call."""

    def __init__(self, seconds: float = 1.0, sleep: Callable[[float], None] = time.sleep):
        if seconds < 0:
            raise ValueError('delay must be >= 0')
        self.seconds = seconds
        self._sleep = sleep

    def wait(self) -> None:
        if self.seconds > 0:
            self._sleep(self.seconds)


class MinInterval:
    """
    Enforce a minimum interval between calls.

    Only the part of the interval not already spent since the previous
    call is slept.
    """

    def __init__(
        self,
        seconds: float = 1.0,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.monotonic,
    ):
        if seconds < 0:
            raise ValueError('interval must be >= 0')
        self.seconds = seconds
        self._sleep = sleep
        self._clock = clock
        self._last = None

    def wait(self) -> None:
        now = self._clock()
        if self._last is not None:
            remaining = self.seconds - (now - self._last)
            if remaining > 0:
                self._sleep(remaining)
        self._last = self._clock()
