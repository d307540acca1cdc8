# display/animations/driver.py

import math
import time
from typing import Callable, Optional

from ...errors import ConfigurationError
from .easing import CubicBezier

class AnimationDriver:
    """
    Turns elapsed wall-clock time into integer frame values.

    The driver is polled: callers read current_value() as often as they like
    and stop once finished is True. Nothing in here sleeps.
    """
    def __init__(
        self,
        duration: float,
        easing: Optional[Callable[[float], float]] = None,
        clock: Callable[[], float] = time.monotonic
    ):
        """
        Initialize the driver.

        Args:
            duration: Animation length in seconds
            easing: Maps normalized time to normalized progress (default: CubicBezier)
            clock: Source of the current time in seconds

        Raises:
            ConfigurationError: If duration is negative
        """
        if duration < 0:
            raise ConfigurationError(f"duration must not be negative, got {duration}")
        self.duration = duration
        self.easing = easing or CubicBezier()
        self._clock = clock

        self.range_start = 0
        self.range_end = 0
        self.start_time: Optional[float] = None
        self.end_time: Optional[float] = None
        self._finished = False

    def start(self, range_start: int, range_end: int) -> None:
        """Begin a run over [range_start, range_end] starting now."""
        self.range_start = range_start
        self.range_end = range_end
        self.start_time = self._clock()
        self.end_time = self.start_time + self.duration
        self._finished = False

    @property
    def finished(self) -> bool:
        """True once the end time has been observed; never resets during a run."""
        return self._finished

    def current_value(self) -> int:
        """Return the frame value for the current time."""
        if self.start_time is None:
            raise RuntimeError("AnimationDriver.start() must be called before reading values")

        now = self._clock()
        if now >= self.end_time:
            self._finished = True
        if self._finished:
            return self.range_end

        t = (now - self.start_time) / self.duration
        span = self.range_end - self.range_start
        return self.range_start + math.floor(span * self.easing(t))
