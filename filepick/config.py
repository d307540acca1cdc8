# config.py

from dataclasses import dataclass
from typing import Optional, Tuple

from .errors import ConfigurationError
from .display.animations.easing import EASINGS, CubicBezier

DEFAULT_BEZIER_POINTS = CubicBezier.DEFAULT_POINTS

@dataclass
class PickerConfig:
    """
    Settings for a single pick-and-animate run.

    Attributes:
        suffixes: Only items ending with one of these are kept (empty keeps all)
        duration: Seconds the scroll animation lasts
        easing: Name of the easing curve ("linear" or "cubic-bezier")
        bezier_points: Control values for the cubic Bézier curve
        blink_interval: Seconds each blink phase is shown
        frame_yield: Seconds the scroll loop yields between polls
        height: Window height in rows; defaults to the terminal height
        seed: Seed for the winner selection
        logging_enabled: Enable debug logging
        log_file: Log file path ("-" for stderr)
    """
    suffixes: Tuple[str, ...] = ()
    duration: float = 5.0
    easing: str = "cubic-bezier"
    bezier_points: Tuple[float, ...] = DEFAULT_BEZIER_POINTS
    blink_interval: float = 0.5
    frame_yield: float = 0.0005
    height: Optional[int] = None
    seed: Optional[int] = None
    logging_enabled: bool = False
    log_file: Optional[str] = None

    def validate(self) -> "PickerConfig":
        """Raise ConfigurationError on the first invalid field; return self otherwise."""
        if self.duration < 0:
            raise ConfigurationError(f"duration must not be negative, got {self.duration}")
        if self.blink_interval <= 0:
            raise ConfigurationError(f"blink interval must be positive, got {self.blink_interval}")
        if self.frame_yield < 0:
            raise ConfigurationError(f"frame yield must not be negative, got {self.frame_yield}")
        if self.height is not None and self.height < 1:
            raise ConfigurationError(f"height must be at least 1, got {self.height}")
        if self.easing not in EASINGS:
            raise ConfigurationError(
                f"Unknown easing '{self.easing}' (choose from {', '.join(sorted(EASINGS))})"
            )
        if len(self.bezier_points) != 4:
            raise ConfigurationError(
                f"cubic Bézier needs exactly 4 control points, got {len(self.bezier_points)}"
            )
        return self
