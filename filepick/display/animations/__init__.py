# display/animations/__init__.py

import asyncio
from typing import Callable, Optional

from .easing import Linear, CubicBezier, create_easing
from .driver import AnimationDriver
from .window import Role, WindowView
from .scroller import Scroller
from .blinker import Blinker

class DisplayAnimations:
    """Coordinates terminal animation components."""
    def __init__(self, terminal, style, logger=None):
        """Initialize with DisplayTerminal and DisplayStyle instances."""
        self.terminal = terminal
        self.style = style
        self.logger = logger

    def create_scroller(self, duration: float,
                        easing: Optional[Callable[[float], float]] = None,
                        frame_yield: float = 0.0005) -> Scroller:
        """Create a scroller driven by a fresh AnimationDriver."""
        driver = AnimationDriver(duration, easing)
        return Scroller(self.style, self.terminal, driver, frame_yield, self.logger)

    def create_blinker(self, text: str, row: int, stop_event: asyncio.Event,
                       interval: float = 0.5) -> Blinker:
        """Create a blink animation for the item on the given row."""
        return Blinker(self.style, self.terminal, text, row, stop_event, interval, self.logger)

__all__ = [
    'DisplayAnimations', 'AnimationDriver', 'Blinker', 'CubicBezier', 'Linear',
    'Role', 'Scroller', 'WindowView', 'create_easing',
]
