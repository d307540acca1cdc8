# display/animations/blinker.py

import asyncio
from typing import Optional

class Blinker:
    """
    Blinks the winning item on its row until told to stop.

    Alternates a highlighted and a plain phase. The stop event is the only
    way to end the animation; it is checked after every phase.
    """
    def __init__(self, style, terminal, text: str, row: int,
                 stop_event: asyncio.Event, interval: float = 0.5, logger=None):
        """
        Initialize the blink animation.

        Args:
            style: DisplayStyle instance for highlighting
            terminal: DisplayTerminal instance for output
            text: Item to blink
            row: Zero-based screen row the item sits on
            stop_event: Set by the caller to end the animation
            interval: Seconds each phase stays on screen
            logger: Optional Logger instance
        """
        self.style = style
        self.terminal = terminal
        self.text = text
        self.row = row
        self.stop_event = stop_event
        self.interval = interval
        self.logger = logger

        self.animation_task: Optional[asyncio.Task] = None
        self.phases_written = 0

    def _write_phase(self, highlighted: bool) -> None:
        self.terminal.move_to_row(self.row)
        self.terminal.clear_line()
        self.terminal.write(self.style.highlight(self.text) if highlighted else self.text)
        self.phases_written += 1

    async def _wait_phase(self) -> bool:
        """Wait out one phase; return True if the stop event fired meanwhile."""
        try:
            await asyncio.wait_for(self.stop_event.wait(), timeout=self.interval)
        except asyncio.TimeoutError:
            return False
        return True

    async def _animate(self) -> None:
        """Run phases until the stop event is set."""
        highlighted = True
        while not self.stop_event.is_set():
            self._write_phase(highlighted)
            if await self._wait_phase():
                break
            highlighted = not highlighted
        if self.logger:
            self.logger.debug(f"Blink stopped after {self.phases_written} phases")

    def start(self) -> asyncio.Task:
        """Schedule the animation on the running loop and return its task."""
        self.animation_task = asyncio.create_task(self._animate())
        return self.animation_task

    async def stop(self) -> None:
        """Signal the animation to end and wait for it to finish."""
        self.stop_event.set()
        if self.animation_task:
            await self.animation_task
