# display/animations/scroller.py

import asyncio
from typing import Callable, Optional, Sequence

from .driver import AnimationDriver
from .window import Role, WindowView

class Scroller:
    """
    Scrolls a fixed-height window down an arranged item list.

    Frame values come from an AnimationDriver; each distinct value is drawn
    once, repeated values are skipped.
    """
    def __init__(self, style, terminal, driver: AnimationDriver,
                 frame_yield: float = 0.0005, logger=None):
        """
        Initialize the scroller with style, terminal and driver dependencies.

        Args:
            style: DisplayStyle instance for highlighting
            terminal: DisplayTerminal instance for output
            driver: AnimationDriver producing scroll offsets
            frame_yield: Seconds to yield to the event loop between polls
            logger: Optional Logger instance
        """
        self.style = style
        self.terminal = terminal
        self.driver = driver
        self.frame_yield = frame_yield
        self.logger = logger
        self.frames_rendered = 0

    def render_window(self, view: WindowView) -> None:
        """Redraw the whole window from the top-left corner."""
        self.terminal.move_to_origin()
        for item, role in view.rows():
            self.terminal.clear_line()
            if role is Role.MIDDLE:
                self.terminal.write_line(self.style.highlight(item))
            elif role is Role.LAST:
                # No newline so the cursor rests after the final visible row
                self.terminal.write(item)
            else:
                self.terminal.write_line(item)

    async def scroll(
        self,
        items: Sequence[str],
        height: int,
        render: Optional[Callable[[WindowView], None]] = None
    ) -> WindowView:
        """
        Run the scroll animation until it settles on the last window.

        Args:
            items: Arranged item list
            height: Number of visible rows
            render: Callback for each new window (default: render_window)

        Returns:
            The final window, whose middle item is the winner
        """
        render = render or self.render_window
        self.driver.start(0, len(items) - height)
        self.frames_rendered = 0

        last_value = None
        view = None
        while True:
            value = self.driver.current_value()
            if value != last_value:
                view = WindowView.at(items, value, height)
                render(view)
                last_value = value
                self.frames_rendered += 1
            if self.driver.finished and last_value == self.driver.range_end:
                break
            await asyncio.sleep(self.frame_yield)

        if self.logger:
            self.logger.debug(
                f"Scroll finished after {self.frames_rendered} frames at offset {last_value}"
            )
        return view
