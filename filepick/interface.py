# interface.py

import asyncio
import random
from typing import List, Optional, Tuple

from .logger import Logger
from .config import PickerConfig
from .errors import ConfigurationError, PickerError
from .display import Display
from .display.animations import create_easing
from .items import ItemList, ItemSource, GitItemSource

class Picker:
    """
    Main entry point that assembles the Display and an ItemSource, picks a
    winner and animates the terminal onto it.
    """

    def __init__(self, source: Optional[ItemSource] = None,
                 config: Optional[PickerConfig] = None,
                 display: Optional[Display] = None):
        """
        Initialize components.

        Args:
            source: Where the items come from (default: files tracked by git)
            config: Run settings (default: PickerConfig())
            display: Display to draw on (default: the controlling terminal)

        Raises:
            ConfigurationError: If the config is invalid
        """
        self.config = (config or PickerConfig()).validate()
        self._init_components(source, display)

    def _init_components(self, source: Optional[ItemSource],
                         display: Optional[Display]) -> None:
        try:
            self.logger = Logger(__name__, self.config.logging_enabled, self.config.log_file)
            self.display = display or Display(logger=self.logger)
            self.source = source or GitItemSource(logger=self.logger)
            self.rng = random.Random(self.config.seed)
            self.logger.debug(f"Initialized picker with {self.config}")
        except Exception as e:
            if hasattr(self, 'logger'):
                self.logger.error(f"Init error: {e}")
            raise

    def prepare(self, winner_index: Optional[int] = None) -> Tuple[ItemList, str, int, List[str]]:
        """
        Do every step that can fail before the screen is touched.

        Returns:
            Tuple of (trimmed items, untrimmed winner, window height, arranged items)
        """
        size = self.display.terminal.ensure_available()
        height = self.config.height or size.lines
        if height > size.lines:
            raise ConfigurationError(
                f"Window height {height} exceeds the terminal height ({size.lines})"
            )

        items = ItemList.from_source(
            self.source, self.config.suffixes, winner_index=winner_index, rng=self.rng
        )
        winner = items.winner
        items.trim(size.columns)
        arranged = items.arranged(height)
        self.logger.debug(
            f"Picked item {items.winner_index} of {len(items)} ({winner!r}), "
            f"window height {height}"
        )
        return items, winner, height, arranged

    async def pick(self, winner_index: Optional[int] = None) -> str:
        """
        Run one full session: scroll onto the winner, blink until a key is pressed.

        Args:
            winner_index: Force the winner instead of drawing one

        Returns:
            The winning item, untrimmed
        """
        items, winner, height, arranged = self.prepare(winner_index)
        easing = create_easing(self.config.easing, self.config.bezier_points)
        terminal = self.display.terminal
        animations = self.display.animations

        with terminal:
            terminal.clear_screen()
            scroller = animations.create_scroller(
                self.config.duration, easing, self.config.frame_yield
            )
            await scroller.scroll(arranged, height)
            # Only a key pressed while the winner blinks ends the session
            discarded = terminal.discard_keys()
            if discarded:
                self.logger.debug(f"Discarded {discarded} keys typed during the scroll")

            stop_event = asyncio.Event()
            blinker = animations.create_blinker(
                items.winner, height // 2, stop_event, self.config.blink_interval
            )
            blinker.start()
            try:
                key = await terminal.read_key()
                self.logger.debug(f"Key {key!r} pressed, stopping")
            finally:
                await blinker.stop()
        return winner

    def run(self, winner_index: Optional[int] = None) -> str:
        """Synchronous wrapper around pick()."""
        try:
            return asyncio.run(self.pick(winner_index))
        except PickerError as e:
            self.logger.error(f"Pick failed: {e}")
            raise

    def announce(self, winner: str) -> str:
        """Return the styled closing panel for the winner."""
        return self.display.style.format_winner(winner)
