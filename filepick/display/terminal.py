# display/terminal.py
import os
import sys
import shutil
import asyncio
from contextlib import ExitStack, closing
from dataclasses import dataclass
from typing import Optional, TextIO

from prompt_toolkit.input import create_input
from prompt_toolkit.keys import Keys

from ..errors import TerminalEnvironmentError

CSI = "\033["


@dataclass
class TerminalSize:
    """Terminal dimensions."""

    columns: int
    lines: int


class DisplayTerminal:
    """Low-level terminal operations and I/O."""

    def __init__(self, stream: Optional[TextIO] = None, stdin: Optional[TextIO] = None):
        """
        Initialize terminal state.

        Args:
            stream: Output stream (default: sys.stdout)
            stdin: Input stream for key reads (default: sys.stdin)
        """
        self._out = stream or sys.stdout
        self._in = stdin or sys.stdin
        self._cursor_visible = True
        # ANSI escape codes for text formatting
        self._reset_style = f"{CSI}0m"
        self._key_input = None
        self._input_stack = ExitStack()

    @staticmethod
    def command(cmd: str) -> str:
        """Return a control sequence introduced by CSI."""
        return f"{CSI}{cmd}"

    @property
    def width(self) -> int:
        """Return terminal width."""
        return self.get_size().columns

    @property
    def height(self) -> int:
        """Return terminal height."""
        return self.get_size().lines

    def get_size(self) -> TerminalSize:
        """Get terminal dimensions."""
        size = shutil.get_terminal_size()
        return TerminalSize(columns=size.columns, lines=size.lines)

    def _is_terminal(self) -> bool:
        """Return True if the output stream is a terminal."""
        return self._out.isatty()

    def ensure_available(self) -> TerminalSize:
        """
        Check that both ends are attached to a terminal with a known size.

        Returns:
            The current terminal size

        Raises:
            TerminalEnvironmentError: If no TTY is attached or the size query fails
        """
        if not self._is_terminal():
            raise TerminalEnvironmentError("Output is not a terminal")
        if not self._in.isatty():
            raise TerminalEnvironmentError("Input is not a terminal")
        try:
            size = os.get_terminal_size(self._out.fileno())
        except (OSError, ValueError) as e:
            raise TerminalEnvironmentError(f"Unable to query terminal size: {e}") from e
        if size.columns < 1 or size.lines < 1:
            raise TerminalEnvironmentError(
                f"Terminal reports an unusable size {size.columns}x{size.lines}"
            )
        return TerminalSize(columns=size.columns, lines=size.lines)

    def _manage_cursor(self, show: bool) -> None:
        """Toggle cursor visibility based on 'show' flag."""
        if self._cursor_visible != show:
            self._cursor_visible = show
            self._out.write(self.command("?25h" if show else "?25l"))
            self._out.flush()

    def show_cursor(self) -> None:
        """Make cursor visible."""
        self._manage_cursor(True)

    def hide_cursor(self) -> None:
        """Make cursor hidden."""
        self._manage_cursor(False)

    def reset(self) -> None:
        """Reset terminal: reset styling, show cursor and clear screen."""
        self.write(self._reset_style)
        self.show_cursor()
        self.clear_screen()

    def clear_screen(self) -> None:
        """Clear the terminal screen and reset cursor position."""
        self._out.write(self.command("2J") + self.command("H"))
        self._out.flush()

    def clear_line(self) -> None:
        """Erase the whole line under the cursor."""
        self._out.write(self.command("2K"))

    def move_to_origin(self) -> None:
        """Move the cursor to the top-left corner."""
        self._out.write(self.command("1;1H"))

    def move_to_row(self, row: int) -> None:
        """Move the cursor to the start of a zero-based row."""
        self._out.write(self.command(f"{row + 1};1H"))

    def write(self, text: str = "", newline: bool = False) -> None:
        """Write text to the output stream; append newline if requested."""
        try:
            self._out.write(text)
            if newline:
                self._out.write("\n")
            self._out.flush()
        except BrokenPipeError:
            pass  # Output went away; nothing left to draw on

    def write_line(self, text: str = "") -> None:
        """Write text with newline."""
        self.write(text, newline=True)

    async def _wait_for_key(self, key_input) -> str:
        """Attach to the running loop until a key arrives and return its data."""
        pressed = asyncio.Event()
        keys = []

        def keys_ready():
            for key_press in key_input.read_keys():
                keys.append(key_press.data)
            if keys:
                pressed.set()

        with key_input.attach(keys_ready):
            await pressed.wait()
        return keys[0]

    async def read_key(self) -> str:
        """
        Wait until a key is pressed and return its raw data.

        Inside the context manager the session's raw-mode input is reused.
        Otherwise a raw-mode input is opened just for this read.
        """
        if self._key_input is not None:
            return await self._wait_for_key(self._key_input)
        with closing(create_input(self._in)) as key_input:
            with key_input.raw_mode():
                return await self._wait_for_key(key_input)

    def discard_keys(self) -> int:
        """
        Drop keys typed so far in the session; return how many were dropped.

        Raises:
            KeyboardInterrupt: If Ctrl-C was among them
        """
        if self._key_input is None:
            return 0
        pending = self._key_input.read_keys() + self._key_input.flush_keys()
        if any(key_press.key == Keys.ControlC for key_press in pending):
            raise KeyboardInterrupt
        return len(pending)

    def __enter__(self):
        """Context manager enter: hide cursor, switch input to raw mode."""
        self._input_stack = ExitStack()
        if self._in.isatty():
            # No echo and no line buffering for the whole session
            self._key_input = self._input_stack.enter_context(closing(create_input(self._in)))
            self._input_stack.enter_context(self._key_input.raw_mode())
        self.hide_cursor()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit: restore input mode, styling and cursor, clear the frame."""
        try:
            self._input_stack.close()
        finally:
            self._key_input = None
            self.reset()
        return False  # Don't suppress exceptions
