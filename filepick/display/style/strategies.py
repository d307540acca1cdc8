# display/style/strategies.py

from rich.panel import Panel
from rich.align import Align
from rich.console import Console
from .definitions import StyleDefinitions

class StyleStrategies:
    """
    Formats whole blocks of output with Rich, sized to the terminal.
    """
    def __init__(self, definitions: StyleDefinitions, terminal):
        """
        Initialize with style definitions and terminal dependencies.

        Args:
            definitions: StyleDefinitions for colors
            terminal: DisplayTerminal instance for sizing
        """
        self.definitions = definitions
        self.terminal = terminal
        self.console = Console(force_terminal=True, color_system="truecolor", record=True)

    def format_panel(self, text: str, title: str = "", color: str = "GREEN") -> str:
        """
        Format text as a centered Rich panel.

        Args:
            text: Panel body
            title: Optional panel title
            color: Name of the border color in the definitions

        Returns:
            Rendered panel with ANSI styling
        """
        border = self.definitions.get_color(color).get('rich') or "green3"
        with self.console.capture() as capture:
            self.console.print(
                Panel(
                    Align.center(text.rstrip()),
                    title=title or None,
                    title_align="right",
                    border_style=border,
                    padding=(0, 2),
                    expand=True,
                    width=self.terminal.width
                )
            )
        return capture.get()
