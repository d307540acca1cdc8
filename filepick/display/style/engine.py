# display/style/engine.py

from .definitions import StyleDefinitions
from .strategies import StyleStrategies

ELLIPSIS = "..."

class StyleEngine:
    """
    Applies styles to item text: highlighting, width fitting and the
    closing winner announcement.
    """
    def __init__(self, terminal, definitions: StyleDefinitions, strategies: StyleStrategies):
        """Initialize with terminal, style definitions, and display strategies."""
        self.terminal = terminal
        self.definitions = definitions
        self.strategies = strategies

    def get_format(self, name: str) -> str:
        """Return format code by name."""
        return self.definitions.get_format(name)

    def highlight(self, text: str) -> str:
        """Wrap text in the highlight style followed by a reset."""
        return f"{self.get_format('HIGHLIGHT_ON')}{text}{self.get_format('RESET')}"

    def truncate(self, text: str, width: int) -> str:
        """Cut text longer than width down to exactly width, ending in an ellipsis."""
        return truncate(text, width)

    def format_winner(self, winner: str) -> str:
        """Render the closing announcement for the winning item."""
        return self.strategies.format_panel(winner, title="filepick")

def truncate(text: str, width: int) -> str:
    """
    Fit text into `width` columns.

    Longer strings keep their first `width - 3` characters followed by
    "...". Widths too small for the marker just cut the text.
    """
    if len(text) <= width:
        return text
    if width < len(ELLIPSIS):
        return text[:max(width, 0)]
    return f"{text[:width - len(ELLIPSIS)]}{ELLIPSIS}"
