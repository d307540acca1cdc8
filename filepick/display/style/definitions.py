# display/style/definitions.py

from typing import Dict, Optional

class StyleDefinitions:
    """
    Core style definitions container that serves as the foundation layer
    for the styling system. Has no external dependencies.
    """

    # ANSI format utility
    FMT = staticmethod(lambda x: f'\033[{x}m')

    def __init__(
        self,
        formats: Optional[Dict[str, str]] = None,
        colors: Optional[Dict[str, Dict[str, str]]] = None
    ):
        """
        Initialize style definitions with optional custom configurations.
        """
        self._default_formats = {
            'RESET': self.FMT('0'),
            # Black text on a white background
            'HIGHLIGHT_ON': self.FMT('30;47')
        }

        self._default_colors = {
            'GREEN': {'ansi': '\033[38;5;47m', 'rich': 'green3'}
        }

        self.formats = formats if formats is not None else self._default_formats.copy()
        self.colors = colors if colors is not None else self._default_colors.copy()

    def get_format(self, name: str) -> str:
        """Get a format code by name."""
        return self.formats.get(name, '')

    def get_color(self, name: str) -> Dict[str, str]:
        """Get a color configuration by name."""
        return self.colors.get(name, {'ansi': '', 'rich': ''})
