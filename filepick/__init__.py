# __init__.py

from .logger import Logger
from .config import PickerConfig
from .errors import PickerError, ConfigurationError, TerminalEnvironmentError, ItemSourceError
from .interface import Picker

__all__ = [
    "Picker", "PickerConfig", "Logger",
    "PickerError", "ConfigurationError", "TerminalEnvironmentError", "ItemSourceError",
]
