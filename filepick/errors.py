# errors.py


class PickerError(Exception):
    """Base class for every fatal picker error."""


class ConfigurationError(PickerError):
    """Raised when the requested setup cannot produce a valid animation."""


class TerminalEnvironmentError(PickerError):
    """Raised when the terminal cannot be used (no TTY, unknown size)."""


class ItemSourceError(PickerError):
    """Raised when the list of items cannot be read."""
