# display/animations/window.py

from enum import Enum
from dataclasses import dataclass
from typing import Iterator, Sequence, Tuple

from ...errors import ConfigurationError

class Role(Enum):
    """Position of a row inside the visible window."""
    PLAIN = "plain"
    MIDDLE = "middle"
    LAST = "last"

@dataclass(frozen=True)
class WindowView:
    """
    Read-only view of `height` consecutive items starting at `first_index`.

    Indexes refer to the arranged item list, not to positions on screen.
    """
    items: Tuple[str, ...]
    first_index: int
    middle_index: int
    last_index: int

    @classmethod
    def at(cls, items: Sequence[str], offset: int, height: int) -> "WindowView":
        """
        Build the window that starts at `offset`.

        Raises:
            ConfigurationError: If the window does not fit inside `items`
        """
        last = offset + height - 1
        if height < 1 or offset < 0 or last >= len(items):
            raise ConfigurationError(
                f"Window at offset {offset} with height {height} "
                f"does not fit {len(items)} items"
            )
        return cls(
            items=tuple(items[offset:last + 1]),
            first_index=offset,
            middle_index=offset + height // 2,
            last_index=last
        )

    @property
    def middle(self) -> str:
        """The item at the highlight position."""
        return self.items[self.middle_index - self.first_index]

    def role_of(self, index: int) -> Role:
        if index == self.middle_index:
            return Role.MIDDLE
        if index == self.last_index:
            return Role.LAST
        return Role.PLAIN

    def rows(self) -> Iterator[Tuple[str, Role]]:
        """Yield (item, role) pairs from top to bottom."""
        for i, item in enumerate(self.items, start=self.first_index):
            yield item, self.role_of(i)
