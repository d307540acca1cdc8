# items/__init__.py

import random
from typing import Iterable, Iterator, List, Optional, Sequence

from ..errors import ConfigurationError
from ..display.style import truncate
from .arrangement import arrange, split_index
from .source import ItemSource, GitItemSource, FileItemSource, StaticItemSource

class ItemList:
    """
    The items to pick from together with the chosen winner.

    The winner is drawn uniformly at random when the list is built; pass a
    seeded `rng` or an explicit `winner_index` for repeatable picks.
    """
    def __init__(self, items: Iterable[str], winner_index: Optional[int] = None,
                 rng: Optional[random.Random] = None):
        self._items: List[str] = list(items)
        if not self._items:
            raise ConfigurationError("No items to choose from")

        if winner_index is None:
            winner_index = (rng or random.Random()).randrange(len(self._items))
        if not 0 <= winner_index < len(self._items):
            raise ConfigurationError(
                f"Winner index {winner_index} is out of range for {len(self._items)} items"
            )
        self.winner_index = winner_index

    @classmethod
    def from_source(cls, source: ItemSource, suffixes: Sequence[str] = (),
                    winner_index: Optional[int] = None,
                    rng: Optional[random.Random] = None) -> "ItemList":
        """Load items from a source, keeping only those ending in one of `suffixes`."""
        items = source.items()
        if suffixes:
            items = [item for item in items if item.endswith(tuple(suffixes))]
        if not items:
            wanted = f" matching {', '.join(suffixes)}" if suffixes else ""
            raise ConfigurationError(f"No items{wanted} to choose from")
        return cls(items, winner_index=winner_index, rng=rng)

    @property
    def items(self) -> List[str]:
        return list(self._items)

    @property
    def winner(self) -> str:
        return self._items[self.winner_index]

    def trim(self, width: int) -> "ItemList":
        """Fit every item into `width` columns. Call once, before arranging."""
        self._items = [truncate(item, width) for item in self._items]
        return self

    def arranged(self, height: int) -> List[str]:
        """Return the items rotated so the last window of `height` rows centers the winner."""
        return arrange(self._items, self.winner_index, height)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __getitem__(self, index):
        return self._items[index]

__all__ = [
    'ItemList', 'ItemSource', 'GitItemSource', 'FileItemSource', 'StaticItemSource',
    'arrange', 'split_index',
]
