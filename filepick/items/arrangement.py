# items/arrangement.py

from typing import List, Sequence

from ..errors import ConfigurationError

def split_index(length: int, winner_index: int, height: int) -> int:
    """
    Return the rotation point that lands the winner in the middle of the
    last window.

    The window ending at the rotation boundary starts `height // 2` rows
    above the winner. Negative positions wrap around the list.
    """
    first = winner_index - height // 2
    last = first + height - 1
    return ((last + 1) % length + length) % length

def arrange(items: Sequence[str], winner_index: int, height: int) -> List[str]:
    """
    Rotate items left so that the final scroll window is centered on the winner.

    Args:
        items: Items in their original order
        winner_index: Position of the winner in `items`
        height: Number of visible rows

    Returns:
        A new rotated list; `items` is not modified

    Raises:
        ConfigurationError: If the list is empty, the height does not fit or
            the winner index is out of range
    """
    length = len(items)
    if length == 0:
        raise ConfigurationError("No items to choose from")
    if height < 1:
        raise ConfigurationError(f"Window height must be at least 1, got {height}")
    if height > length:
        raise ConfigurationError(
            f"Window height {height} exceeds the number of items ({length})"
        )
    if not 0 <= winner_index < length:
        raise ConfigurationError(f"Winner index {winner_index} is out of range for {length} items")

    split = split_index(length, winner_index, height)
    return list(items[split:]) + list(items[:split])
