"""
Models - Ordering

Block move for ordered child lists.
"""

from typing import Iterable, List, TypeVar

T = TypeVar("T")


def move_items(items: List[T], source: Iterable[int], destination: int) -> None:
    """
    Move the items at the source indices so they start at destination.

    Works in place. The moved items keep their relative order and
    destination is clamped to the length of the remaining list, so moving
    index 0 to 2 in [a, b, c] gives [b, c, a].
    """
    indices = sorted(set(source))
    if not indices:
        return
    if indices[0] < 0 or indices[-1] >= len(items):
        raise IndexError(f"move source {indices} out of range for {len(items)} items")

    selected = set(indices)
    moved = [items[i] for i in indices]
    remaining = [item for i, item in enumerate(items) if i not in selected]
    position = max(0, min(destination, len(remaining)))
    items[:] = remaining[:position] + moved + remaining[position:]
