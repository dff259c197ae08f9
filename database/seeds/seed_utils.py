"""
Random selection helpers for building seed records.

Properties reference agents, reviews and gallery images created earlier in
the same run. These helpers pick those references without replacement so a
property never points twice at the same document.
"""

import random
from collections.abc import Sequence
from typing import TypeVar

from shared.errors import InvalidRangeError

T = TypeVar("T")


def shuffled(items: Sequence[T], rng: random.Random | None = None) -> list[T]:
    """
    Return a uniformly shuffled copy of items (Fisher-Yates).

    The input sequence is left untouched.
    """
    rng = rng or random.Random()
    result = list(items)
    for i in range(len(result) - 1, 0, -1):
        j = rng.randint(0, i)
        result[i], result[j] = result[j], result[i]
    return result


def random_subset(
    items: Sequence[T],
    min_items: int,
    max_items: int,
    rng: random.Random | None = None,
) -> list[T]:
    """
    Pick a random-sized, randomly ordered subset of items without replacement.

    Args:
        items: Source sequence (not modified)
        min_items: Smallest subset size, inclusive
        max_items: Largest subset size, inclusive
        rng: Optional random generator for reproducible picks

    Returns:
        Between min_items and max_items distinct positions of items

    Raises:
        InvalidRangeError: If not 0 <= min_items <= max_items <= len(items)

    Examples:
        >>> random_subset(["a", "b", "c"], 1, 2)
        ['c']  # or any 1-2 distinct elements
        >>> random_subset([1, 2, 3], 2, 5)
        Traceback (most recent call last):
        InvalidRangeError: ...
    """
    if min_items > max_items:
        raise InvalidRangeError(
            f"min_items ({min_items}) cannot be greater than max_items ({max_items})"
        )
    if min_items < 0 or max_items > len(items):
        raise InvalidRangeError(
            f"min_items ({min_items}) or max_items ({max_items}) are out of "
            f"valid range for a sequence of {len(items)} items"
        )

    rng = rng or random.Random()
    subset_size = rng.randint(min_items, max_items)
    return shuffled(items, rng)[:subset_size]


def random_choice(items: Sequence[T], rng: random.Random | None = None) -> T:
    """
    Pick one element uniformly.

    Raises:
        InvalidRangeError: If items is empty
    """
    if not items:
        raise InvalidRangeError("cannot pick from an empty sequence")
    rng = rng or random.Random()
    return items[rng.randrange(len(items))]
