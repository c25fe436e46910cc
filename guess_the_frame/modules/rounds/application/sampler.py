"""Candidate sampling."""

import random
from typing import TypeVar

T = TypeVar("T")


def shuffle_candidates(items: list[T], rng: random.Random | None = None) -> list[T]:
    """Shuffle items in place with Fisher-Yates and return the same list.

    Duplicates are left in; the consumer drops repeated ids while iterating so
    only as much of the list is examined as the request needs.
    """
    rng = rng or random.Random()
    for i in range(len(items) - 1, 0, -1):
        j = rng.randint(0, i)
        items[i], items[j] = items[j], items[i]
    return items
