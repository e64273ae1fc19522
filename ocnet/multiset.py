"""Operations on multisets represented as counters."""

from __future__ import annotations

from collections import Counter
from collections.abc import Hashable, Iterable, Mapping
from typing import TypeVar

T = TypeVar("T", bound=Hashable)


def intersect_multisets(bags: Iterable[Mapping[T, int]]) -> Counter[T]:
    """Intersect multisets, keeping each element with its minimum count.

    Only elements present in every bag appear in the result. A single bag is
    returned as a copy; an empty collection of bags raises ValueError.
    """
    bag_list = list(bags)
    if not bag_list:
        raise ValueError("At least one bag must be provided")

    if len(bag_list) == 1:
        return Counter({item: count for item, count in bag_list[0].items() if count > 0})

    smallest = min(bag_list, key=len)
    intersection: Counter[T] = Counter()
    for item in smallest:
        min_count = min(bag.get(item, 0) for bag in bag_list)
        if min_count > 0:
            intersection[item] = min_count
    return intersection