"""Deterministic cycling through the permutations of a list."""

from __future__ import annotations

import threading
from collections.abc import Hashable, Sequence
from typing import TypeVar

T = TypeVar("T", bound=Hashable)

_state: dict[tuple, list[int]] = {}
_state_lock = threading.Lock()


def next_index_permutation(indices: Sequence[int]) -> list[int] | None:
    """Return the lexicographically next arrangement of the indices.

    Returns None when the indices are already in their last arrangement
    (descending order), or when there are fewer than two of them.
    """
    result = list(indices)
    if len(result) < 2:
        return None

    pivot = len(result) - 2
    while result[pivot] >= result[pivot + 1]:
        if pivot == 0:
            return None
        pivot -= 1

    swap = len(result) - 1
    while result[swap] <= result[pivot]:
        swap -= 1

    result[pivot], result[swap] = result[swap], result[pivot]
    result[pivot + 1 :] = reversed(result[pivot + 1 :])
    return result


def next_permutation(base_list: Sequence[T]) -> list[T]:
    """Return the next permutation of the list, remembering where each list is.

    Each distinct list (by content) advances through its permutations in
    lexicographic order of positions, wrapping back to the original order after
    the last one. The first call for a list yields the permutation after the
    original order.
    """
    key = tuple(base_list)
    identity = list(range(len(key)))
    with _state_lock:
        current = _state.get(key, identity)
        following = next_index_permutation(current)
        if following is None:
            following = identity
        _state[key] = following
    return [key[i] for i in following]


def reset_permutations() -> None:
    """Forget the position reached for every list."""
    with _state_lock:
        _state.clear()