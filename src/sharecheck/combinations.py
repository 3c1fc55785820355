# SPDX-FileCopyrightText: 2025 sharecheck contributors
# SPDX-License-Identifier: MIT

"""Lazy enumeration of fixed-size subsets."""
from __future__ import annotations

from math import comb
from typing import Iterator, Sequence, Tuple, TypeVar

T = TypeVar("T")


def combinations(items: Sequence[T], k: int) -> Iterator[Tuple[T, ...]]:
    """Yield every size-``k`` subset of *items* in lexicographic index order.

    Elements keep their original relative order inside each subset. The
    generator is empty when ``k`` exceeds ``len(items)``; calling the
    function again starts a fresh enumeration.
    """

    if k < 1:
        raise ValueError("k must be at least 1")
    pool = tuple(items)
    n = len(pool)
    if k > n:
        return
    indices = list(range(k))
    while True:
        yield tuple(pool[i] for i in indices)
        pos = k - 1
        while pos >= 0 and indices[pos] == pos + n - k:
            pos -= 1
        if pos < 0:
            return
        indices[pos] += 1
        for j in range(pos + 1, k):
            indices[j] = indices[j - 1] + 1


def count_combinations(n: int, k: int) -> int:
    """Return ``C(n, k)``, the number of subsets :func:`combinations` yields."""
    if k < 1 or k > n:
        return 0
    return comb(n, k)


__all__ = ["combinations", "count_combinations"]
