# SPDX-FileCopyrightText: 2025 sharecheck contributors
# SPDX-License-Identifier: MIT

"""Exact Lagrange interpolation through a basis of ``k`` points.

Both helpers accept :class:`~sharecheck.models.Share` objects or plain
``(x, y)`` pairs and never round: the result is a
:class:`~sharecheck.fraction.Rational`.
"""
from __future__ import annotations

from typing import Iterable, Sequence, Tuple, Union

from .errors import DegenerateSubset
from .fraction import ONE, ZERO, Rational
from .models import Share

Point = Union[Share, Tuple[int, int]]


def _coordinates(points: Iterable[Point]) -> list[tuple[int, int]]:
    coords: list[tuple[int, int]] = []
    for point in points:
        if isinstance(point, Share):
            coords.append((point.x, point.y))
        else:
            x, y = point
            coords.append((x, y))
    xs = [x for x, _ in coords]
    if len(set(xs)) != len(xs):
        raise DegenerateSubset(f"repeated x coordinate in basis {xs}")
    return coords


def value_at(subset: Sequence[Point], xq: int) -> Rational:
    """Evaluate the polynomial through *subset* at abscissa *xq*.

    ``L_i(xq) = prod_{j != i} (xq - x_j) / (x_i - x_j)``.
    """
    coords = _coordinates(subset)
    total = ZERO
    for i, (xi, yi) in enumerate(coords):
        num = ONE
        den = ONE
        for j, (xj, _) in enumerate(coords):
            if i == j:
                continue
            num = num.multiply(xq - xj)
            den = den.multiply(xi - xj)
        total = total.add(num.divide(den).multiply(yi))
    return total


def value_at_zero(subset: Sequence[Point]) -> Rational:
    """Return the constant term of the polynomial through *subset*.

    ``L_i(0) = prod_{j != i} (-x_j) / (x_i - x_j)``.
    """
    return value_at(subset, 0)


__all__ = ["value_at", "value_at_zero"]
