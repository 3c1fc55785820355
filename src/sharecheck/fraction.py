# SPDX-FileCopyrightText: 2025 sharecheck contributors
# SPDX-License-Identifier: MIT

"""Exact rational numbers over Python's arbitrary precision integers.

:class:`Rational` is always kept in lowest terms with a positive denominator,
so two values are equal exactly when their numerator/denominator pairs are
equal. Nothing in this module touches floating point.
"""
from __future__ import annotations

from math import gcd
from typing import Union

from .errors import DivisionByZero, InvalidFraction

RationalLike = Union["Rational", int]


class Rational:
    """Immutable fraction in canonical reduced form."""

    __slots__ = ("_numerator", "_denominator")

    def __init__(self, numerator: int, denominator: int = 1) -> None:
        if isinstance(numerator, bool) or not isinstance(numerator, int):
            raise TypeError(f"numerator must be an int, got {type(numerator).__name__}")
        if isinstance(denominator, bool) or not isinstance(denominator, int):
            raise TypeError(f"denominator must be an int, got {type(denominator).__name__}")
        if denominator == 0:
            raise InvalidFraction("Fraction denominator 0")
        if denominator < 0:
            numerator, denominator = -numerator, -denominator
        divisor = gcd(numerator, denominator)
        self._numerator = numerator // divisor
        self._denominator = denominator // divisor

    @classmethod
    def from_int(cls, value: int) -> Rational:
        return cls(value, 1)

    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    def is_integer(self) -> bool:
        return self._denominator == 1

    # arithmetic -----------------------------------------------------------

    def add(self, other: RationalLike) -> Rational:
        o = _coerce(other)
        return Rational(
            self._numerator * o._denominator + o._numerator * self._denominator,
            self._denominator * o._denominator,
        )

    def subtract(self, other: RationalLike) -> Rational:
        o = _coerce(other)
        return Rational(
            self._numerator * o._denominator - o._numerator * self._denominator,
            self._denominator * o._denominator,
        )

    def multiply(self, other: RationalLike) -> Rational:
        o = _coerce(other)
        return Rational(self._numerator * o._numerator, self._denominator * o._denominator)

    def divide(self, other: RationalLike) -> Rational:
        o = _coerce(other)
        if o._numerator == 0:
            raise DivisionByZero("Division by zero fraction")
        return Rational(self._numerator * o._denominator, self._denominator * o._numerator)

    # operator protocol ----------------------------------------------------

    def __add__(self, other: object) -> Rational:
        if not isinstance(other, (Rational, int)):
            return NotImplemented
        return self.add(other)

    __radd__ = __add__

    def __sub__(self, other: object) -> Rational:
        if not isinstance(other, (Rational, int)):
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other: object) -> Rational:
        if not isinstance(other, (Rational, int)):
            return NotImplemented
        return _coerce(other).subtract(self)

    def __mul__(self, other: object) -> Rational:
        if not isinstance(other, (Rational, int)):
            return NotImplemented
        return self.multiply(other)

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> Rational:
        if not isinstance(other, (Rational, int)):
            return NotImplemented
        return self.divide(other)

    def __rtruediv__(self, other: object) -> Rational:
        if not isinstance(other, (Rational, int)):
            return NotImplemented
        return _coerce(other).divide(self)

    def __neg__(self) -> Rational:
        return Rational(-self._numerator, self._denominator)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Rational):
            return self._numerator == other._numerator and self._denominator == other._denominator
        if isinstance(other, int) and not isinstance(other, bool):
            return self._denominator == 1 and self._numerator == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self._numerator, self._denominator))

    def __repr__(self) -> str:
        return f"Rational({self._numerator}, {self._denominator})"

    def __str__(self) -> str:
        if self._denominator == 1:
            return str(self._numerator)
        return f"{self._numerator}/{self._denominator}"


ZERO = Rational(0)
ONE = Rational(1)


def _coerce(value: RationalLike) -> Rational:
    if isinstance(value, Rational):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return Rational(value, 1)
    raise TypeError(f"cannot use {type(value).__name__} as a rational")


__all__ = ["Rational", "ZERO", "ONE"]
