# SPDX-FileCopyrightText: 2025 sharecheck contributors
# SPDX-License-Identifier: MIT

"""Plain integer Shamir share generation.

The polynomial is sampled over the integers rather than a prime field, so the
shares are exactly the points that :mod:`sharecheck.reconstruct` expects.
This is a convenience for producing test material and is not hardened for
production key splitting.
"""
from __future__ import annotations

import json
import random
import secrets
from typing import Optional, Sequence

from .errors import InvalidThreshold
from .models import Share

DEFAULT_COEFFICIENT_BOUND = 2**64

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


def evaluate_polynomial(coeffs: Sequence[int], x: int) -> int:
    """Evaluate ``sum(coeffs[i] * x**i)`` exactly."""
    y = 0
    power = 1
    for c in coeffs:
        y += c * power
        power *= x
    return y


def split_secret(
    secret: int,
    *,
    n: int,
    k: int,
    coefficient_bound: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> list[Share]:
    """Split ``secret`` into ``n`` shares with threshold ``k``."""
    if not 2 <= k <= n:
        raise InvalidThreshold(f"Invalid n or k (n={n}, k={k})")
    if secret < 0:
        raise ValueError("Secret must be non-negative")
    bound = coefficient_bound or DEFAULT_COEFFICIENT_BOUND
    draw = rng.randrange if rng is not None else secrets.randbelow

    # a zero leading coefficient would lower the degree
    coeffs = [secret] + [draw(bound) for _ in range(k - 2)] + [1 + draw(bound - 1 or 1)]

    shares: list[Share] = []
    for x in range(1, n + 1):
        shares.append(Share(x=x, y=evaluate_polynomial(coeffs, x)))
    return shares


def to_base(value: int, base: int) -> str:
    """Render a non-negative integer in *base* (2..36)."""
    if not 2 <= base <= 36:
        raise ValueError(f"Unsupported base {base}")
    if value == 0:
        return "0"
    digits = []
    while value:
        value, rem = divmod(value, base)
        digits.append(_DIGITS[rem])
    return "".join(reversed(digits))


def dump_document(shares: Sequence[Share], *, n: int, k: int, base: int = 10) -> str:
    """Render shares as a JSON share document."""
    data: dict[str, object] = {"keys": {"n": n, "k": k}}
    for share in shares:
        data[str(share.x)] = {"base": str(base), "value": to_base(share.y, base)}
    return json.dumps(data, indent=2)


__all__ = ["evaluate_polynomial", "split_secret", "to_base", "dump_document"]
