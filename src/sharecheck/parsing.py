# SPDX-FileCopyrightText: 2025 sharecheck contributors
# SPDX-License-Identifier: MIT

"""Reading share documents.

A document is a JSON object of the form::

    {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "4"},
        "2": {"base": "2", "value": "111"},
        ...
    }

Numeric top-level keys are share abscissas, ``value`` is ``y`` written in
``base``. Any other top-level key is ignored.
"""
from __future__ import annotations

import json
import re
from dataclasses import dataclass
from typing import Any, Mapping, Tuple

from .errors import InputFormatError
from .models import Share

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_NUMERIC_KEY = re.compile(r"^\d+$")


@dataclass(frozen=True)
class ShareDocument:
    n: int
    k: int
    shares: Tuple[Share, ...]


def parse_in_base(text: str, base: int) -> int:
    """Parse *text* as a non-negative integer in *base* (2..36).

    Underscores and spaces are ignored as digit separators.
    """
    if isinstance(base, bool) or not isinstance(base, int) or not 2 <= base <= 36:
        raise InputFormatError(f"Unsupported base {base}")
    allowed = _DIGITS[:base]
    value = 0
    seen = False
    for ch in text.strip():
        if ch in "_ ":
            continue
        digit = ch.lower()
        if digit not in _DIGITS:
            raise InputFormatError(f"Unsupported digit {ch!r}")
        if digit not in allowed:
            raise InputFormatError(f"Digit {ch!r} invalid for base {base}")
        value = value * base + allowed.index(digit)
        seen = True
    if not seen:
        raise InputFormatError(f"Empty value for base {base}")
    return value


def _parse_base(raw: Any, label: str) -> int:
    try:
        return int(str(raw).strip(), 10)
    except ValueError as exc:
        raise InputFormatError(f"Invalid base {raw!r} for key {label}") from exc


def parse_document(data: Mapping[str, Any]) -> ShareDocument:
    """Build a :class:`ShareDocument` from decoded JSON."""
    if not isinstance(data, Mapping):
        raise InputFormatError("Invalid JSON: top level must be an object")
    keys = data.get("keys")
    if not isinstance(keys, Mapping):
        raise InputFormatError("Invalid JSON: missing keys.n or keys.k")
    n, k = keys.get("n"), keys.get("k")
    if any(isinstance(v, bool) or not isinstance(v, int) for v in (n, k)):
        raise InputFormatError("Invalid JSON: missing keys.n or keys.k")

    shares = []
    for label, entry in data.items():
        if label == "keys" or not _NUMERIC_KEY.match(label):
            continue
        if (
            not isinstance(entry, Mapping)
            or not isinstance(entry.get("base"), str)
            or not isinstance(entry.get("value"), str)
        ):
            raise InputFormatError(f"Invalid entry for key {label}")
        base = _parse_base(entry["base"], label)
        y = parse_in_base(entry["value"], base)
        shares.append(Share(x=int(label), y=y, label=label, raw=entry["value"], base=base))

    shares.sort(key=lambda share: share.x)
    return ShareDocument(n=n, k=k, shares=tuple(shares))


def load_document(text: str) -> ShareDocument:
    """Decode JSON *text* and parse it as a share document."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise InputFormatError(f"Invalid JSON: {exc.msg}") from exc
    return parse_document(data)


__all__ = ["ShareDocument", "parse_in_base", "parse_document", "load_document"]
