# SPDX-FileCopyrightText: 2025 sharecheck contributors
# SPDX-License-Identifier: MIT

"""Exception hierarchy shared by every sharecheck component."""
from __future__ import annotations


class ShareCheckError(RuntimeError):
    """Base class for all errors raised by sharecheck."""


class InvalidFraction(ShareCheckError, ValueError):
    """Raised when a rational is constructed with a zero denominator."""


class DivisionByZero(ShareCheckError, ZeroDivisionError):
    """Raised when a rational is divided by a zero-valued rational."""


class DegenerateSubset(ShareCheckError, ValueError):
    """Raised when an interpolation basis repeats an ``x`` coordinate."""


class InvalidThreshold(ShareCheckError, ValueError):
    """Raised when the threshold is out of range for the supplied shares."""


class ReconstructionFailed(ShareCheckError):
    """Raised when no candidate polynomial is supported by the shares."""


class InputFormatError(ShareCheckError, ValueError):
    """Raised when a share document cannot be parsed."""


__all__ = [
    "ShareCheckError",
    "InvalidFraction",
    "DivisionByZero",
    "DegenerateSubset",
    "InvalidThreshold",
    "ReconstructionFailed",
    "InputFormatError",
]
