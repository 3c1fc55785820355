# SPDX-FileCopyrightText: 2025 sharecheck contributors
# SPDX-License-Identifier: MIT

"""Robust Shamir secret reconstruction with bad-share detection."""

from .combinations import combinations, count_combinations
from .errors import (
    DegenerateSubset,
    DivisionByZero,
    InputFormatError,
    InvalidFraction,
    InvalidThreshold,
    ReconstructionFailed,
    ShareCheckError,
)
from .fraction import Rational
from .integrity import annotate, share_digest
from .interpolation import value_at, value_at_zero
from .models import ReconstructionResult, Share
from .parsing import ShareDocument, load_document, parse_document, parse_in_base
from .reconstruct import reconstruct

__all__ = [
    "combinations",
    "count_combinations",
    "DegenerateSubset",
    "DivisionByZero",
    "InputFormatError",
    "InvalidFraction",
    "InvalidThreshold",
    "ReconstructionFailed",
    "ShareCheckError",
    "Rational",
    "annotate",
    "share_digest",
    "value_at",
    "value_at_zero",
    "ReconstructionResult",
    "Share",
    "ShareDocument",
    "load_document",
    "parse_document",
    "parse_in_base",
    "reconstruct",
]
