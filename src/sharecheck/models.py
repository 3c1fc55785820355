# SPDX-FileCopyrightText: 2025 sharecheck contributors
# SPDX-License-Identifier: MIT

"""Value objects passed between the parser, the search and the reports."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from .fraction import Rational


@dataclass(frozen=True)
class Share:
    """One ``(x, y)`` point of the hidden polynomial.

    ``raw`` keeps the textual encoding of ``y`` in ``base`` so that reports
    and digests can refer to the value exactly as it was supplied.
    """

    x: int
    y: int
    label: str = ""
    raw: Optional[str] = field(default=None, compare=False)
    base: int = field(default=10, compare=False)

    def __post_init__(self) -> None:
        if self.raw is None:
            object.__setattr__(self, "raw", str(self.y))
        if not self.label:
            object.__setattr__(self, "label", str(self.x))


@dataclass(frozen=True)
class ReconstructionResult:
    """Winning candidate of a consensus search."""

    secret: Rational
    subset: Tuple[Share, ...]
    fits: Tuple[bool, ...]
    fit_count: int
    shares: Tuple[Share, ...]

    @property
    def total(self) -> int:
        return len(self.shares)

    @property
    def good_shares(self) -> list[Share]:
        return [share for share, ok in zip(self.shares, self.fits) if ok]

    @property
    def bad_shares(self) -> list[Share]:
        return [share for share, ok in zip(self.shares, self.fits) if not ok]

    @property
    def subset_xs(self) -> list[int]:
        return [share.x for share in self.subset]

    @property
    def is_clean(self) -> bool:
        """True when the reconstructed secret is an integer."""
        return self.secret.is_integer()

    @property
    def is_corroborated(self) -> bool:
        """True when some share outside the basis agrees with it.

        With exactly ``k`` shares nothing can corroborate the basis, so every
        supplied share being in it counts as corroborated.
        """
        return self.fit_count > len(self.subset) or self.total == len(self.subset)

    @property
    def secret_text(self) -> str:
        return str(self.secret)


__all__ = ["Share", "ReconstructionResult"]
