# SPDX-FileCopyrightText: 2025 sharecheck contributors
# SPDX-License-Identifier: MIT

"""Consensus reconstruction of a secret from possibly corrupted shares.

Every size-``k`` subset of the shares defines one candidate polynomial. A
candidate is scored by how many of *all* supplied shares lie exactly on it;
the first candidate (in enumeration order) with the highest score wins and
its fit vector splits the shares into good and bad ones.

The parallel path evaluates subsets in index-ordered batches and merges each
batch by index, so it reports the same subset as the sequential path. Early
exit on full consensus is cooperative: the batch in flight is completed and
no further batches are dispatched.
"""
from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from functools import partial
from itertools import islice
from typing import Iterable, Iterator, Optional, Sequence, Tuple

from . import config
from .combinations import combinations, count_combinations
from .errors import DegenerateSubset, InvalidThreshold, ReconstructionFailed
from .fraction import Rational
from .interpolation import value_at, value_at_zero
from .models import ReconstructionResult, Share

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Candidate:
    secret: Rational
    subset: Tuple[Share, ...]
    fits: Tuple[bool, ...]
    fit_count: int


def _lies_on(subset: Sequence[Share], share: Share) -> bool:
    value = value_at(subset, share.x)
    return value.is_integer() and value.numerator == share.y


def _evaluate(subset: Tuple[Share, ...], shares: Tuple[Share, ...]) -> Optional[_Candidate]:
    """Score one basis against every share; ``None`` for degenerate bases."""
    xs = [share.x for share in subset]
    if len(set(xs)) != len(xs):
        _logger.debug("Skipping subset with repeated x: %s", xs)
        return None
    try:
        secret = value_at_zero(subset)
    except DegenerateSubset as exc:
        _logger.debug("Skipping degenerate subset %s: %s", xs, exc)
        return None
    fits = tuple(_lies_on(subset, share) for share in shares)
    return _Candidate(secret=secret, subset=subset, fits=fits, fit_count=sum(fits))


def _batched(iterator: Iterator[Tuple[Share, ...]], size: int) -> Iterator[list[Tuple[Share, ...]]]:
    while True:
        batch = list(islice(iterator, size))
        if not batch:
            return
        yield batch


def _search_sequential(shares: Tuple[Share, ...], k: int) -> Optional[_Candidate]:
    best: Optional[_Candidate] = None
    for subset in combinations(shares, k):
        candidate = _evaluate(subset, shares)
        if candidate is None:
            continue
        if best is None or candidate.fit_count > best.fit_count:
            best = candidate
            _logger.debug(
                "New best subset x=%s fits %d/%d",
                [s.x for s in subset],
                candidate.fit_count,
                len(shares),
            )
            if candidate.fit_count == len(shares):
                break
    return best


def _search_parallel(shares: Tuple[Share, ...], k: int, workers: int, batch_size: int) -> Optional[_Candidate]:
    best: Optional[_Candidate] = None
    evaluate = partial(_evaluate, shares=shares)
    with ThreadPoolExecutor(max_workers=workers) as executor:
        for batch in _batched(combinations(shares, k), batch_size):
            full = False
            for candidate in executor.map(evaluate, batch):
                if candidate is None:
                    continue
                if best is None or candidate.fit_count > best.fit_count:
                    best = candidate
                    if candidate.fit_count == len(shares):
                        full = True
                        break
            if full:
                _logger.debug("Full consensus reached; stopping dispatch")
                break
    return best


def reconstruct(
    shares: Iterable[Share],
    k: int,
    *,
    workers: Optional[int] = None,
    batch_size: Optional[int] = None,
    require_corroboration: Optional[bool] = None,
) -> ReconstructionResult:
    """Reconstruct the secret from *shares* with threshold *k*.

    Raises :class:`InvalidThreshold` when ``k < 2`` or ``k`` exceeds the
    number of shares, and :class:`ReconstructionFailed` when no subset yields
    a usable candidate. Keyword arguments left as ``None`` come from
    :data:`sharecheck.config.policy`.
    """

    pool = tuple(shares)
    if isinstance(k, bool) or not isinstance(k, int):
        raise InvalidThreshold(f"k must be an integer, got {k!r}")
    if k < 2:
        raise InvalidThreshold("k must be >= 2")
    if k > len(pool):
        raise InvalidThreshold(f"k cannot exceed number of parsed shares ({k} > {len(pool)})")

    settings = config.policy
    workers = settings.workers if workers is None else workers
    batch_size = settings.batch_size if batch_size is None else batch_size
    if require_corroboration is None:
        require_corroboration = settings.require_corroboration

    _logger.info(
        "Searching %d subsets of size %d over %d shares",
        count_combinations(len(pool), k),
        k,
        len(pool),
    )
    if workers > 1:
        best = _search_parallel(pool, k, workers, max(1, batch_size))
    else:
        best = _search_sequential(pool, k)

    if best is None:
        raise ReconstructionFailed("Failed to reconstruct with given shares.")

    result = ReconstructionResult(
        secret=best.secret,
        subset=best.subset,
        fits=best.fits,
        fit_count=best.fit_count,
        shares=pool,
    )
    if require_corroboration and not result.is_corroborated:
        raise ReconstructionFailed(
            f"No share outside the basis agrees with any candidate (best fit {result.fit_count}/{result.total})"
        )
    if result.bad_shares:
        _logger.info(
            "Identified %d bad share(s): x=%s",
            len(result.bad_shares),
            [share.x for share in result.bad_shares],
        )
    _logger.info("Reconstructed secret with fit %d/%d", result.fit_count, result.total)
    return result


__all__ = ["reconstruct"]
