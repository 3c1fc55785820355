# SPDX-FileCopyrightText: 2025 sharecheck contributors
# SPDX-License-Identifier: MIT

"""Integrity digests used to annotate reconstruction reports.

Digests never influence which shares are accepted; they only let operators
compare shares and secrets across runs without printing them in full.
"""
from __future__ import annotations

import hashlib
from functools import partial
from typing import Any, Callable, Dict

from .models import ReconstructionResult, Share

DigestHook = Callable[[str, str], str]


def share_digest(label: str, raw_value: str, *, algorithm: str = "sha256") -> str:
    """Return the hex digest of ``"<label>:<raw_value>"``."""
    try:
        digest = hashlib.new(algorithm)
    except ValueError as exc:
        raise ValueError(f"Unsupported digest algorithm {algorithm!r}") from exc
    digest.update(f"{label}:{raw_value}".encode("utf-8"))
    return digest.hexdigest()


def digest_hook(algorithm: str) -> DigestHook:
    """Bind :func:`share_digest` to *algorithm*."""
    share_digest("", "", algorithm=algorithm)
    return partial(share_digest, algorithm=algorithm)


def secret_digest(secret_text: str) -> str:
    return hashlib.sha256(secret_text.encode("utf-8")).hexdigest()


def _describe(share: Share, digest: DigestHook) -> Dict[str, Any]:
    return {
        "x": share.x,
        "label": share.label,
        "base": share.base,
        "raw": share.raw,
        "y": str(share.y),
        "digest": digest(share.label, share.raw or str(share.y)),
    }


def annotate(result: ReconstructionResult, digest: DigestHook = share_digest) -> Dict[str, Any]:
    """Build the report consumed by presentation layers."""
    report: Dict[str, Any] = {
        "secret": {
            "exact": result.secret_text,
            "integer": result.is_clean,
        },
        "fit_count": result.fit_count,
        "total": result.total,
        "corroborated": result.is_corroborated,
        "subset_x": result.subset_xs,
        "good": [_describe(share, digest) for share in result.good_shares],
        "bad": [_describe(share, digest) for share in result.bad_shares],
    }
    if result.is_clean:
        decimal = str(result.secret.numerator)
        report["secret"]["decimal"] = decimal
        report["secret"]["sha256"] = secret_digest(decimal)
    return report


__all__ = ["DigestHook", "share_digest", "digest_hook", "secret_digest", "annotate"]
