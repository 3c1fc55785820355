# SPDX-FileCopyrightText: 2025 sharecheck contributors
# SPDX-License-Identifier: MIT

"""Centralised reconstruction settings.

Defaults can be overridden through ``SHARECHECK_*`` environment variables so
that batch jobs can tune the search without code changes. Malformed values
fall back to the defaults.
"""

from __future__ import annotations

import os
from dataclasses import dataclass


def _load_int(name: str, default: int) -> int:
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _load_bool(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    lowered = value.strip().lower()
    if lowered in {"1", "true", "yes", "on"}:
        return True
    if lowered in {"0", "false", "no", "off"}:
        return False
    return default


def _load_str(name: str, default: str) -> str:
    value = os.environ.get(name)
    if value is None or not value.strip():
        return default
    return value.strip()


@dataclass(frozen=True)
class ReconstructionPolicy:
    """Holds runtime tunables for the consensus search."""

    workers: int = 1
    batch_size: int = 64
    require_corroboration: bool = False
    digest_algorithm: str = "sha256"
    log_level: str = "WARNING"


def load_policy() -> ReconstructionPolicy:
    """Load the reconstruction policy considering environment overrides."""

    return ReconstructionPolicy(
        workers=max(1, _load_int("SHARECHECK_WORKERS", 1)),
        batch_size=max(1, _load_int("SHARECHECK_BATCH_SIZE", 64)),
        require_corroboration=_load_bool("SHARECHECK_REQUIRE_CORROBORATION", False),
        digest_algorithm=_load_str("SHARECHECK_DIGEST", "sha256").lower(),
        log_level=_load_str("SHARECHECK_LOG_LEVEL", "WARNING").upper(),
    )


policy = load_policy()


__all__ = ["ReconstructionPolicy", "policy", "load_policy"]
