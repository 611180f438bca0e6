"""
Sampler Configuration
=====================

Configuration objects for the samplers in :mod:`pysatl_gauss.stats`.
"""

from __future__ import annotations

__author__ = "Artem Romanyuk"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass, replace
from typing import Any

from pysatl_gauss.stats.source import DEFAULT_BLOCK_SIZE


@dataclass(frozen=True, slots=True)
class ZigguratConfig:
    """
    Configuration of the Ziggurat sampling strategy.

    Parameters
    ----------
    seed : int | None, default None
        Seed of the NumPy-backed uniform source created when the caller does
        not pass a source. If ``None``, uses system entropy.
    block_size : int, default 4096
        Number of values the default source draws from NumPy at once.
    max_attempts : int | None, default None
        Safety cap on rejected attempts per draw. ``None`` means no cap; with
        a correctly uniform source the cap is never reached.

    Raises
    ------
    ValueError
        If ``block_size`` or ``max_attempts`` is not positive.
    """

    seed: int | None = None
    block_size: int = DEFAULT_BLOCK_SIZE
    max_attempts: int | None = None

    def __post_init__(self) -> None:
        if self.block_size <= 0:
            raise ValueError(f"block_size must be positive, got {self.block_size}")
        if self.max_attempts is not None and self.max_attempts <= 0:
            raise ValueError(f"max_attempts must be positive, got {self.max_attempts}")

    def merged(self, **overrides: Any) -> ZigguratConfig:
        """
        Return a copy with the given fields replaced.

        ``None`` overrides are ignored, so ``merged(seed=None)`` keeps the
        configured seed.
        """
        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **changes) if changes else self


__all__ = [
    "ZigguratConfig",
]
