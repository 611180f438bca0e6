"""
Support primitives.

A support answers a single question: does a point (or each point of an array)
belong to the set on which the distribution puts its mass.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, cast, overload, runtime_checkable

import numpy as np

if TYPE_CHECKING:
    from pysatl_gauss.types import BoolArray, Number, NumericArray


@runtime_checkable
class Support(Protocol):
    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...


@dataclass(frozen=True, slots=True)
class ContinuousSupport(Support):
    """
    Support of a univariate continuous distribution spanning the real line.

    Infinities are limits rather than points of the line, and NaN is not a
    number at all, so neither is contained.
    """

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        """
        Check if point(s) lie on the real line.

        Parameters
        ----------
        x : Number or NumericArray
            Point(s) to check.

        Returns
        -------
        bool or BoolArray
            True for finite points, False otherwise.
        """
        result = np.isfinite(np.asarray(x, dtype=np.float64))

        if np.ndim(result) == 0:
            return bool(result)

        return cast("BoolArray", result)

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast("Number", x)))


__all__ = [
    "Support",
    "ContinuousSupport",
]
