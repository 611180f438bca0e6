"""
Computation Primitives
======================

This module defines :class:`AnalyticalComputation`, the building block used to
evaluate distribution characteristics: a closed-form callable provided by a
distribution directly and bound to a single characteristic.

Notes
-----
- Callables accept either a scalar or a NumPy array, whichever the underlying
  formula supports; moments ignore their data argument.
- ``**options`` are free-form and forwarded to the callable unchanged (e.g.
  ``excess`` for kurtosis).
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from mypy_extensions import KwArg

from pysatl_gauss.types import GenericCharacteristicName


@dataclass(frozen=True, slots=True)
class AnalyticalComputation[In, Out]:
    """Analytical computation provided directly by the distribution.

    Parameters
    ----------
    target : str
        Characteristic name (e.g., ``"pdf"``).
    func : Callable[[In, KwArg(Any)], Out]
        Analytical callable.
    """

    target: GenericCharacteristicName
    func: Callable[[In, KwArg(Any)], Out]

    def __call__(self, data: In, **options: Any) -> Out:
        """Evaluate the analytical function."""
        return self.func(data, **options)


__all__ = [
    "AnalyticalComputation",
]
