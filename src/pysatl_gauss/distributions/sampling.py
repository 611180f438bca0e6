"""
Sampling Interfaces
===================

This module defines the protocol and the array-backed implementation of the
sample containers returned by sampling strategies.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Iterable
    from typing import Any

    import numpy.typing as npt


class Sample(Protocol):
    """
    Protocol for sample containers.

    Attributes
    ----------
    array : numpy.ndarray
        Array representation of the samples.
    shape : tuple[int, ...]
        Shape of the sample array.
    """

    def __len__(self) -> int: ...
    @property
    def array(self) -> npt.NDArray[np.floating[Any]]: ...
    @property
    def shape(self) -> tuple[int, ...]: ...


class ArraySample:
    """
    Array-backed sample container.

    Samples are stored as a 2D floating-point array of shape
    ``(n_samples, n_dimensions)``.

    Parameters
    ----------
    data : numpy.ndarray
        2D floating-point array of shape (n, d).

    Raises
    ------
    ValueError
        If data is not 2D.
    """

    data: npt.NDArray[np.floating[Any]]

    def __init__(self, data: npt.NDArray[np.floating[Any]]) -> None:
        if data.ndim != 2:
            raise ValueError("ArraySample expects 2D array of shape (n, d).")
        self.data = data

    @classmethod
    def from_values(cls, values: Iterable[float], n: int) -> ArraySample:
        """
        Build a univariate ``(n, 1)`` sample from ``n`` scalar draws.

        Parameters
        ----------
        values : Iterable[float]
            Scalar draws; exactly ``n`` of them are consumed.
        n : int
            Number of draws.
        """
        column = np.fromiter(values, dtype=np.float64, count=n)
        return cls(column.reshape(n, 1))

    def __len__(self) -> int:
        return int(self.data.shape[0])

    @property
    def array(self) -> npt.NDArray[np.floating[Any]]:
        return self.data

    @property
    def shape(self) -> tuple[int, ...]:
        n, d = self.data.shape
        return int(n), int(d)


__all__ = [
    "Sample",
    "ArraySample",
]
