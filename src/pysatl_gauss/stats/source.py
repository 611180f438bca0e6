"""
Uniform Random Sources
======================

Samplers in this package never own a random number generator. They borrow a
*uniform source* from the caller for the duration of one call:

- :class:`UniformSource` — protocol with two draws: a uniform unsigned 64-bit
  word and a uniform real in ``[0, 1)``.
- :class:`NumpyUniformSource` — default implementation backed by
  :class:`numpy.random.Generator`, buffering draws in blocks.
"""

from __future__ import annotations

__author__ = "Artem Romanyuk"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import warnings
from typing import Protocol, runtime_checkable

import numpy as np

DEFAULT_BLOCK_SIZE = 4096


@runtime_checkable
class UniformSource(Protocol):
    """
    Protocol for uniform random sources.

    Methods
    -------
    next_u64() -> int
        Uniformly distributed integer in ``[0, 2**64)``.
    next_f64() -> float
        Uniformly distributed real in ``[0, 1)``.
    """

    def next_u64(self) -> int: ...
    def next_f64(self) -> float: ...


class NumpyUniformSource:
    """
    Uniform source backed by a NumPy generator.

    Words are taken from the raw output of the generator's bit generator,
    reals from :meth:`numpy.random.Generator.random`. Both are drawn in blocks
    of ``block_size`` values and handed out one at a time.

    Parameters
    ----------
    seed : int | None, optional
        Seed for :func:`numpy.random.default_rng`. Ignored if ``generator`` is
        given. ``None`` seeds from system entropy.
    block_size : int, default 4096
        Number of values drawn from the generator per refill.
    generator : numpy.random.Generator | None, optional
        Existing generator to draw from.

    Raises
    ------
    ValueError
        If ``block_size`` is not positive.
    """

    __slots__ = ("_generator", "_block_size", "_words", "_word_pos", "_reals", "_real_pos")

    def __init__(
        self,
        seed: int | None = None,
        block_size: int = DEFAULT_BLOCK_SIZE,
        generator: np.random.Generator | None = None,
    ) -> None:
        if block_size <= 0:
            raise ValueError(f"block_size must be positive, got {block_size}")
        self._generator = generator if generator is not None else np.random.default_rng(seed)
        self._block_size = block_size
        self._words: list[int] = []
        self._word_pos = 0
        self._reals: list[float] = []
        self._real_pos = 0

    @property
    def generator(self) -> np.random.Generator:
        """Underlying NumPy generator."""
        return self._generator

    def next_u64(self) -> int:
        if self._word_pos == len(self._words):
            raw = self._generator.bit_generator.random_raw(self._block_size)
            self._words = raw.tolist()
            self._word_pos = 0
        word = self._words[self._word_pos]
        self._word_pos += 1
        return word

    def next_f64(self) -> float:
        if self._real_pos == len(self._reals):
            self._reals = self._generator.random(self._block_size).tolist()
            self._real_pos = 0
        real = self._reals[self._real_pos]
        self._real_pos += 1
        return real


def resolve_source(
    source: UniformSource | None,
    seed: int | None = None,
    block_size: int = DEFAULT_BLOCK_SIZE,
) -> UniformSource:
    """
    Pick the source a sampler should draw from.

    Parameters
    ----------
    source : UniformSource | None
        Caller-supplied source. Returned as is when given.
    seed : int | None, optional
        Seed of a fresh :class:`NumpyUniformSource`, used when ``source`` is
        ``None``.
    block_size : int, default 4096
        Block size of the fresh source.

    Returns
    -------
    UniformSource
        The source to draw from.

    Raises
    ------
    TypeError
        If ``source`` does not implement :class:`UniformSource`.
    """
    if source is None:
        return NumpyUniformSource(seed=seed, block_size=block_size)

    if not isinstance(source, UniformSource):
        raise TypeError(
            f"Uniform source must provide next_u64() and next_f64(), got {type(source).__name__}"
        )
    if seed is not None:
        warnings.warn(
            "Both a uniform source and a seed were given; the seed is ignored.",
            UserWarning,
            stacklevel=3,
        )
    return source


__all__ = [
    "DEFAULT_BLOCK_SIZE",
    "UniformSource",
    "NumpyUniformSource",
    "resolve_source",
]
