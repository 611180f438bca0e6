"""
Computation and Sampling Strategies
===================================

This module defines the pluggable strategy interfaces and default implementations:

- :class:`ComputationStrategy` — resolves characteristic methods.
- :class:`DefaultComputationStrategy` — resolves analytical characteristics,
  optionally caching resolved methods per distribution.
- :class:`SamplingStrategy` — draws samples from a distribution.
- :class:`DefaultSamplingUnivariateStrategy` — draws ``(n, 1)`` samples using
  ``ppf`` applied to uniforms taken from a :class:`UniformSource`.

Notes
-----
- Strategies hold configuration only. A uniform source passed by the caller
  is used for one call and never stored.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import weakref
from typing import TYPE_CHECKING, Any, Protocol

from pysatl_gauss.distributions.computation import AnalyticalComputation
from pysatl_gauss.stats.source import resolve_source
from pysatl_gauss.types import CharacteristicName, GenericCharacteristicName

from .sampling import ArraySample, Sample

if TYPE_CHECKING:
    from pysatl_gauss.stats.source import UniformSource

    from .distribution import Distribution

type Method[In, Out] = AnalyticalComputation[In, Out]


class ComputationStrategy[In, Out](Protocol):
    """Protocol for characteristic resolution strategies."""

    enable_caching: bool

    def query_method(
        self, state: GenericCharacteristicName, distr: "Distribution", **options: Any
    ) -> Method[In, Out]: ...


class DefaultComputationStrategy[In, Out]:
    """
    Default characteristic resolver.

    Resolution order
    ----------------
    1. If caching is enabled and the method was resolved before for the same
       distribution object, return the cached method.
    2. If the distribution provides an analytical implementation, return it.
    3. Otherwise fail.

    Parameters
    ----------
    enable_caching : bool, default False
        If ``True``, cache resolved methods per distribution object and
        characteristic name. Entries are dropped together with the
        distribution they belong to.

    Raises
    ------
    RuntimeError
        If the distribution has no implementation of the requested
        characteristic.
    """

    def __init__(self, enable_caching: bool = False) -> None:
        self.enable_caching = enable_caching
        self._cache: dict[
            int,
            tuple["weakref.ref[Distribution]", dict[GenericCharacteristicName, Method[In, Out]]],
        ] = {}

    def _cached_methods(
        self, distr: "Distribution"
    ) -> dict[GenericCharacteristicName, Method[In, Out]]:
        key = id(distr)
        entry = self._cache.get(key)
        if entry is not None and entry[0]() is distr:
            return entry[1]

        def evict(ref: "weakref.ref[Distribution]") -> None:
            current = self._cache.get(key)
            if current is not None and current[0] is ref:
                del self._cache[key]

        methods: dict[GenericCharacteristicName, Method[In, Out]] = {}
        self._cache[key] = (weakref.ref(distr, evict), methods)
        return methods

    def query_method(
        self, state: GenericCharacteristicName, distr: "Distribution", **options: Any
    ) -> Method[In, Out]:
        """
        Resolve the analytical method for ``state``.

        Parameters
        ----------
        state : str
            Target characteristic name to resolve.
        distr : Distribution
            The distribution providing the analytical computations.
        **options
            Unused by this strategy; accepted for protocol compatibility.

        Returns
        -------
        Method
            Callable implementing ``state``.
        """
        cached = self._cached_methods(distr) if self.enable_caching else None
        if cached is not None and state in cached:
            return cached[state]

        computations = distr.analytical_computations
        if not computations:
            raise RuntimeError("Distribution provides no analytical computations.")
        if state not in computations:
            raise RuntimeError(
                f"Characteristic '{state}' is not available; "
                f"known characteristics: {sorted(computations)}."
            )

        method = computations[state]
        if cached is not None:
            cached[state] = method
        return method


class SamplingStrategy(Protocol):
    """Protocol for sampling strategies (return a :class:`Sample`)."""

    def sample(self, n: int, distr: "Distribution", **options: Any) -> Sample: ...


class DefaultSamplingUnivariateStrategy(SamplingStrategy):
    """
    Univariate sampler using inverse transform sampling.

    The strategy resolves the distribution's ``ppf`` and applies it to i.i.d.
    uniforms ``U ~ U(0, 1)`` read from a :class:`UniformSource`.

    Options
    -------
    source : UniformSource, optional
        Uniform source to draw from. Borrowed for this call only.
    seed : int, optional
        Seed of a fresh NumPy-backed source, used when ``source`` is omitted.

    Returns
    -------
    ArraySample
        A 2D sample of shape ``(n, 1)``.
    """

    def sample(
        self,
        n: int,
        distr: "Distribution",
        source: "UniformSource | None" = None,
        seed: int | None = None,
        **options: Any,
    ) -> ArraySample:
        if n < 0:
            raise ValueError(f"Number of samples must be non-negative, got {n}")

        ppf = distr.query_method(CharacteristicName.PPF, **options)
        uniforms = resolve_source(source, seed)
        return ArraySample.from_values((float(ppf(uniforms.next_f64())) for _ in range(n)), n)


__all__ = [
    "Method",
    "ComputationStrategy",
    "DefaultComputationStrategy",
    "SamplingStrategy",
    "DefaultSamplingUnivariateStrategy",
]
