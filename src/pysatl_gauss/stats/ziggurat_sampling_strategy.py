"""
Ziggurat Sampling Strategy
==========================

Sampling strategy that draws from a location-scale Gaussian distribution with
the Ziggurat method, converting the output to the standard Sample format.
"""

from __future__ import annotations

__author__ = "Artem Romanyuk"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Any

from pysatl_gauss.distributions.sampling import ArraySample
from pysatl_gauss.stats.config import ZigguratConfig
from pysatl_gauss.stats.source import NumpyUniformSource, resolve_source
from pysatl_gauss.stats.ziggurat import standard_normal_sample
from pysatl_gauss.types import CharacteristicName

if TYPE_CHECKING:
    from pysatl_gauss.distributions.distribution import Distribution
    from pysatl_gauss.stats.source import UniformSource


class ZigguratSamplingStrategy:
    """
    Gaussian sampling strategy based on the Ziggurat method.

    Standard normal variates are rescaled by the distribution's ``sd`` and
    shifted by its ``mean``; both are resolved through the distribution's
    computation strategy.

    Parameters
    ----------
    config : ZigguratConfig | None, optional
        Default configuration. If None, uses ``ZigguratConfig()``.

    Notes
    -----
    Calls without a source draw from the strategy's own NumPy-backed stream,
    created on first use from ``config.seed`` and ``config.block_size``, so
    successive calls continue one sequence. The strategy never stores a
    caller-supplied source.
    """

    def __init__(self, config: ZigguratConfig | None = None) -> None:
        self._config = config or ZigguratConfig()
        self._stream: NumpyUniformSource | None = None

    @property
    def config(self) -> ZigguratConfig:
        """Default configuration."""
        return self._config

    def _default_stream(self) -> NumpyUniformSource:
        if self._stream is None:
            self._stream = NumpyUniformSource(
                seed=self._config.seed, block_size=self._config.block_size
            )
        return self._stream

    def _location_scale(self, distr: Distribution) -> tuple[float, float]:
        loc = float(distr.calculate_characteristic(CharacteristicName.MEAN, None))
        scale = float(distr.calculate_characteristic(CharacteristicName.SD, None))
        return loc, scale

    def draw(
        self,
        distr: Distribution,
        source: UniformSource | None = None,
        max_attempts: int | None = None,
    ) -> float:
        """
        Draw a single value from ``distr``.

        Parameters
        ----------
        distr : Distribution
            Distribution with ``mean`` and ``sd`` characteristics.
        source : UniformSource | None, optional
            Uniform source borrowed for this call. If None, the strategy's
            own stream is used.
        max_attempts : int | None, optional
            Overrides the configured safety cap.

        Returns
        -------
        float
            ``mean + sd * Z`` with ``Z`` standard normal.
        """
        config = self._config.merged(max_attempts=max_attempts)
        uniforms = self._default_stream() if source is None else resolve_source(source)
        loc, scale = self._location_scale(distr)
        return loc + scale * standard_normal_sample(uniforms, config.max_attempts)

    def sample(
        self,
        n: int,
        distr: Distribution,
        source: UniformSource | None = None,
        **options: Any,
    ) -> ArraySample:
        """
        Generate ``n`` values from ``distr``.

        Parameters
        ----------
        n : int
            Number of observations to draw.
        distr : Distribution
            Distribution with ``mean`` and ``sd`` characteristics.
        source : UniformSource | None, optional
            Uniform source borrowed for this call. If None and no ``seed`` is
            given, the strategy's own stream is used.
        **options : Any
            Overrides of :class:`ZigguratConfig` fields. A ``seed`` makes the
            call draw from a fresh source seeded with it, built with the
            effective ``block_size``; ``max_attempts`` caps each draw.

        Returns
        -------
        ArraySample
            A 2D sample of shape ``(n, 1)``.

        Raises
        ------
        ValueError
            If ``n`` is negative.
        TypeError
            If an unknown option is passed.
        """
        if n < 0:
            raise ValueError(f"Number of samples must be non-negative, got {n}")

        config = self._config.merged(**options)
        seed = options.get("seed")
        if source is not None:
            uniforms = resolve_source(source, seed)
        elif seed is not None:
            uniforms = resolve_source(None, seed, config.block_size)
        else:
            uniforms = self._default_stream()
        loc, scale = self._location_scale(distr)
        max_attempts = config.max_attempts

        return ArraySample.from_values(
            (loc + scale * standard_normal_sample(uniforms, max_attempts) for _ in range(n)), n
        )


__all__ = [
    "ZigguratSamplingStrategy",
]
