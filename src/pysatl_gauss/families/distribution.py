"""
Concrete distribution instances with specific parameter values.

This module provides the implementation for individual distribution instances
created from parametric families.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pysatl_gauss.distributions.distribution import Distribution
from pysatl_gauss.families.registry import ParametricFamilyRegister

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from pysatl_gauss.distributions.computation import AnalyticalComputation
    from pysatl_gauss.distributions.sampling import Sample
    from pysatl_gauss.distributions.strategies import ComputationStrategy, SamplingStrategy
    from pysatl_gauss.distributions.support import Support
    from pysatl_gauss.families.parametric_family import ParametricFamily
    from pysatl_gauss.families.parametrizations import Parametrization
    from pysatl_gauss.types import (
        DistributionType,
        GenericCharacteristicName,
    )


@dataclass(slots=True)
class ParametricFamilyDistribution(Distribution):
    """
    A specific distribution instance from a parametric family.

    Represents a concrete distribution with specific parameter values,
    providing methods for computation and sampling.

    Parameters
    ----------
    family_name : str
        Name of the distribution family.
    _distribution_type : DistributionType
        Type of this distribution.
    parameters : Parametrization
        Parameter values for this distribution.
    _support : Support or None
        Support of this distribution.
    """

    family_name: str
    _distribution_type: DistributionType
    parameters: Parametrization
    _support: Support | None
    _analytical_cache_key: tuple[int, str] | None = field(
        default=None, init=False, repr=False, compare=False
    )
    _analytical_cache_val: (
        Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]] | None
    ) = field(default=None, init=False, repr=False, compare=False)

    @property
    def distribution_type(self) -> DistributionType:
        return self._distribution_type

    @property
    def parametrization_name(self) -> str:
        """Name of the parametrization the distribution was created with."""
        return self.parameters.name

    @property
    def family(self) -> ParametricFamily:
        """The parametric family this distribution belongs to."""
        return ParametricFamilyRegister.get(self.family_name)

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        """
        Get analytical computations for this distribution.

        Lazily computed and cached per instance. Cache invalidates when
        parametrization object or name changes.
        """
        key = (id(self.parameters), self.parameters.name)

        if self._analytical_cache_key != key or self._analytical_cache_val is None:
            self._analytical_cache_val = self.family._build_analytical_computations(
                self.parameters
            )
            self._analytical_cache_key = key

        return self._analytical_cache_val

    @property
    def sampling_strategy(self) -> SamplingStrategy:
        return self.family.sampling_strategy

    @property
    def computation_strategy(self) -> ComputationStrategy[Any, Any]:
        return self.family.computation_strategy

    @property
    def support(self) -> Support | None:
        return self._support

    def sample(self, n: int, **options: Any) -> Sample:
        """
        Generate samples from this distribution.

        Parameters
        ----------
        n : int
            Number of samples to generate.
        **options : Any
            Passed to the family's sampling strategy (e.g. ``source``,
            ``seed``).

        Returns
        -------
        Sample
            Generated samples.
        """
        return self.sampling_strategy.sample(n, distr=self, **options)
