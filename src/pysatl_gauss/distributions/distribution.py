"""
Distribution Interface
======================

This module defines the public :class:`Distribution` protocol used by the
computation and sampling strategies.

Notes
-----
- Characteristic evaluation is delegated to the distribution's computation
  strategy, sampling to its sampling strategy.
- Log-likelihood is computed element-wise from ``pdf``.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol, runtime_checkable

import numpy as np

from pysatl_gauss.types import CharacteristicName

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from pysatl_gauss.distributions.computation import AnalyticalComputation
    from pysatl_gauss.distributions.sampling import Sample
    from pysatl_gauss.distributions.strategies import (
        ComputationStrategy,
        Method,
        SamplingStrategy,
    )
    from pysatl_gauss.distributions.support import Support
    from pysatl_gauss.types import (
        DistributionType,
        GenericCharacteristicName,
    )


@runtime_checkable
class Distribution(Protocol):
    """Public distribution interface used by strategies."""

    @property
    def distribution_type(self) -> DistributionType: ...

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]: ...

    @property
    def sampling_strategy(self) -> SamplingStrategy: ...
    @property
    def computation_strategy(self) -> ComputationStrategy[Any, Any]: ...

    @property
    def support(self) -> Support | None: ...

    def query_method(
        self, characteristic_name: GenericCharacteristicName, **options: Any
    ) -> Method[Any, Any]:
        return self.computation_strategy.query_method(characteristic_name, self, **options)

    def calculate_characteristic(
        self, characteristic_name: GenericCharacteristicName, value: Any, **options: Any
    ) -> Any:
        return self.query_method(characteristic_name)(value, **options)

    def sample(self, n: int, **options: Any) -> Sample:
        return self.sampling_strategy.sample(n, distr=self, **options)

    def log_likelihood(self, sample: Sample) -> float:
        """
        Log-likelihood of ``sample`` under this distribution.

        Points outside the support (or with zero density) contribute ``-inf``.
        """
        pdf = self.query_method(CharacteristicName.PDF)
        values = np.asarray(pdf(sample.array[:, 0]), dtype=np.float64)
        with np.errstate(divide="ignore"):
            return float(np.sum(np.log(values)))
