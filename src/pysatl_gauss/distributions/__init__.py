"""
Distributions subpackage

Interfaces and default implementations for probability distributions used by
PySATL Gauss:

- distribution protocol (:mod:`.distribution`);
- analytical computation primitives (:mod:`.computation`);
- sampling protocol and array-backed samples (:mod:`.sampling`);
- supports (:mod:`.support`);
- pluggable strategies (:mod:`.strategies`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .computation import AnalyticalComputation
from .distribution import Distribution
from .sampling import ArraySample, Sample
from .strategies import (
    ComputationStrategy,
    DefaultComputationStrategy,
    DefaultSamplingUnivariateStrategy,
    SamplingStrategy,
)
from .support import ContinuousSupport, Support

__all__ = [
    # computation primitives
    "AnalyticalComputation",
    # distribution
    "Distribution",
    # sampling
    "Sample",
    "ArraySample",
    # support
    "Support",
    "ContinuousSupport",
    # strategies
    "ComputationStrategy",
    "DefaultComputationStrategy",
    "SamplingStrategy",
    "DefaultSamplingUnivariateStrategy",
]
