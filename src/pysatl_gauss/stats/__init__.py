"""
Numerical kernels of the standard normal distribution.

- :mod:`.quantile` — AS241 inverse CDF;
- :mod:`.ziggurat` — Ziggurat sampler and its layer tables;
- :mod:`.source` — uniform random source protocol and NumPy-backed default;
- :mod:`.ziggurat_sampling_strategy` — sampling strategy built on the Ziggurat.
"""

__author__ = "Artem Romanyuk"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .config import ZigguratConfig
from .quantile import horner, standard_normal_ppf
from .source import NumpyUniformSource, UniformSource, resolve_source
from .ziggurat import standard_normal_sample

__all__ = [
    "ZigguratConfig",
    "horner",
    "standard_normal_ppf",
    "NumpyUniformSource",
    "UniformSource",
    "resolve_source",
    "standard_normal_sample",
]
