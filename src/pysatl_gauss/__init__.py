"""
PySATL Gauss
============

The Gaussian (normal) distribution built on the PySATL parametric family
framework: closed-form characteristics, the AS241 inverse CDF and a 128-layer
Ziggurat sampler over a pluggable uniform random source.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from importlib.metadata import version

from .distributions import *
from .distributions import __all__ as _distr_all
from .errors import *
from .errors import __all__ as _errors_all
from .families import *
from .families import __all__ as _family_all
from .stats import *
from .stats import __all__ as _stats_all
from .stats.ziggurat_sampling_strategy import ZigguratSamplingStrategy
from .types import *
from .types import __all__ as _types_all

__version__ = version("pysatl-gauss")
__all__ = [
    "__version__",
    "ZigguratSamplingStrategy",
    *_distr_all,
    *_errors_all,
    *_family_all,
    *_stats_all,
    *_types_all,
]

del _distr_all
del _errors_all
del _family_all
del _stats_all
del _types_all
