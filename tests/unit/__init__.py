"""
PySATL Gauss
============

Unit tests for the Gaussian distribution: types, strategies, parametric
families, the inverse CDF and the Ziggurat sampler.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
