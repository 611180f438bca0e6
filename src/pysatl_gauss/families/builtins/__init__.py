"""
Built-in distribution families for PySATL Gauss.

This package contains the distribution families that are available by default.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_gauss.families.builtins.continuous import configure_normal_family

__all__ = [
    "configure_normal_family",
]
