"""
Exceptions raised by PySATL Gauss.

Both precondition failures derive from :class:`ValueError` as well, so callers
that only care about "bad input" can keep catching the built-in.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


class PySATLGaussError(Exception):
    """Base class for all errors raised by the package."""


class InvalidParameterError(PySATLGaussError, ValueError):
    """Raised when distribution parameters violate a parametrization constraint."""


class InvalidArgumentError(PySATLGaussError, ValueError):
    """Raised when a characteristic is evaluated outside of its domain."""


__all__ = [
    "PySATLGaussError",
    "InvalidParameterError",
    "InvalidArgumentError",
]
