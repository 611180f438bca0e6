"""
Standard Normal Quantile Function
=================================

Inverse of the standard normal CDF by algorithm AS241 (``PPND16``), a
three-region minimax rational approximation accurate to about 1e-16.

Regions
-------
- central, ``|p - 0.5| <= 0.425``: rational function of ``0.180625 - q**2``;
- near tail, ``sqrt(-log(r)) <= 5``: rational function of ``t - 1.6``;
- far tail, ``sqrt(-log(r)) > 5``: rational function of ``t - 5``;

where ``q = p - 0.5``, ``r = min(p, 1 - p)`` and ``t = sqrt(-log(r))``.
The split points are part of the minimax fit and must not be changed
independently of the coefficients.

References
----------
1. M. J. Wichura, "Algorithm AS 241: The percentage points of the normal
   distribution," Journal of the Royal Statistical Society. Series C
   (Applied Statistics), vol. 37, no. 3, pp. 477-484, 1988.
2. J. Burkardt, ASA241, https://people.sc.fsu.edu/~jburkardt/c_src/asa241/asa241.html
"""

from __future__ import annotations

__author__ = "Artem Romanyuk"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast, overload

import numpy as np

from pysatl_gauss.errors import InvalidArgumentError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from pysatl_gauss.types import Number, NumericArray

CENTRAL_SPLIT = 0.425
TAIL_SPLIT = 5.0
CENTRAL_OFFSET = 0.180625
NEAR_TAIL_OFFSET = 1.6

# Coefficients are stored lowest degree first.
CENTRAL_NUMERATOR: tuple[float, ...] = (
    3.3871328727963666080e00,
    1.3314166789178437745e02,
    1.9715909503065514427e03,
    1.3731693765509461125e04,
    4.5921953931549871457e04,
    6.7265770927008700853e04,
    3.3430575583588128105e04,
    2.5090809287301226727e03,
)
CENTRAL_DENOMINATOR: tuple[float, ...] = (
    1.0000000000000000000e00,
    4.2313330701600911252e01,
    6.8718700749205790830e02,
    5.3941960214247511077e03,
    2.1213794301586595867e04,
    3.9307895800092710610e04,
    2.8729085735721942674e04,
    5.2264952788528545610e03,
)
NEAR_TAIL_NUMERATOR: tuple[float, ...] = (
    1.42343711074968357734e00,
    4.63033784615654529590e00,
    5.76949722146069140550e00,
    3.64784832476320460504e00,
    1.27045825245236838258e00,
    2.41780725177450611770e-01,
    2.27238449892691845833e-02,
    7.74545014278341407640e-04,
)
NEAR_TAIL_DENOMINATOR: tuple[float, ...] = (
    1.00000000000000000000e00,
    2.05319162663775882187e00,
    1.67638483018380384940e00,
    6.89767334985100004550e-01,
    1.48103976427480074590e-01,
    1.51986665636164571966e-02,
    5.47593808499534494600e-04,
    1.05075007164441684324e-09,
)
FAR_TAIL_NUMERATOR: tuple[float, ...] = (
    6.65790464350110377720e00,
    5.46378491116411436990e00,
    1.78482653991729133580e00,
    2.96560571828504891230e-01,
    2.65321895265761230930e-02,
    1.24266094738807843860e-03,
    2.71155556874348757815e-05,
    2.01033439929228813265e-07,
)
FAR_TAIL_DENOMINATOR: tuple[float, ...] = (
    1.00000000000000000000e00,
    5.99832206555887937690e-01,
    1.36929880922735805310e-01,
    1.48753612908506148525e-02,
    7.86869131145613259100e-04,
    1.84631831751005468180e-05,
    1.42151175831644588870e-07,
    2.04426310338993978564e-15,
)


@overload
def horner(coefficients: Sequence[float], x: float) -> float: ...
@overload
def horner(coefficients: Sequence[float], x: NumericArray) -> NumericArray: ...


def horner(coefficients: Sequence[float], x: float | NumericArray) -> float | NumericArray:
    """
    Evaluate a polynomial by Horner's scheme.

    Parameters
    ----------
    coefficients : Sequence[float]
        Polynomial coefficients, lowest degree first.
    x : float or NumericArray
        Evaluation point(s).

    Returns
    -------
    float or NumericArray
        ``c[0] + x * (c[1] + x * (... + x * c[-1]))``.
    """
    if isinstance(x, np.ndarray):
        result: float | NumericArray = np.full_like(x, coefficients[-1], dtype=np.float64)
    else:
        result = float(coefficients[-1])
    for c in reversed(coefficients[:-1]):
        result = c + x * result
    return result


def _check_probability(p: float) -> None:
    if not 0.0 <= p <= 1.0:
        raise InvalidArgumentError(f"Probability must be in [0, 1], got {p}")


def _ppf_scalar(p: float) -> float:
    _check_probability(p)

    if p <= 0.0:
        return -math.inf
    if p >= 1.0:
        return math.inf

    q = p - 0.5
    if abs(q) <= CENTRAL_SPLIT:
        u = CENTRAL_OFFSET - q * q
        return q * horner(CENTRAL_NUMERATOR, u) / horner(CENTRAL_DENOMINATOR, u)

    r = p if q < 0.0 else 1.0 - p
    t = math.sqrt(-math.log(r))

    if t <= TAIL_SPLIT:
        u = t - NEAR_TAIL_OFFSET
        x = horner(NEAR_TAIL_NUMERATOR, u) / horner(NEAR_TAIL_DENOMINATOR, u)
    else:
        u = t - TAIL_SPLIT
        x = horner(FAR_TAIL_NUMERATOR, u) / horner(FAR_TAIL_DENOMINATOR, u)

    return -x if q < 0.0 else x


def _ppf_array(p: NumericArray) -> NumericArray:
    p = np.asarray(p, dtype=np.float64)
    # NaN fails both comparisons and is rejected as well.
    if not np.all((p >= 0.0) & (p <= 1.0)):
        raise InvalidArgumentError("Probability must be in [0, 1]")

    result = np.empty_like(p)
    q = p - 0.5

    lower = p <= 0.0
    upper = p >= 1.0
    central = (np.abs(q) <= CENTRAL_SPLIT) & ~lower & ~upper
    tail = ~(central | lower | upper)

    result[lower] = -np.inf
    result[upper] = np.inf

    qc = q[central]
    u = CENTRAL_OFFSET - qc * qc
    result[central] = qc * horner(CENTRAL_NUMERATOR, u) / horner(CENTRAL_DENOMINATOR, u)

    qt = q[tail]
    r = np.where(qt < 0.0, p[tail], 1.0 - p[tail])
    t = np.sqrt(-np.log(r))

    near = t <= TAIL_SPLIT
    magnitude = np.empty_like(t)
    u_near = t[near] - NEAR_TAIL_OFFSET
    magnitude[near] = horner(NEAR_TAIL_NUMERATOR, u_near) / horner(NEAR_TAIL_DENOMINATOR, u_near)
    u_far = t[~near] - TAIL_SPLIT
    magnitude[~near] = horner(FAR_TAIL_NUMERATOR, u_far) / horner(FAR_TAIL_DENOMINATOR, u_far)

    result[tail] = np.where(qt < 0.0, -magnitude, magnitude)
    return cast("NumericArray", result)


@overload
def standard_normal_ppf(p: Number) -> float: ...
@overload
def standard_normal_ppf(p: NumericArray) -> NumericArray: ...


def standard_normal_ppf(p: Number | NumericArray) -> float | NumericArray:
    """
    Quantile function of the standard normal distribution.

    Parameters
    ----------
    p : Number or NumericArray
        Probability (or probabilities) in ``[0, 1]``.

    Returns
    -------
    float or NumericArray
        ``x`` with ``Phi(x) = p``; ``-inf`` for ``p == 0`` and ``inf`` for
        ``p == 1``. Arrays keep their shape.

    Raises
    ------
    InvalidArgumentError
        If any probability is outside ``[0, 1]`` or is NaN.
    """
    if np.ndim(p) == 0:
        return _ppf_scalar(float(cast("float", p)))
    return _ppf_array(cast("NumericArray", p))


__all__ = [
    "CENTRAL_SPLIT",
    "TAIL_SPLIT",
    "horner",
    "standard_normal_ppf",
]
