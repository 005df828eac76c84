"""
Math Extensions (:mod:`rootcompare.numeric.math_ext`)
=====================================================

.. currentmodule:: rootcompare.numeric.math_ext

Small numeric helpers shared by the solvers, particularly where these
are not available in NumPy.
"""
from __future__ import annotations

from collections.abc import Callable

import numpy as np

# Written October 2026.

FD_STEP = np.cbrt(np.finfo(float).eps)
"""Relative step used by `central_diff`.  The cube root of machine
epsilon balances truncation and rounding error for a central
difference."""


# ======================================================================

def same_sign(a: float, b: float) -> bool:
    """
    Returns ``True`` if `a` and `b` are both strictly positive or both
    strictly negative.  An exact zero (or `NaN`) never has the same
    sign as anything.

    Signs are compared directly instead of testing ``a * b > 0``, as
    the product of two very small values can underflow to zero.

    Examples
    --------
    >>> same_sign(1e-200, 1e-200)
    True
    >>> same_sign(-2.0, 0.0)
    False
    """
    return bool((a > 0 and b > 0) or (a < 0 and b < 0))


def central_diff(func: Callable[[float], float], x: float,
                 step: float = FD_STEP) -> float:
    r"""
    Estimate the derivative :math:`f'(x)` using a central difference:

    .. math:: f'(x) \approx \frac{f(x + h) - f(x - h)}{2h}

    Where :math:`h = step \cdot \max(1, |x|)`, so that the step scales
    with the magnitude of `x` away from the origin.

    Parameters
    ----------
    func : Callable[[float], float]
        Scalar function to differentiate.
    x : float
        Point at which the derivative is required.
    step : float, default = FD_STEP
        Relative step size.

    Returns
    -------
    float
        Estimated derivative.
    """
    h = step * max(1.0, abs(x))
    return (func(x + h) - func(x - h)) / (2 * h)

# ======================================================================
