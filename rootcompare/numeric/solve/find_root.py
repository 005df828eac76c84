"""
Root Comparison (:mod:`rootcompare.numeric.solve.find_root`)
=============================================================

.. currentmodule:: rootcompare.numeric.solve.find_root

Runs the bisection and Newton-Raphson solvers side by side on one
function and interval, and samples the function for plotting.
"""
from __future__ import annotations

import math
import operator
from collections.abc import Callable

import numpy as np
import numpy.typing as npt

from rootcompare.numeric.math_ext import same_sign
from .bisect_root import bisect_root
from .exception import SameSignError
from .newton_root import newton_root
from .results import RootComparison
from .stop_criteria import StopCriteria, DEFAULT_STOP

# Written October 2026.

CURVE_POINTS = 10000
"""Number of points sampled for `RootComparison.curve`."""


# ======================================================================

def find_root(func: Callable[[float], float], x_a: float, x_b: float,
              stop: StopCriteria = None, *,
              fprime: Callable[[float], float] = None,
              n_points: int = CURVE_POINTS,
              verbose: bool = False) -> RootComparison:
    """
    Compare the bisection and Newton-Raphson methods for finding a root
    of `func` in the interval between `x_a` and `x_b`.

    Both methods are run independently using the same stopping
    criteria.  Bisection starts from the whole interval and Newton
    starts from its midpoint.  The function is also sampled across the
    interval to allow the results to be plotted.

    Parameters
    ----------
    func : Callable[[float], float]
        Function which we are searching for root.  This is only used
        for the duration of the call.
    x_a, x_b : float
        Each end of the search interval, in any order.
    stop : StopCriteria, default = IterationLimit(10)
        Stopping criteria applied to both methods.
    fprime : Callable[[float], float], optional
        Derivative of `func`, used by the Newton method.  If omitted, a
        central difference estimate is used.
    n_points : int, default = CURVE_POINTS
        Number of points in the sampled curve.
    verbose : bool, default = False
        If True, print progress of each method.

    Returns
    -------
    RootComparison
        Bisection and Newton estimates, and the sampled curve.

    Raises
    ------
    SameSignError
        If ``func(x_a)`` and ``func(x_b)`` have the same sign.  Neither
        method is run in this case.
    TypeError
        If `func` is not callable or `stop` is not a `StopCriteria`.
    ValueError
        If `x_a` or `x_b` are not finite, or ``n_points < 2``.

    Examples
    --------
    >>> res = find_root(lambda x: x**2 - 2, 2, 0)
    >>> print(res.bisection.x, res.bisection.iterations)
    1.416015625 10
    >>> print(f"{res.newton.x:.10f}")
    1.4142135624
    >>> res.curve.shape
    (10000, 2)
    """
    if not callable(func):
        raise TypeError("Function must be callable.")
    if stop is None:
        stop = DEFAULT_STOP
    if not isinstance(stop, StopCriteria):
        raise TypeError(f"Expected StopCriteria, got {type(stop)}.")

    x_a, x_b = float(x_a), float(x_b)
    if not (math.isfinite(x_a) and math.isfinite(x_b)):
        raise ValueError("Interval ends must be finite.")

    n_points = operator.index(n_points)
    if n_points < 2:
        raise ValueError(f"At least two curve points are required, got "
                         f"{n_points}.")

    # Swap range if it's in the wrong order.
    left, right = (x_b, x_a) if x_a > x_b else (x_a, x_b)

    # Both bracketing ends must not have the same sign.
    f_left, f_right = func(left), func(right)
    if same_sign(f_left, f_right):
        raise SameSignError(x_a=left, x_b=right, f_a=f_left, f_b=f_right)

    bisection = bisect_root(func, left, right, stop, verbose=verbose)
    newton = newton_root(func, (left + right) / 2, stop, fprime=fprime,
                         verbose=verbose)
    curve = sample_curve(func, left, right, n_points)

    return RootComparison(curve=curve, bisection=bisection, newton=newton)


# ----------------------------------------------------------------------

def sample_curve(func: Callable[[float], float], x_a: float, x_b: float,
                 n_points: int = CURVE_POINTS) -> npt.NDArray[float]:
    """
    Sample `func` at `n_points` equally spaced points
    ``x_a + i * (x_b - x_a) / n_points`` for ``i = 0 ... n_points - 1``.
    The point at `x_b` is not included.

    `func` is called once per point with a scalar, so it need not
    support NumPy arrays.

    Returns
    -------
    ndarray, shape (n_points, 2)
        Rows of `(x, f(x))`.
    """
    x = x_a + np.arange(n_points) * ((x_b - x_a) / n_points)
    y = np.fromiter((func(x_i) for x_i in x.tolist()), dtype=float,
                    count=n_points)
    return np.column_stack((x, y))
