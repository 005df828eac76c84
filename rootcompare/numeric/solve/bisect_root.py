from __future__ import annotations

from collections.abc import Callable

from rootcompare.numeric.math_ext import same_sign
from .results import RootEstimate
from .stop_criteria import StopCriteria, DEFAULT_STOP

# Written October 2026.


# ======================================================================

def bisect_root(func: Callable[[float], float], x_a: float, x_b: float,
                stop: StopCriteria = None,
                verbose: bool = False) -> RootEstimate:
    r"""
    Approximate solution of :math:`f(x) = 0` on interval :math:`x \in
    [x_a, x_b]` by the bisection method.  For bisection to work
    :math:`f(x)` must change sign across the interval, i.e. ``func(x_a)``
    and ``func(x_b)`` must not have the same sign.  This is not checked
    here (see `find_root`).

    The solver never fails.  It returns the last midpoint when `stop` is
    satisfied, or earlier if the interval cannot be halved any further
    because successive midpoints are identical at floating-point
    resolution.  An exact zero at either end is treated as a sign
    change.

    Examples
    --------
    >>> from rootcompare.numeric.solve import (IterationLimit,
    ...                                        ResidualThreshold)
    >>> f = lambda x: x**2 - x - 1
    >>> bisect_root(f, 1, 2, IterationLimit(17)).x
    1.6180343627929688
    >>> f = lambda x: (2*x - 1)*(x - 3)
    >>> bisect_root(f, 0, 1, ResidualThreshold(1e-6))  # Soln in centre.
    RootEstimate(x=0.5, y=-0.0, iterations=1, reason='residual')

    Parameters
    ----------
    func : Callable[[float], float]
        Function which we are searching for root.
    x_a, x_b : float
        Each end of the search interval, in any order.
    stop : StopCriteria, default = IterationLimit(10)
        Condition checked after each new midpoint is computed.
    verbose : bool, default = False
        If True, print progress statements.

    Returns
    -------
    RootEstimate
        Last midpoint `x`, ``func(x)`` and the number of iterations.
    """
    if stop is None:
        stop = DEFAULT_STOP

    if verbose:
        print(f"Bisecting Root:")

    left, right = (x_b, x_a) if x_a > x_b else (x_a, x_b)
    f_left = func(left)
    x_m, f_m, it = None, None, 0

    while True:
        # Compute midpoint.
        x_next = (left + right) / 2
        if x_next == x_m:
            reason = 'collapsed'  # Interval can't be divided further.
            break

        x_m, f_m = x_next, func(x_next)
        it += 1

        if verbose:
            print(f"... Iteration {it}: x = [{left}, {x_m}, {right}], "
                  f"f = {f_m}")

        # Check which side root is on, narrow interval.
        if same_sign(f_m, f_left):
            left, f_left = x_m, f_m
        else:
            right = x_m

        # Check stopping criteria.
        reason = stop.stop_reason(it, abs(f_m))
        if reason is not None:
            break

    if verbose:
        print(f"... Stopped ({reason}) after {it} iterations.")

    return RootEstimate(x=x_m, y=f_m, iterations=it, reason=reason)
