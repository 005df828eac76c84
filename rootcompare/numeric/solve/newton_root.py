"""
Find a zero of a real scalar function using the Newton-Raphson method,
with the following additional features:

    - The derivative may be omitted (`fprime=None`), in which case it
      is estimated at each step by a central difference.
    - Iteration always terminates, even if the requested residual cannot
      be reached: the solver stops when the derivative vanishes, when
      trial points start repeating with a period of two, when a step
      overflows, or after `MAX_ITERATIONS` steps if the stopping
      criteria set no iteration limit of their own (e.g. a chaotic
      orbit around a function with no real root).  The last good
      estimate is returned in all cases.
"""
from __future__ import annotations

import math
import operator
from collections.abc import Callable
from functools import partial

import numpy as np

from rootcompare.numeric.math_ext import central_diff
from .results import RootEstimate
from .stop_criteria import StopCriteria, DEFAULT_STOP

# Written October 2026.

_TINY = np.finfo(float).tiny  # Smallest positive normal float.

MAX_ITERATIONS = 10000
"""Iteration limit used by `newton_root` when the stopping criteria
have no limit of their own."""


# ======================================================================

def newton_root(func: Callable[[float], float], x0: float,
                stop: StopCriteria = None, *,
                fprime: Callable[[float], float] = None,
                max_iterations: int = MAX_ITERATIONS,
                verbose: bool = False) -> RootEstimate:
    """
    Find a zero of `func` using the Newton-Raphson method starting from
    `x0`.

    Parameters
    ----------
    func : Callable[[float], float]
        Function which we are searching for root.
    x0 : float
        Initial estimate of the root.
    stop : StopCriteria, default = IterationLimit(10)
        Condition checked after each new candidate is computed, using
        the residual at that candidate.
    fprime : Callable[[float], float], optional
        Derivative of `func`.  If omitted, a central difference estimate
        is used.
    max_iterations : int, default = MAX_ITERATIONS
        Hard iteration limit, only used if `stop` has no limit of its
        own (i.e. ``stop.iteration_cap is None``).
    verbose : bool, default = False
        If True, print progress statements.

    Returns
    -------
    RootEstimate
        Last candidate `x`, ``func(x)`` and the number of iterations.
        Failure to converge is not an error; check
        `RootEstimate.reason` to see why the solver stopped.

    Examples
    --------
    >>> from rootcompare.numeric.solve import IterationLimit
    >>> est = newton_root(lambda x: x**2 - 2, 1.0, IterationLimit(10),
    ...                   fprime=lambda x: 2 * x)
    >>> print(f"{est.x:.12f}")
    1.414213562373
    """
    if stop is None:
        stop = DEFAULT_STOP
    if fprime is None:
        fprime = partial(central_diff, func)

    max_its = stop.iteration_cap
    if max_its is None:
        max_its = operator.index(max_iterations)
        if max_its < 1:
            raise ValueError(f"Iteration limit must be > 0, got {max_its}.")

    if verbose:
        print(f"Newton-Raphson Root:")

    # 'x_old' is the candidate from two iterations prior to a new one.
    x, x_old = float(x0), None
    fval = func(x)
    it = 0

    with np.errstate(over='ignore', divide='ignore', invalid='ignore'):
        while True:
            fder = fprime(x)
            if not math.isfinite(fder):
                reason = 'non-finite'
                break

            if abs(fder) <= _TINY:
                reason = 'zero-derivative'  # Can't take a step.
                break

            x_new = x - fval / fder
            if not math.isfinite(x_new):
                reason = 'non-finite'  # Keep last finite candidate.
                break

            it += 1
            repeated = (x_new == x_old)
            x_old, x = x, x_new
            fval = func(x)

            if verbose:
                print(f"... Iteration {it}: x = {x}, f = {fval}")

            if repeated:
                reason = 'oscillation'  # Cycling, or stopped moving.
                break

            reason = stop.stop_reason(it, abs(fval))
            if reason is None and it >= max_its:
                reason = 'iterations'
            if reason is not None:
                break

    if verbose:
        print(f"... Stopped ({reason}) after {it} iterations.")

    return RootEstimate(x=x, y=fval, iterations=it, reason=reason)
