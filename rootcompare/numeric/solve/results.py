"""
Solver Results (:mod:`rootcompare.numeric.solve.results`)
==========================================================

.. currentmodule:: rootcompare.numeric.solve.results

Immutable records returned by the root solvers: `RootEstimate` for a
single method and `RootComparison` for the pair returned by
`find_root`.
"""
from __future__ import annotations

from dataclasses import dataclass

import numpy.typing as npt

# Written October 2026.


# ======================================================================

@dataclass(frozen=True)
class RootEstimate:
    """
    Final state of a single root solver run.

    Attributes
    ----------
    x : float
        Best estimate of the root.
    y : float
        Function value at `x`, i.e. the residual.
    iterations : int
        Number of iterations performed (>= 0).
    reason : str
        Rule that stopped the solver, one of:

        - ``'iterations'``: Iteration limit reached.
        - ``'residual'``: Residual fell below epsilon.
        - ``'collapsed'``: Bisection interval could not be divided
          further at floating-point resolution.
        - ``'zero-derivative'``: Newton step impossible as the
          derivative vanished.
        - ``'oscillation'``: Newton candidates repeated with a period
          of two (or stopped moving).
        - ``'non-finite'``: Newton step overflowed or gave `NaN`.
    """
    x: float
    y: float
    iterations: int
    reason: str

    @property
    def converged(self) -> bool:
        """``True`` if the run stopped by meeting a residual threshold."""
        return self.reason == 'residual'


# ----------------------------------------------------------------------

@dataclass(frozen=True, eq=False)
class RootComparison:
    """
    Result of `find_root`: bisection and Newton estimates for the same
    function and interval, along with a sampled curve of the function
    for plotting.

    Attributes
    ----------
    curve : ndarray, shape (n, 2)
        Rows of `(x, f(x))` at equally spaced `x` in increasing order,
        starting at the left end of the interval and stopping one step
        short of the right end.
    bisection : RootEstimate
        Result of the bisection method.
    newton : RootEstimate
        Result of the Newton-Raphson method.
    """
    curve: npt.NDArray[float]
    bisection: RootEstimate
    newton: RootEstimate

    def summary(self) -> str:
        """
        Returns a short multi-line text comparison of both methods.

        Examples
        --------
        >>> res = RootComparison(
        ...     None, RootEstimate(1.5, 0.25, 1, 'iterations'),
        ...     RootEstimate(2.0, 0.0, 3, 'residual'))
        >>> print(res.summary())
        Bisection method:
            Root: 1.500000e+00
            Iterations: 1
        Newton method:
            Root: 2.000000e+00
            Iterations: 3
        """
        lines = []
        for title, est in (("Bisection method", self.bisection),
                           ("Newton method", self.newton)):
            lines += [f"{title}:",
                      f"    Root: {est.x:e}",
                      f"    Iterations: {est.iterations}"]
        return "\n".join(lines)
