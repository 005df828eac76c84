"""
Stopping Criteria (:mod:`rootcompare.numeric.solve.stop_criteria`)
==================================================================

.. currentmodule:: rootcompare.numeric.solve.stop_criteria

Stopping criteria shared by the iterative root solvers.  A solver calls
`StopCriteria.stop_reason` once per iteration, after computing a new
candidate root.
"""
from __future__ import annotations

import math
import operator
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

# Written October 2026.


# ======================================================================

class StopKind(Enum):
    """Variant tag of a `StopCriteria` object."""
    ITERATIONS = 'iterations'
    EPSILON = 'epsilon'


# ----------------------------------------------------------------------

class StopCriteria(ABC):
    """
    Abstract rule deciding when an iterative solver should stop.  The
    concrete variants are `IterationLimit` and `ResidualThreshold`.

    Ordinary ``==`` compares both the variant and its value.  Where
    only the variant matters (e.g. which option is selected in a group
    of radio buttons) use `kind` or `same_kind` instead.
    """

    @property
    @abstractmethod
    def kind(self) -> StopKind:
        """Which variant this is."""
        raise NotImplementedError

    def same_kind(self, other: StopCriteria) -> bool:
        """
        Returns ``True`` if `other` is the same variant as this
        object, ignoring the values carried.

        Examples
        --------
        >>> IterationLimit(5).same_kind(IterationLimit(50))
        True
        >>> IterationLimit(5) == IterationLimit(50)
        False
        """
        return isinstance(other, StopCriteria) and other.kind is self.kind

    @abstractmethod
    def stop_reason(self, iterations: int, residual: float) -> str | None:
        """
        Check the stopping rule after a new candidate has been
        computed.

        Parameters
        ----------
        iterations : int
            Number of iterations completed so far (including the one
            that produced the new candidate).
        residual : float
            :math:`|f(x)|` evaluated at the new candidate.

        Returns
        -------
        str or None
            ``'iterations'`` or ``'residual'`` naming the rule that was
            met, or `None` if the solver should continue.
        """
        raise NotImplementedError

    def should_stop(self, iterations: int, residual: float) -> bool:
        """Shorthand for ``stop_reason(...) is not None``."""
        return self.stop_reason(iterations, residual) is not None

    @property
    @abstractmethod
    def iteration_cap(self) -> int | None:
        """Most iterations this rule allows, or `None` if unlimited."""
        raise NotImplementedError


# ----------------------------------------------------------------------

@dataclass(frozen=True)
class IterationLimit(StopCriteria):
    """
    Stop after a fixed number of iterations.

    Parameters
    ----------
    count : int
        Number of iterations to perform, must be > 0.

    Raises
    ------
    TypeError
        If `count` is not an integer.
    ValueError
        If `count` < 1.
    """
    count: int

    COUNT_RANGE: ClassVar[tuple[int, int]] = (1, 100)
    """Range of `count` conventionally offered by a calling surface."""

    def __post_init__(self):
        count = operator.index(self.count)
        if count < 1:
            raise ValueError(f"Iteration count must be > 0, got {count}.")
        object.__setattr__(self, 'count', count)

    @classmethod
    def default(cls) -> IterationLimit:
        """Value used when this variant is first selected."""
        return cls(100)

    @property
    def kind(self) -> StopKind:
        return StopKind.ITERATIONS

    @property
    def iteration_cap(self) -> int:
        return self.count

    def stop_reason(self, iterations: int, residual: float) -> str | None:
        return 'iterations' if iterations >= self.count else None


# ----------------------------------------------------------------------

@dataclass(frozen=True)
class ResidualThreshold(StopCriteria):
    """
    Stop once the residual :math:`|f(x)|` at the latest candidate is
    smaller than `epsilon`.

    Parameters
    ----------
    epsilon : float
        Residual threshold, must be finite and > 0.
    max_iterations : int, optional
        If given, also stop after this many iterations regardless of
        the residual.  If omitted, bisection relies on its own
        stagnation guard to stop if `epsilon` cannot be reached, and
        Newton's method applies its own hard limit (see
        `newton_root`).

    Raises
    ------
    ValueError
        If `epsilon` or `max_iterations` are invalid.
    """
    epsilon: float
    max_iterations: int | None = None

    EPSILON_RANGE: ClassVar[tuple[float, float]] = (1e-100, 0.1)
    """Range of `epsilon` conventionally offered by a calling surface."""

    def __post_init__(self):
        epsilon = float(self.epsilon)
        if not math.isfinite(epsilon) or epsilon <= 0:
            raise ValueError(f"Epsilon must be finite and > 0, got "
                             f"{epsilon}.")
        object.__setattr__(self, 'epsilon', epsilon)

        if self.max_iterations is not None:
            max_its = operator.index(self.max_iterations)
            if max_its < 1:
                raise ValueError(f"Iteration limit must be > 0, got "
                                 f"{max_its}.")
            object.__setattr__(self, 'max_iterations', max_its)

    @classmethod
    def default(cls) -> ResidualThreshold:
        """Value used when this variant is first selected."""
        return cls(0.001, max_iterations=1000)

    @property
    def kind(self) -> StopKind:
        return StopKind.EPSILON

    @property
    def iteration_cap(self) -> int | None:
        return self.max_iterations

    def stop_reason(self, iterations: int, residual: float) -> str | None:
        if residual < self.epsilon:
            return 'residual'
        if (self.max_iterations is not None and
                iterations >= self.max_iterations):
            return 'iterations'
        return None


# ======================================================================

DEFAULT_STOP = IterationLimit(10)
"""Stopping criteria used by the solvers when none is given."""
