"""
Sample Functions (:mod:`rootcompare.numeric.sample_functions`)
==============================================================

.. currentmodule:: rootcompare.numeric.sample_functions

Built-in scalar functions and their exact derivatives, useful for
trying out and comparing root finding methods.  All functions work
element-wise on scalars or NumPy arrays.
"""
from __future__ import annotations

from collections.abc import Callable, Sequence

import numpy as np
import numpy.typing as npt

# Written October 2026.

POLY_COEFS = (5.0, -2.0, 1.0, 2.0, 3.0)
"""Default polynomial coefficients (highest power first), giving
:math:`5x^4 - 2x^3 + x^2 + 2x + 3`."""

_LN_5 = np.log(5.0)
_LN_1_05 = np.log(1.05)


# ======================================================================

def polynomial(x: npt.ArrayLike, coefs: Sequence[float] = POLY_COEFS
               ) -> npt.ArrayLike:
    """
    Polynomial with coefficients `coefs` (highest power first),
    evaluated by Horner's method.

    Examples
    --------
    >>> print(polynomial(1.0))
    9.0
    >>> print(polynomial(2.0, coefs=(1.0, 0.0, -4.0)))
    0.0
    """
    return np.polyval(coefs, x)


def polynomial_der(x: npt.ArrayLike, coefs: Sequence[float] = POLY_COEFS
                   ) -> npt.ArrayLike:
    """Derivative of `polynomial` with respect to `x`."""
    return np.polyval(np.polyder(coefs), x)


# ----------------------------------------------------------------------

def trigonometric(x: npt.ArrayLike) -> npt.ArrayLike:
    r"""Returns :math:`2\sin(x) \cdot 5\cos(x / 2)`."""
    return 2.0 * np.sin(x) * 5.0 * np.cos(x / 2.0)


def trigonometric_der(x: npt.ArrayLike) -> npt.ArrayLike:
    """Derivative of `trigonometric` with respect to `x`."""
    return 10.0 * np.cos(x / 2.0) * np.cos(x) - 5.0 * np.sin(
        x / 2.0) * np.sin(x)


# ----------------------------------------------------------------------

def exponential(x: npt.ArrayLike) -> npt.ArrayLike:
    """Returns :math:`5^x - 2`."""
    return np.power(5.0, x) - 2.0


def exponential_der(x: npt.ArrayLike) -> npt.ArrayLike:
    """Derivative of `exponential` with respect to `x`."""
    return np.power(5.0, x) * _LN_5


# ----------------------------------------------------------------------

def mixed(x: npt.ArrayLike) -> npt.ArrayLike:
    r"""Returns :math:`\sin(x^2) + 5x^3 + 1.05^x`."""
    x = np.asarray(x, dtype=float)
    return np.sin(x ** 2) + 5.0 * x ** 3 + np.power(1.05, x)


def mixed_der(x: npt.ArrayLike) -> npt.ArrayLike:
    """Derivative of `mixed` with respect to `x`."""
    x = np.asarray(x, dtype=float)
    return (2.0 * x * np.cos(x ** 2) + 15.0 * x ** 2 +
            _LN_1_05 * np.power(1.05, x))


# ======================================================================

SAMPLE_FUNCTIONS: dict[str, tuple[Callable, Callable]] = {
    'polynomial': (polynomial, polynomial_der),
    'trigonometric': (trigonometric, trigonometric_der),
    'exponential': (exponential, exponential_der),
    'mixed': (mixed, mixed_der),
}
"""Sample functions by name, as `(f, df_dx)` pairs."""
