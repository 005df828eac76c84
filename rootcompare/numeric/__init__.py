"""
Numeric (:mod:`rootcompare.numeric`)
====================================

.. currentmodule:: rootcompare.numeric

Core numeric functions used throughout rootcompare.

.. autosummary::
    :toctree:

    solve
    math_ext
    sample_functions

"""
from .math_ext import FD_STEP, central_diff, same_sign
from .sample_functions import (POLY_COEFS, SAMPLE_FUNCTIONS, exponential,
                               exponential_der, mixed, mixed_der,
                               polynomial, polynomial_der, trigonometric,
                               trigonometric_der)
