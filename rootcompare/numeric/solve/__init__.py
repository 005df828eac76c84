"""
==========================================
Solvers (:mod:`rootcompare.numeric.solve`)
==========================================

.. currentmodule:: rootcompare.numeric.solve

Functions for finding roots of scalar functions and comparing the
behaviour of different methods on the same problem.

Functions
---------

.. autosummary::
    :toctree:

    find_root
    bisect_root
    newton_root
    sample_curve

Classes
-------

.. autosummary::
    :toctree:

    StopCriteria
    IterationLimit
    ResidualThreshold
    StopKind
    RootEstimate
    RootComparison

Exceptions
----------

.. autosummary::
    :toctree:

    SolverError
    SameSignError

"""

from .exception import SolverError, SameSignError
from .stop_criteria import (StopCriteria, StopKind, IterationLimit,
                            ResidualThreshold, DEFAULT_STOP)
from .results import RootEstimate, RootComparison
from .bisect_root import bisect_root
from .newton_root import newton_root, MAX_ITERATIONS
from .find_root import find_root, sample_curve, CURVE_POINTS
