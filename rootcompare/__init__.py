"""
.. This module acts as the top-level API documentation.

.. module: rootcompare

Compare the bisection and Newton-Raphson root finding methods on a
single-variable real function.  The main entry point is `find_root`.

.. autosummary::
    :toctree: generated/

    numeric

"""

__version__ = "0.1.0"

import sys

# Written October 2026.

# ======================================================================

assert sys.version_info >= (3, 10)

from rootcompare.numeric.solve import (  # noqa: E402
    find_root, bisect_root, newton_root, IterationLimit, ResidualThreshold,
    StopCriteria, StopKind, RootEstimate, RootComparison, SolverError,
    SameSignError)
