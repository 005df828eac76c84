import math
from unittest import TestCase

import numpy as np
from numpy.testing import assert_allclose, assert_array_equal

from .scalar_tst_functions import f, df_dx, SQRT_2, f_flat


# ======================================================================

class TestFindRoot(TestCase):
    def test_find_root(self):
        from rootcompare.numeric.solve import find_root, IterationLimit

        # Check normal operation.
        res = find_root(f, 0.0, 2.0, IterationLimit(30), fprime=df_dx)
        self.assertEqual(res.bisection.iterations, 30)
        self.assertLess(abs(res.bisection.x - SQRT_2), 2.0 / 2 ** 30)
        self.assertAlmostEqual(res.newton.x, SQRT_2, delta=1e-10)
        self.assertLessEqual(res.newton.iterations, 30)

        # Check the interval is normalised.
        res_swap = find_root(f, 2.0, 0.0, IterationLimit(30), fprime=df_dx)
        self.assertEqual(res_swap.bisection, res.bisection)
        self.assertEqual(res_swap.newton, res.newton)
        assert_array_equal(res_swap.curve, res.curve)

        # Check iteration counts stay within the limit.
        res = find_root(f, 0.0, 2.0, IterationLimit(5), fprime=df_dx)
        self.assertLessEqual(res.bisection.iterations, 5)
        self.assertLessEqual(res.newton.iterations, 5)

        # Check default stopping criteria and numerical derivative.
        res = find_root(f, 0.0, 2.0)
        self.assertEqual(res.bisection.iterations, 10)
        self.assertAlmostEqual(res.newton.x, SQRT_2, places=10)

    def test_find_root_epsilon(self):
        from rootcompare.numeric.solve import find_root, ResidualThreshold

        # Check both methods stop early on residual.
        res = find_root(lambda x: x - 1, 0.0, 2.0,
                        ResidualThreshold(1e-6, max_iterations=1000),
                        fprime=lambda x: 1.0)
        for est in (res.bisection, res.newton):
            self.assertLess(abs(est.y), 1e-6)
            self.assertLess(est.iterations, 1000)
            self.assertEqual(est.reason, 'residual')

        # Check an unreachable epsilon still terminates.
        res = find_root(f, 0.0, 2.0, ResidualThreshold(1e-100),
                        fprime=df_dx)
        self.assertEqual(res.bisection.reason, 'collapsed')
        self.assertEqual(res.newton.reason, 'oscillation')

        # Check a sign change with no root inside still terminates using
        # the default iteration limit.
        def f_jump(x):
            return f_flat(x) * (1 if x > -50 else -1)

        def df_jump_dx(x):
            return 2 * x * (1 if x > -50 else -1)

        stop = ResidualThreshold.default()
        res = find_root(f_jump, -60.0, 40.0, stop, fprime=df_jump_dx)
        self.assertLessEqual(res.newton.iterations, stop.max_iterations)
        self.assertFalse(res.newton.converged)
        self.assertTrue(math.isfinite(res.newton.x))
        self.assertIn(res.bisection.reason, ('collapsed', 'iterations'))
        self.assertAlmostEqual(res.bisection.x, -50.0, places=10)

    def test_same_sign(self):
        from rootcompare.numeric.solve import (find_root, SameSignError,
                                               SolverError)

        with self.assertRaises(SameSignError) as cm:
            find_root(f_flat, 1.0, -1.0)

        err = cm.exception
        self.assertIsInstance(err, SolverError)
        self.assertIsInstance(err, RuntimeError)
        self.assertEqual((err.x_a, err.x_b), (-1.0, 1.0))
        self.assertEqual((err.f_a, err.f_b), (2.0, 2.0))
        self.assertIn("Function has same sign on both sides of the range.",
                      str(err))
        self.assertIn("f_a -> 2.0", str(err))

        # Both ends negative.
        with self.assertRaises(SameSignError):
            find_root(lambda x: -f_flat(x), -1.0, 1.0)

        # A zero at either end is not an error.
        res = find_root(lambda x: x, 0.0, 1.0)
        self.assertEqual(res.bisection.x, 0.5 ** 10)
        self.assertAlmostEqual(res.newton.x, 0.0, places=10)

    def test_curve(self):
        from rootcompare.numeric.solve import find_root, CURVE_POINTS

        res = find_root(f, 2.0, -0.5, fprime=df_dx)
        x, y = res.curve[:, 0], res.curve[:, 1]

        self.assertEqual(CURVE_POINTS, 10000)
        self.assertEqual(res.curve.shape, (10000, 2))
        self.assertEqual(x[0], -0.5)
        self.assertLess(x[-1], 2.0)
        self.assertTrue(np.all(np.diff(x) > 0))
        assert_allclose(x, -0.5 + np.arange(10000) * (2.5 / 10000))
        assert_allclose(y, f(x))

        # Check non-vectorised functions are accepted.
        res = find_root(math.cos, 0.0, 3.0, n_points=50)
        self.assertEqual(res.curve.shape, (50, 2))
        assert_allclose(res.curve[:, 1], np.cos(res.curve[:, 0]))

    def test_invalid_arguments(self):
        from rootcompare.numeric.solve import find_root

        with self.assertRaises(TypeError):
            find_root(5.0, 0.0, 2.0)
        with self.assertRaises(TypeError):
            find_root(f, 0.0, 2.0, stop=10)
        with self.assertRaises(ValueError):
            find_root(f, 0.0, math.inf)
        with self.assertRaises(ValueError):
            find_root(f, math.nan, 2.0)
        with self.assertRaises(ValueError):
            find_root(f, 0.0, 2.0, n_points=1)

    def test_summary(self):
        from rootcompare.numeric.solve import find_root, IterationLimit

        res = find_root(f, 0.0, 2.0, IterationLimit(1), fprime=df_dx)
        self.assertEqual(res.summary(),
                         "Bisection method:\n"
                         "    Root: 1.000000e+00\n"
                         "    Iterations: 1\n"
                         "Newton method:\n"
                         "    Root: 1.500000e+00\n"
                         "    Iterations: 1")

# ----------------------------------------------------------------------
