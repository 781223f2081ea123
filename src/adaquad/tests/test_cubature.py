import math

import numpy as np

from .. import *

from unittest import TestCase


def xy_peak(x):
    return 1 / (.1 + x[0] * x[0] + x[1] * x[1])


class GenzMalikCubatureTest(TestCase):

    def test_polynomial(self):
        cub = GenzMalikCubature(2)
        est, err, count = cub(lambda x: x[0] * x[1], [0, 0], [1, 1])
        self.assertAlmostEqual(est, .25, 14)
        self.assertLess(err, 1e-14)
        self.assertEqual(count, 17)

    def test_one_dimensional(self):
        cub = GenzMalikCubature(1)
        self.assertEqual(cub.evals_per_region, 7)
        result = cub(lambda x: x[0] ** 2, [0], [1])
        self.assertAlmostEqual(result.integral, 1 / 3, 14)
        self.assertEqual(result.eval_count, 7)

    def test_separable(self):
        cub = GenzMalikCubature(2, epsrel=1e-10)
        result = cub(lambda x: math.exp(x[0]) * math.cos(x[1]), [0, 0], [1, 2])
        self.assertTrue(result.converged)
        self.assertAlmostEqual(result.integral,
                               (math.e - 1) * math.sin(2), 9)

        exact_x = integrate(math.exp, 0, 1, epsrel=1e-12)[0]
        exact_y = integrate(math.cos, 0, 2, epsrel=1e-12)[0]
        self.assertAlmostEqual(result.integral, exact_x * exact_y, 9)

    def test_eval_count(self):
        cub = GenzMalikCubature(3)
        result = cub(lambda x: math.exp(x[2] - 4 * (x[0] ** 2 + x[1] ** 2)),
                     [-1, -1, 0], [1, 1, 1])
        self.assertGreater(result.subdivisions, 0)
        self.assertEqual(result.eval_count,
                         33 * (1 + 2 * result.subdivisions))
        self.assertEqual(len(result.regions), 1 + result.subdivisions)

    def test_unpack_args(self):
        a, b = [0, -1, .5], [1, 1, 2]

        def packed(x):
            return math.exp(-x[0] * x[1] * x[2]) + x[2]

        def unpacked(x, y, z):
            return math.exp(-x * y * z) + z

        expected = GenzMalikCubature(3)(packed, a, b)
        result = GenzMalikCubature(3, unpack_args=True)(unpacked, a, b)
        self.assertEqual(result.integral, expected.integral)
        self.assertEqual(result.integral_err, expected.integral_err)
        self.assertEqual(result.eval_count, expected.eval_count)

    def test_vectorized(self):
        a, b = [-1, -1], [1, 2]
        expected = GenzMalikCubature(2)(xy_peak, a, b)

        cub = GenzMalikCubature(2, vectorized=True)
        result = cub(lambda xs: 1 / (.1 + xs[:, 0] * xs[:, 0] +
                                     xs[:, 1] * xs[:, 1]), a, b)
        self.assertEqual(result.integral, expected.integral)
        self.assertEqual(result.eval_count, expected.eval_count)

        cub = GenzMalikCubature(2, vectorized=True, unpack_args=True)
        result = cub(lambda x, y: 1 / (.1 + x * x + y * y), a, b)
        self.assertEqual(result.integral, expected.integral)
        self.assertEqual(result.integral_err, expected.integral_err)

    def test_vectorized_shape(self):
        cub = GenzMalikCubature(2, vectorized=True)
        with self.assertRaises(InvalidInputError):
            cub(lambda xs: xs, [0, 0], [1, 1])

    def test_orientation(self):
        cub = GenzMalikCubature(2)
        forward = cub(xy_peak, [0, 0], [1, 1]).integral
        self.assertEqual(cub(xy_peak, [1, 0], [0, 1]).integral, -forward)
        self.assertEqual(cub(xy_peak, [0, 1], [1, 0]).integral, -forward)
        self.assertEqual(cub(xy_peak, [1, 1], [0, 0]).integral, forward)

    def test_zero_width(self):
        def fn(x):
            raise AssertionError("integrand evaluated")

        est, err, count = GenzMalikCubature(2)(fn, [0, 1], [1, 1])
        self.assertEqual((est, err, count), (0, 0, 0))

    def test_genz_gaussian(self):
        fn = integrands.Gaussian(3, a=[2, 3, 1.5], u=[.3, .5, .6])
        cub = GenzMalikCubature(3, epsrel=1e-7, vectorized=True)
        result = cub(fn, np.zeros(3), np.ones(3))
        self.assertTrue(result.converged)
        self.assertLess(abs(result.integral - fn.exact), 1e-6 * fn.exact)

    def test_genz_product_peak(self):
        fn = integrands.ProductPeak(2, a=[5, 5], u=[.3, .6])
        cub = GenzMalikCubature(2, epsrel=1e-7)
        result = cub(fn, [0, 0], [1, 1])
        self.assertTrue(result.converged)
        self.assertLess(abs(result.integral - fn.exact), 1e-6 * fn.exact)

    def test_split_direction(self):
        # the integrand does not depend on x, only y is ever split
        cub = GenzMalikCubature(2, epsrel=1e-8)
        result = cub(lambda x: 1 / ((x[1] - .3) ** 2 + 1e-3), [0, 0], [1, 1])
        self.assertGreater(result.subdivisions, 0)
        for region in result.regions:
            self.assertEqual(region.hi[0] - region.lo[0], 1.)
        exact = (math.atan(.7 / math.sqrt(1e-3)) +
                 math.atan(.3 / math.sqrt(1e-3))) / math.sqrt(1e-3)
        self.assertAlmostEqual(result.integral / exact, 1, 7)

    def test_integrate_nd(self):
        result = integrate_nd(lambda x: x[0] + x[1] + x[2], [0, 0, 0],
                              [1, 1, 1])
        self.assertAlmostEqual(result.integral, 1.5, 14)
        self.assertEqual(result.ndim, 3)

        est, err, count = integrate_nd(lambda x, y: x * y, [0, 0], [1, 2],
                                       unpack_args=True)
        self.assertAlmostEqual(est, 1, 14)


class CubatureErrorsTest(TestCase):

    def test_unsplittable_regions(self):
        offset = 1e10
        cub = GenzMalikCubature(2, epsrel=0, epsabs=0)
        with self.assertRaises(NonConvergenceError) as context:
            cub(lambda x: math.exp(x[0] + x[1] - 2 * offset),
                [offset, offset], [offset + 1e-5, offset + 1e-5])
        result = context.exception.result
        self.assertLess(result.subdivisions, 50)
        for region in result.regions:
            self.assertTrue(np.all(region.hi > region.lo))

    def test_invalid_input(self):
        with self.assertRaises(InvalidInputError):
            GenzMalikCubature(0)
        with self.assertRaises(InvalidInputError):
            GenzMalikCubature(2, epsrel=-1)
        cub = GenzMalikCubature(2)
        with self.assertRaises(InvalidInputError):
            cub(xy_peak, [0, 0, 0], [1, 1, 1])
        with self.assertRaises(InvalidInputError):
            cub(xy_peak, [0, 0], [1, np.inf])
        with self.assertRaises(InvalidInputError):
            integrate_nd(xy_peak, [0, 0], [1])

    def test_non_finite(self):
        cub = GenzMalikCubature(2)
        with self.assertRaises(InvalidIntegrandError) as context:
            cub(lambda x: math.nan if x[0] > .5 else 1., [0, 0], [1, 1])
        self.assertEqual(len(context.exception.point), 2)
        self.assertGreater(context.exception.point[0], .5)

    def test_non_convergence(self):
        cub = GenzMalikCubature(2, epsrel=1e-12, epsabs=0, max_subdivisions=1)
        with self.assertRaises(NonConvergenceError) as context:
            cub(xy_peak, [-1, -1], [1, 1])
        result = context.exception.result
        self.assertFalse(result.converged)
        self.assertEqual(result.subdivisions, 1)
        self.assertEqual(result.eval_count, 3 * 17)
        self.assertEqual(len(result.regions), 2)

    def test_degenerate(self):
        cub = GenzMalikCubature(2, epsrel=1e-14, epsabs=0,
                                degenerate_width=.25)
        with self.assertRaises(NonConvergenceError) as context:
            cub(xy_peak, [-1, -1], [1, 1])
        result = context.exception.result
        self.assertFalse(result.converged)
        self.assertLess(result.subdivisions, cub.max_subdivisions)
        for region in result.regions:
            self.assertLessEqual(region.hi[region.axis] -
                                 region.lo[region.axis], .5)
