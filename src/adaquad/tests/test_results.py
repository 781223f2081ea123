import json
import os
import tempfile

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt

from .. import *
from .. import runner

from unittest import TestCase


def peak(x):
    return 1 / ((x - .3) ** 2 + 1e-3)


class QuadratureResultTest(TestCase):

    def setUp(self):
        self.result = GaussKronrodQuad(epsrel=1e-8)(peak, 0, 1)

    def test_unpack(self):
        est, err, count = self.result
        self.assertEqual(est, self.result.integral)
        self.assertEqual(err, self.result.integral_err)
        self.assertEqual(count, self.result.eval_count)
        self.assertEqual(len(self.result), 3)
        self.assertEqual(self.result[0], self.result.integral)
        self.assertEqual(self.result[2], self.result.eval_count)
        self.assertEqual(self.result[-2], self.result.integral_err)

    def test_repr(self):
        text = repr(self.result)
        self.assertTrue(text.startswith('QuadratureResult'))
        self.assertIn('evaluations: %d' % self.result.eval_count, text)
        self.assertIn('<table>', self.result._repr_html_())

        empty = QuadratureResult()
        self.assertIn('integral: N/A', repr(empty))

    def test_save(self):
        with tempfile.TemporaryDirectory() as tmp:
            self.result.save(os.path.join(tmp, 'peak'))
            with open(os.path.join(tmp, 'peak.json')) as in_file:
                info = json.load(in_file)
        self.assertEqual(info['integral'], self.result.integral)
        self.assertEqual(info['eval_count'], self.result.eval_count)
        self.assertEqual(info['method_name'], 'GK15 adaptive')
        self.assertTrue(info['converged'])

    def test_plot(self):
        fig = self.result.plot()
        self.assertIsInstance(fig, plt.Figure)
        plt.close(fig)

        result = GenzMalikCubature(2)(lambda x: peak(x[0]) * x[1],
                                      [0, 0], [1, 1])
        fig = result.plot()
        self.assertIsInstance(fig, plt.Figure)
        plt.close(fig)

        result = GenzMalikCubature(1)(lambda x: peak(x[0]), [0], [1])
        fig = result.plot()
        self.assertIsInstance(fig, plt.Figure)
        plt.close(fig)

        result = GenzMalikCubature(3)(lambda x: x[0], [0] * 3, [1] * 3)
        self.assertIsNone(result.plot())
        self.assertIsNone(integrate(peak, 0, 0).plot())


class RunnerTest(TestCase):

    def test_run_integral_1d(self):
        config = {'name': 'peak-1d', 'integrand': 'product_peak', 'ndim': 1,
                  'params': {'a': [10], 'u': [.3]}, 'epsrel': 1e-9}
        info = runner.run_integral(config)
        self.assertTrue(info['converged'])
        self.assertEqual(info['epsrel'], 1e-9)
        self.assertLess(info['true_err'], 1e-7 * info['exact'])
        self.assertEqual(info['eval_count'],
                         15 * (1 + 2 * info['subdivisions']))

    def test_run_integral_2d(self):
        config = {'name': 'gauss-2d', 'integrand': 'gaussian', 'ndim': 2,
                  'params': {'a': [3, 3], 'u': [.4, .6]}, 'epsrel': 1e-7}
        info = runner.run_integral(config)
        self.assertTrue(info['converged'])
        self.assertLess(info['true_err'], 1e-6 * info['exact'])

    def test_non_converged(self):
        config = {'name': 'osc', 'integrand': 'oscillatory', 'ndim': 2,
                  'epsrel': 1e-12, 'epsabs': 0, 'max_subdivisions': 2}
        info = runner.run_integral(config)
        self.assertFalse(info['converged'])
        self.assertEqual(info['subdivisions'], 2)

    def test_run(self):
        config = {'name': 'corner', 'integrand': 'corner_peak', 'ndim': 2,
                  'params_vary': {'epsrel': [1e-3, 1e-5, 1e-7]}}
        with tempfile.TemporaryDirectory() as tmp:
            runner.run(config, tmp)
            with open(os.path.join(tmp, 'corner.json')) as in_file:
                results = json.load(in_file)
        self.assertEqual(results['epsrel'], [1e-3, 1e-5, 1e-7])
        self.assertEqual(len(results['integral']), 3)
        counts = results['eval_count']
        self.assertTrue(counts[0] <= counts[1] <= counts[2])
