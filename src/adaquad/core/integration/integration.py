import heapq
import itertools
import json
import logging
import math
import os
import time

import numpy as np

from ..errors import InvalidInputError, NonConvergenceError
from ..util import check_tolerances, check_finite, Counted

logger = logging.getLogger(__name__)

EPS = np.finfo(np.float64).eps


class QuadratureResult(object):
    """ Outcome of one integration.

    Unpacks as the tuple (integral, integral_err, eval_count):
        >>> est, err, count = QuadratureResult(integral=1., integral_err=0.,
        ...                                    eval_count=15)
    """

    def __init__(self, **kwargs):
        self.integral = None
        self.integral_err = None
        self.eval_count = 0
        self.subdivisions = 0
        self.converged = None
        self.method_name = None
        self.ndim = None
        # final partition, list of Region
        self.regions = []

        self._result_info = [
            ('integral', 'integral', '%.16g'),
            ('integral_err', 'error estimate', '%.4g'),
            ('eval_count', 'evaluations', '%d'),
            ('subdivisions', 'subdivisions', '%d'),
            ('converged', 'converged', '%s'),
        ]

        for key in kwargs:
            setattr(self, key, kwargs[key])

    def _triple(self):
        return self.integral, self.integral_err, self.eval_count

    def __iter__(self):
        return iter(self._triple())

    def __getitem__(self, index):
        return self._triple()[index]

    def __len__(self):
        return 3

    def plot(self):
        from ..partition_plotting import plot1d, plot2d
        if not self.regions:
            return None
        if self.ndim == 1:
            return plot1d(self)
        if self.ndim == 2:
            return plot2d(self)

    def save(self, file_path=None):
        """ Store the summary of the result as json.

        :param file_path: Path without extension, '.json' is appended.
            Defaults to the class name and a time stamp.
        """
        if file_path is None:
            file_path = type(self).__name__ + '-' + str(int(time.time()))
        path, name = os.path.split(file_path)

        info = {entry[0]: getattr(self, entry[0])
                for entry in self._result_info}
        info['type'] = type(self).__name__
        info['method_name'] = self.method_name
        info['ndim'] = self.ndim

        with open(os.path.join(path, name + '.json'), 'w') as fp:
            json.dump(info, fp, indent=2)

    def _data_table(self):
        titles = [entry[1] for entry in self._result_info]
        entries = []
        for entry in self._result_info:
            value = getattr(self, entry[0])
            try:
                entries.append(entry[2] % value)
            except TypeError:
                entries.append('N/A')

        return titles, entries

    def _repr_html_(self):
        titles, entries = self._data_table()
        info = ['<h3>' + type(self).__name__ + '</h3>',
                '<table><tr><th style="text-align:left;">' +
                '</th><th style="text-align:left;">'.join(titles) +
                '</th></tr><tr><td style="text-align:left;">' +
                '</td><td style="text-align:left;">'.join(entries) +
                '</td></tr></table>']
        return '\n'.join(info)

    def __repr__(self):
        return (type(self).__name__ + '\n\t' + '\n\t'.join(
            '%s: %s' % (t, e) for t, e in zip(*self._data_table())))


class Region(object):
    """ Interval or box of the adaptive partition with its local estimate.

    lo and hi are floats for one dimensional integrals and arrays otherwise;
    axis is the axis to split next (always 0 in one dimension).
    """
    __slots__ = ('lo', 'hi', 'integral', 'error', 'axis')

    def __init__(self, lo, hi, integral, error, axis=0):
        self.lo = lo
        self.hi = hi
        self.integral = integral
        self.error = error
        self.axis = axis

    def __repr__(self):
        return "Region(lo=%s, hi=%s, integral=%g, error=%g)" % (
            self.lo, self.hi, self.integral, self.error)


class Partition(object):
    """ Max-heap of regions keyed by their local error.

    Regions with equal errors are popped in the order they were added.
    Degenerate regions (too small to split) are kept apart; they still
    contribute to the totals but are never returned by pop.
    """

    def __init__(self):
        self._heap = []
        self._counter = itertools.count()
        self.final = []
        self.integral = 0.
        self.error = 0.

    def push(self, region):
        entry = (-region.error, next(self._counter), region)
        heapq.heappush(self._heap, entry)
        self.integral += region.integral
        self.error += region.error

    def finalize(self, region):
        self.final.append(region)
        self.integral += region.integral
        self.error += region.error

    def pop(self):
        region = heapq.heappop(self._heap)[2]
        self.integral -= region.integral
        self.error -= region.error
        return region

    @property
    def active_count(self):
        return len(self._heap)

    @property
    def regions(self):
        return [entry[2] for entry in self._heap] + self.final

    def totals(self):
        """ Integral and error summed afresh over all regions. """
        regions = self.regions
        return (math.fsum(r.integral for r in regions),
                math.fsum(r.error for r in regions))

    def resum(self):
        """ Replace the running totals by totals() and return them.

        The running totals are updated incrementally and drift when large
        and small errors are added and removed.
        """
        self.integral, self.error = self.totals()
        return self.integral, self.error

    def __len__(self):
        return len(self._heap) + len(self.final)


class AdaptiveIntegrator(object):
    """ Common driver of the adaptive integrators.

    Subclasses supply the initial region and the split of a region into two
    children; this class keeps the partition, checks the tolerances and the
    subdivision budget and builds the result.

    :param epsrel: Relative tolerance.
    :param epsabs: Absolute tolerance. The integration stops as soon as the
        error estimate is below epsrel * |integral| OR below epsabs, so set
        epsrel=0 for a strict absolute tolerance.
    :param max_subdivisions: Maximum number of splits before giving up with
        NonConvergenceError.
    :param degenerate_width: Regions narrower than this fraction of the
        original domain (along the axis to be split) are not split further,
        nor are regions whose midpoint rounds onto one of their bounds.
    :param vectorized: If true the integrand is called once per region with
        all points of the stencil.
    :param log_every: Log progress every log_every subdivisions (at INFO
        level). Do not log if value is <= 0.
    :param name: Name of the method, used for plotting and in results.
    """

    def __init__(self, epsrel=1e-5, epsabs=1e-10, max_subdivisions=1000,
                 degenerate_width=EPS, vectorized=False, log_every=0,
                 name="adaptive"):
        self.epsrel, self.epsabs = check_tolerances(epsrel, epsabs)
        if max_subdivisions < 0:
            raise InvalidInputError("max_subdivisions must be >= 0.")
        if not degenerate_width >= 0:
            raise InvalidInputError("degenerate_width must be >= 0.")
        self.max_subdivisions = int(max_subdivisions)
        self.degenerate_width = degenerate_width
        self.vectorized = vectorized
        self.log_every = log_every
        self.method_name = name

    def tolerance(self, integral):
        return max(self.epsabs, self.epsrel * abs(integral))

    def _values(self, fn, points, call):
        """ Evaluate fn at points (first axis) as a float array.

        :param call: Function (fn, point) -> value used for single points;
            (fn, points) -> values if the integrator is vectorized.
        """
        if self.vectorized:
            values = np.asarray(call(fn, points), dtype=np.float64)
            if values.shape != (points.shape[0],):
                raise InvalidInputError(
                    "Vectorized integrand must return %d values, got array "
                    "of shape %s." % (points.shape[0], values.shape))
        else:
            values = np.array([call(fn, point) for point in points],
                              dtype=np.float64)
        check_finite(points, values)
        return values

    def _counted(self, fn):
        return Counted(fn, vectorized=self.vectorized)

    def _empty_result(self):
        return QuadratureResult(integral=0., integral_err=0., eval_count=0,
                                subdivisions=0, converged=True,
                                method_name=self.method_name, ndim=self.ndim)

    def _result(self, partition, sign, counted, subdivisions, converged):
        integral, error = partition.totals()
        return QuadratureResult(integral=sign * integral, integral_err=error,
                                eval_count=counted.count,
                                subdivisions=subdivisions, converged=converged,
                                method_name=self.method_name, ndim=self.ndim,
                                regions=partition.regions)

    def _converged(self, partition):
        if partition.error > self.tolerance(partition.integral):
            return False
        # confirm on the exact sums that are reported in the result
        integral, error = partition.resum()
        return error <= self.tolerance(integral)

    def _refine(self, partition, split, is_degenerate, sign, counted):
        """ Split the worst region until the tolerance is met.

        :param split: Function region -> (child, child), evaluates the
            integrand on both children.
        :param is_degenerate: Function region -> bool, true if the region
            must not be split further.
        :return: QuadratureResult.
        """
        subdivisions = 0
        while not self._converged(partition):
            if partition.active_count == 0:
                result = self._result(partition, sign, counted, subdivisions,
                                      False)
                raise NonConvergenceError(
                    "Tolerance not reached, all %d remaining regions are too "
                    "small to be split (error %g)." %
                    (len(partition), result.integral_err), result)
            if subdivisions >= self.max_subdivisions:
                result = self._result(partition, sign, counted, subdivisions,
                                      False)
                raise NonConvergenceError(
                    "Maximum number of subdivisions (%d) reached with error "
                    "%g > %g." % (self.max_subdivisions, result.integral_err,
                                  self.tolerance(result.integral)), result)

            for child in split(partition.pop()):
                if is_degenerate(child):
                    partition.finalize(child)
                else:
                    partition.push(child)
            subdivisions += 1

            if self.log_every > 0 and subdivisions % self.log_every == 0:
                logger.info("%s: %d subdivisions, %d evaluations, integral "
                            "%g, error %g.", self.method_name, subdivisions,
                            counted.count, partition.integral,
                            partition.error)

        result = self._result(partition, sign, counted, subdivisions, True)
        logger.debug("%s converged: integral %g, error %g, %d evaluations, "
                     "%d subdivisions.", self.method_name, result.integral,
                     result.integral_err, result.eval_count, subdivisions)
        return result
