import logging

import numpy as np

from .integration import AdaptiveIntegrator, Partition, Region, EPS
from ..errors import InvalidInputError
from ..rules import GenzMalik
from ..util import interpret_bounds

logger = logging.getLogger(__name__)


class GenzMalikCubature(AdaptiveIntegrator):
    """ Adaptive n-dimensional integration over a box (Genz & Malik).

    Every region is integrated with the degree 7/5 Genz-Malik rule. The
    region with the largest error is halved along the axis in which the
    fourth difference of the integrand is largest, so the refinement
    concentrates on the directions responsible for the error.

    The integrand receives a point as numpy array of length ndim, or, with
    unpack_args=True, the ndim coordinates as separate arguments. Both
    conventions give identical results.

    Example:
        >>> cub = GenzMalikCubature(2)
        >>> est, err, count = cub(lambda x: x[0] * x[1], [0, 0], [1, 1])
        >>> round(est, 12)
        0.25

        >>> cub = GenzMalikCubature(2, unpack_args=True)
        >>> est, err, count = cub(lambda x, y: x * y, [0, 0], [1, 1])

    If vectorized is true, the integrand is called once per region with all
    points of the stencil: as ndim arrays fn(x1s, ..., xns) (unpack_args) or
    as a single array of shape (npoints, ndim).

    :param ndim: Dimensionality of the integral.
    :param epsrel: Relative tolerance.
    :param epsabs: Absolute tolerance (see AdaptiveIntegrator).
    :param max_subdivisions: Maximum number of region splits.
    :param degenerate_width: Regions whose width along the axis to split is
        below this fraction of the domain width along that axis are not
        split further.
    :param unpack_args: Pass the coordinates as separate arguments.
    :param vectorized: Evaluate all stencil points in one call.
    :param log_every: Log progress every log_every splits.
    :param name: Name of the method.
    """

    def __init__(self, ndim, epsrel=1e-5, epsabs=1e-10, max_subdivisions=10000,
                 degenerate_width=EPS, unpack_args=False, vectorized=False,
                 log_every=0, name="Genz-Malik adaptive"):
        super().__init__(epsrel, epsabs, max_subdivisions, degenerate_width,
                         vectorized, log_every, name)
        if ndim < 1:
            raise InvalidInputError("ndim must be >= 1, got %s." % ndim)
        self.ndim = ndim
        self.unpack_args = unpack_args
        self.rule = GenzMalik(ndim)

    @property
    def evals_per_region(self):
        return self.rule.npoints

    def _call(self):
        if self.vectorized:
            if self.unpack_args:
                return lambda fn, points: fn(*points.transpose())
            return lambda fn, points: fn(points)
        if self.unpack_args:
            return lambda fn, point: fn(*point)
        return lambda fn, point: fn(point)

    def __call__(self, fn, a, b):
        """ Integrate fn over the box [a_1, b_1] x ... x [a_ndim, b_ndim].

        :param fn: Integrand.
        :param a: Lower corner, sequence of length ndim.
        :param b: Upper corner. Each b_i may be smaller than a_i, every such
            axis flips the sign of the result.
        :return: QuadratureResult.
        """
        a, b = interpret_bounds(a, b, self.ndim)
        if np.any(a == b):
            return self._empty_result()

        flipped = a > b
        sign = -1. if np.count_nonzero(flipped) % 2 else 1.
        lo = np.where(flipped, b, a)
        hi = np.where(flipped, a, b)
        logger.debug("%s: integrating over [%s, %s].",
                     self.method_name, lo, hi)

        counted = self._counted(fn)
        call = self._call()
        min_widths = self.degenerate_width * (hi - lo)

        def region(r_lo, r_hi):
            center = 0.5 * (r_lo + r_hi)
            half_widths = 0.5 * (r_hi - r_lo)
            points = self.rule.points(center, half_widths)
            values = self._values(counted, points, call)
            integral, error = self.rule.estimate(values,
                                                 np.prod(r_hi - r_lo))
            axis = self.rule.split_axis(values, half_widths)
            return Region(r_lo, r_hi, integral, error, axis)

        def split(parent):
            axis = parent.axis
            mid = 0.5 * (parent.lo[axis] + parent.hi[axis])
            left_hi = parent.hi.copy()
            left_hi[axis] = mid
            right_lo = parent.lo.copy()
            right_lo[axis] = mid
            return region(parent.lo, left_hi), region(right_lo, parent.hi)

        def is_degenerate(child):
            axis = child.axis
            lo, hi = child.lo[axis], child.hi[axis]
            mid = 0.5 * (lo + hi)
            return hi - lo <= min_widths[axis] or not lo < mid < hi

        partition = Partition()
        partition.push(region(lo, hi))
        return self._refine(partition, split, is_degenerate, sign, counted)
