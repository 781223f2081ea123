import logging

import numpy as np

from .integration import AdaptiveIntegrator, Partition, Region, EPS
from ..errors import InvalidInputError
from ..rules import GaussKronrod15
from ..substitution import get_substitution

logger = logging.getLogger(__name__)


def _call_point(fn, x):
    return fn(x)


class GaussKronrodQuad(AdaptiveIntegrator):
    """ Adaptive one dimensional integration, 15-point Gauss-Kronrod rule.

    The interval with the largest error estimate is bisected until the sum
    of the local errors satisfies the relative or the absolute tolerance
    (globally adaptive strategy of QUADPACK's qag).

    Example:
        >>> quad = GaussKronrodQuad(epsrel=1e-10)
        >>> est, err, count = quad(lambda x: x**4, 0, 1)
        >>> round(est, 12), count
        (0.2, 15)

    With a substitution the integral is computed in the variable u, which can
    turn an infinite limit into a finite one:
        >>> quad = GaussKronrodQuad(sub='inverse')
        >>> result = quad(lambda x: 1 / (1 + x**2), 1, np.inf)  # pi/4

    :param epsrel: Relative tolerance.
    :param epsabs: Absolute tolerance (see AdaptiveIntegrator).
    :param max_subdivisions: Maximum number of bisections.
    :param degenerate_width: Intervals narrower than this fraction of the
        (substituted) integration interval are not bisected further.
    :param sub: Substitution, see substitution.get_substitution.
    :param vectorized: If true, fn is called with an array of 15 abscissas
        and must return an array of 15 values.
    :param log_every: Log progress every log_every bisections.
    :param name: Name of the method.
    """

    def __init__(self, epsrel=1e-5, epsabs=1e-10, max_subdivisions=1000,
                 degenerate_width=EPS, sub=None, vectorized=False,
                 log_every=0, name="GK15 adaptive"):
        super().__init__(epsrel, epsabs, max_subdivisions, degenerate_width,
                         vectorized, log_every, name)
        self.ndim = 1
        self.sub = get_substitution(sub)
        self.rule = GaussKronrod15()

    def __call__(self, fn, a, b):
        """ Integrate fn from a to b.

        :param fn: Integrand, float -> float (or arrays if vectorized).
        :param a: Lower limit; may exceed b, the result changes sign.
        :param b: Upper limit.
        :return: QuadratureResult.
        """
        if a == b:
            return self._empty_result()
        lo, hi = self.sub.transform_bounds(a, b)
        if not (np.isfinite(lo) and np.isfinite(hi)):
            raise InvalidInputError(
                "Integration limits (%s, %s) map to (%s, %s) under %r; the "
                "mapped limits must be finite." % (a, b, lo, hi, self.sub))
        if lo == hi:
            return self._empty_result()

        sign = 1.
        if lo > hi:
            lo, hi = hi, lo
            sign = -1.
        logger.debug("%s: integrating over [%g, %g] (sub=%s).",
                     self.method_name, lo, hi, self.sub.name)

        counted = self._counted(self.sub.transform(fn))
        min_width = self.degenerate_width * (hi - lo)

        def region(r_lo, r_hi):
            points = self.rule.points(r_lo, r_hi)
            values = self._values(counted, points, _call_point)
            integral, error = self.rule.estimate(values, r_lo, r_hi)
            return Region(r_lo, r_hi, integral, error)

        def split(parent):
            mid = 0.5 * (parent.lo + parent.hi)
            return region(parent.lo, mid), region(mid, parent.hi)

        def is_degenerate(child):
            # an interval of one ulp has no midpoint strictly inside
            mid = 0.5 * (child.lo + child.hi)
            return (child.hi - child.lo <= min_width or
                    not child.lo < mid < child.hi)

        partition = Partition()
        partition.push(region(lo, hi))
        return self._refine(partition, split, is_degenerate, sign, counted)
