""" Genz test integrands on the unit hypercube [0, 1]^ndim.

The family of A. Genz, "Testing multidimensional integration routines"
(1984), each member with a closed form integral. The parameter a controls
the difficulty (larger is harder), u shifts the feature of the integrand.

Points are passed as arrays whose last axis has length ndim, so the
functions work for single points as well as for arrays of points.

Example:
    >>> fn = Gaussian(2, a=[2, 3], u=[.5, .5])
    >>> fn([.5, .5])
    1.0
"""

import itertools
import math

import numpy as np


class GenzFunction(object):

    def __init__(self, ndim, a=None, u=None):
        self.ndim = ndim
        self.a = (np.ones(ndim) if a is None else
                  np.array(a, dtype=np.float64, ndmin=1))
        self.u = (np.full(ndim, .5) if u is None else
                  np.array(u, dtype=np.float64, ndmin=1))
        if self.a.size != ndim or self.u.size != ndim:
            raise ValueError("Parameters a and u must have length ndim.")

    def __call__(self, xs):
        xs = np.asanyarray(xs, dtype=np.float64)
        if xs.shape[-1] != self.ndim:
            raise ValueError("Expected points of dimension %d." % self.ndim)
        values = self.evaluate(xs)
        if np.ndim(values) == 0:
            return float(values)
        return values

    def evaluate(self, xs):
        raise NotImplementedError()

    @property
    def exact(self):
        """ Analytic value of the integral over [0, 1]^ndim. """
        raise NotImplementedError()

    def __repr__(self):
        return type(self).__name__ + "(ndim=%s, a=%s, u=%s)" % (
            self.ndim, self.a.tolist(), self.u.tolist())


class Oscillatory(GenzFunction):
    """ cos(2 pi u_1 + sum a_i x_i) """

    def evaluate(self, xs):
        return np.cos(2 * np.pi * self.u[0] + np.dot(xs, self.a))

    @property
    def exact(self):
        value = np.exp(2j * np.pi * self.u[0])
        for a in self.a:
            value *= (np.exp(1j * a) - 1) / (1j * a)
        return float(value.real)


class ProductPeak(GenzFunction):
    """ prod 1 / (a_i^-2 + (x_i - u_i)^2) """

    def evaluate(self, xs):
        return np.prod(1 / (self.a ** -2 + (xs - self.u) ** 2), axis=-1)

    @property
    def exact(self):
        return float(np.prod(self.a * (np.arctan(self.a * (1 - self.u)) +
                                       np.arctan(self.a * self.u))))


class CornerPeak(GenzFunction):
    """ (1 + sum a_i x_i)^-(ndim + 1), u is not used. """

    def evaluate(self, xs):
        return (1 + np.dot(xs, self.a)) ** -(self.ndim + 1)

    @property
    def exact(self):
        total = 0.
        for vertex in itertools.product((0, 1), repeat=self.ndim):
            total += (-1) ** sum(vertex) / (1 + np.dot(self.a, vertex))
        return float(total / (math.factorial(self.ndim) * np.prod(self.a)))


class Gaussian(GenzFunction):
    """ exp(-sum a_i^2 (x_i - u_i)^2) """

    def evaluate(self, xs):
        return np.exp(-np.sum(self.a ** 2 * (xs - self.u) ** 2, axis=-1))

    @property
    def exact(self):
        value = 1.
        for a, u in zip(self.a, self.u):
            value *= (math.sqrt(math.pi) / (2 * a) *
                      (math.erf(a * (1 - u)) + math.erf(a * u)))
        return value


class Continuous(GenzFunction):
    """ exp(-sum a_i |x_i - u_i|), continuous but not differentiable. """

    def evaluate(self, xs):
        return np.exp(-np.sum(self.a * np.abs(xs - self.u), axis=-1))

    @property
    def exact(self):
        return float(np.prod((2 - np.exp(-self.a * self.u) -
                              np.exp(-self.a * (1 - self.u))) / self.a))


class Discontinuous(GenzFunction):
    """ exp(sum a_i x_i) for x_1 <= u_1 and x_2 <= u_2, else 0. """

    def _limits(self):
        limits = np.ones(self.ndim)
        limits[:2] = self.u[:2]
        return limits

    def evaluate(self, xs):
        inside = np.all(xs <= self._limits(), axis=-1)
        return np.where(inside, np.exp(np.dot(xs, self.a)), 0.)

    @property
    def exact(self):
        return float(np.prod((np.exp(self.a * self._limits()) - 1) / self.a))


GENZ_FAMILY = {
    'oscillatory': Oscillatory,
    'product_peak': ProductPeak,
    'corner_peak': CornerPeak,
    'gaussian': Gaussian,
    'continuous': Continuous,
    'discontinuous': Discontinuous,
}
