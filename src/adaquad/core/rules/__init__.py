""" Fixed quadrature rules with an embedded error estimate.

Each rule evaluates the integrand once on a fixed stencil and combines the
values with two sets of weights: a higher order estimate of the integral and
a lower order one. Their difference drives the local error estimate used by
the adaptive integrators.
"""

from .gauss_kronrod import GaussKronrod15
from .genz_malik import GenzMalik

__all__ = ['GaussKronrod15', 'GenzMalik']
