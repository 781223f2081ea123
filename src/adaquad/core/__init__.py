""" Adaptive deterministic integration in one and n dimensions.

Two adaptive integrators are provided, each wrapped in a class. Create an
integrator specifying the tolerances and other settings; the object is
callable with the integrand and the integration limits and returns a
QuadratureResult holding the estimate, its error estimate and the number of
function evaluations.

Example:
    >>> quad = GaussKronrodQuad(epsrel=1e-8)
    >>> result = quad(np.sin, 0, np.pi)
    >>> est, err, count = result
    >>> abs(est - 2) < 1e-8
    True

The integration stops as soon as the error estimate satisfies EITHER the
relative tolerance epsrel (relative to the estimate) OR the absolute
tolerance epsabs. For a strict absolute tolerance set epsrel=0.

One dimensional integrals can be computed in a different variable by means
of a substitution, e.g. to map an infinite limit to a finite one:
    >>> result = integrate(lambda x: np.exp(-x) / x**2, 1, np.inf,
    ...                    sub='inverse')

Multidimensional integrals over boxes use the algorithm of Genz and Malik.
The integrand gets a point as numpy array, or the coordinates as separate
arguments with unpack_args=True:
    >>> cub = GenzMalikCubature(ndim=3, unpack_args=True)
    >>> est, err, count = cub(lambda x, y, z: x * y * z, [0, 0, 0], [1, 1, 1])

Integrands that accept arrays of points can be evaluated with a single call
per region by passing vectorized=True. The numpy vectorize function can help
if the integrand cannot be written using arrays easily (note, however, that
vectorize does not increase efficiency).

A function known only at uniformly spaced samples is integrated with
discrete_integrate, which uses fixed Simpson-type weights:
    >>> xs = np.linspace(0, 1, 5)
    >>> est = discrete_integrate(xs**3, h=.25)
"""

import numpy as np

from . import rules
from . import integrands
from . import util

from .errors import (QuadratureError, InvalidInputError,
                     InvalidIntegrandError, NonConvergenceError)
from .substitution import (Substitution, NoSub, ExpSub, InverseSub,
                           get_substitution)
from .integration import (QuadratureResult, GaussKronrodQuad,
                          GenzMalikCubature, integrate, integrate_nd,
                          discrete_integrate)

__all__ = ['GaussKronrodQuad', 'GenzMalikCubature', 'QuadratureResult',
           'integrate', 'integrate_nd', 'discrete_integrate',
           'Substitution', 'NoSub', 'ExpSub', 'InverseSub',
           'get_substitution', 'QuadratureError', 'InvalidInputError',
           'InvalidIntegrandError', 'NonConvergenceError',
           'rules', 'integrands', 'util']
