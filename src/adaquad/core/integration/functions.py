""" Functional interface; a configured integrator is created per call. """

from .adaptive import GaussKronrodQuad
from .cubature import GenzMalikCubature
from ..util import interpret_bounds


def integrate(fn, a, b, epsrel=1e-5, epsabs=1e-10, sub=None, **kwargs):
    """ Integrate fn(x) from a to b, see GaussKronrodQuad.

    :param sub: Optional substitution (name, class or instance).
    :param kwargs: Further settings of GaussKronrodQuad, e.g.
        max_subdivisions or vectorized.
    :return: QuadratureResult, unpacks as (integral, error, eval_count).
    """
    quad = GaussKronrodQuad(epsrel, epsabs, sub=sub, **kwargs)
    return quad(fn, a, b)


def integrate_nd(fn, a, b, epsrel=1e-5, epsabs=1e-10, **kwargs):
    """ Integrate fn over the box with corners a and b, see GenzMalikCubature.

    The dimensionality is the length of a.

    :param kwargs: Further settings of GenzMalikCubature, e.g. unpack_args.
    :return: QuadratureResult, unpacks as (integral, error, eval_count).
    """
    a, b = interpret_bounds(a, b)
    cubature = GenzMalikCubature(a.size, epsrel, epsabs, **kwargs)
    return cubature(fn, a, b)
