""" Change of variables for one dimensional integrals.

A substitution rewrites

    b               u(b)
    ∫ f(x) dx  ->   ∫ f(x(u)) dx/du du
    a               u(a)

and is described by three functions: the forward map x(u), the inverse map
u(x) and the derivative dx/du. The integrators only ever see the transformed
integrand on the transformed interval, the quadrature rule and subdivision
logic are unchanged.

It is the responsibility of the caller that dxdu really is the derivative of
x; an inconsistent substitution is not detected and silently produces wrong
results.

Example:
    >>> sub = InverseSub()
    >>> sub.transform_bounds(1, np.inf)
    (1.0, 0.0)
    >>> g = sub.transform(lambda x: 1 / x**2)
    >>> g(0.5)  # 1/(1/0.5)**2 * -1/0.5**2
    -1.0
"""

import numpy as np

from .errors import InvalidInputError

__all__ = ['Substitution', 'NoSub', 'ExpSub', 'InverseSub',
           'SUBSTITUTIONS', 'get_substitution']


class Substitution(object):
    """ Stateless bundle of x(u), u(x) and dx/du.

    Subclasses implement the three maps; they must accept floats as well as
    numpy arrays so that vectorized integrands keep working.
    """
    name = 'substitution'
    is_identity = False

    def x(self, u):
        raise NotImplementedError

    def u(self, x):
        raise NotImplementedError

    def dxdu(self, u):
        raise NotImplementedError

    def transform(self, fn):
        """ Return the integrand in the new variable, u -> f(x(u)) dx/du. """
        if self.is_identity:
            return fn

        def transformed(u):
            return fn(self.x(u)) * self.dxdu(u)
        return transformed

    def transform_bounds(self, a, b):
        """ Map the integration limits to the new variable.

        Infinite limits are allowed here as long as the mapped limits are
        finite (e.g. x=inf with InverseSub); the integrators reject
        non-finite mapped limits.
        """
        if self.is_identity:
            return float(a), float(b)
        a, b = np.float64(a), np.float64(b)
        with np.errstate(divide='ignore', invalid='ignore'):
            return float(self.u(a)), float(self.u(b))

    @classmethod
    def make(cls, x, u, dxdu, name='custom'):
        """ Create a substitution from three functions.

        :param x: Forward map x(u).
        :param u: Inverse map u(x).
        :param dxdu: Derivative of the forward map, dx/du(u).
        :param name: Name used in repr and results.
        """
        obj = cls()
        obj.x = x
        obj.u = u
        obj.dxdu = dxdu
        obj.name = name
        return obj

    def __repr__(self):
        return type(self).__name__ + "(name=%s)" % self.name


class NoSub(Substitution):
    """ Identity, x = u. Integrands are passed through untouched. """
    name = 'none'
    is_identity = True

    def x(self, u):
        return u

    def u(self, x):
        return x

    def dxdu(self, u):
        return 1.


class ExpSub(Substitution):
    """ x = exp(u); for integrands spread over many orders of magnitude. """
    name = 'exp'

    def x(self, u):
        return np.exp(u)

    def u(self, x):
        return np.log(x)

    def dxdu(self, u):
        return np.exp(u)


class InverseSub(Substitution):
    """ x = 1/u; maps an infinite limit to zero (polynomially decaying tails).
    """
    name = 'inverse'

    def x(self, u):
        return 1 / u

    def u(self, x):
        return 1 / x

    def dxdu(self, u):
        return -1 / (u * u)


SUBSTITUTIONS = {
    'none': NoSub,
    'exp': ExpSub,
    'inverse': InverseSub,
}


def get_substitution(sub=None):
    """ Interpret sub as a Substitution instance.

    :param sub: None (identity), a name from SUBSTITUTIONS, a Substitution
        subclass or a Substitution instance.
    """
    if sub is None:
        return NoSub()
    if isinstance(sub, Substitution):
        return sub
    if isinstance(sub, str):
        try:
            return SUBSTITUTIONS[sub]()
        except KeyError:
            raise InvalidInputError("Unknown substitution '%s', choose one "
                                    "of %s." % (sub, sorted(SUBSTITUTIONS)))
    if isinstance(sub, type) and issubclass(sub, Substitution):
        return sub()
    raise TypeError("Can't interpret %r as a substitution." % (sub,))
