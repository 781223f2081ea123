import numpy as np

from ..errors import InvalidInputError, InvalidIntegrandError

__all__ = ['interpret_bounds', 'check_tolerances', 'check_finite',
           'Counted']


def interpret_bounds(a, b, ndim=None):
    """ Convert the corners of an integration box to float arrays.

    Example:
        >>> a, b = interpret_bounds([0, 0], [1, 2])
        >>> a.dtype, b.shape
        (dtype('float64'), (2,))

    :param a: Lower corner, sequence of length ndim (a scalar is accepted
        for a one dimensional box).
    :param b: Upper corner, same length as a. Entries of b may be smaller
        than those of a; the orientation is kept.
    :param ndim: Expected dimensionality, or None to infer it from a.
    :return: Tuple of two one dimensional numpy arrays of dtype float64.
    """
    a = np.array(a, dtype=np.float64, ndmin=1)
    b = np.array(b, dtype=np.float64, ndmin=1)
    if a.ndim != 1 or b.ndim != 1:
        raise InvalidInputError("Bounds must be one dimensional sequences.")
    if a.size != b.size:
        raise InvalidInputError("Lower and upper bounds differ in length "
                                "(%d != %d)." % (a.size, b.size))
    if a.size == 0:
        raise InvalidInputError("Bounds must not be empty.")
    if ndim is not None and a.size != ndim:
        raise InvalidInputError("Bounds must have length %d, got %d." %
                                (ndim, a.size))
    if not (np.all(np.isfinite(a)) and np.all(np.isfinite(b))):
        raise InvalidInputError("Bounds must be finite, use a substitution "
                                "for infinite domains.")
    return a, b


def check_tolerances(epsrel, epsabs):
    if not epsrel >= 0 or not epsabs >= 0:
        # the negated form also rejects nan
        raise InvalidInputError("Tolerances must be non-negative, got "
                                "epsrel=%s, epsabs=%s." % (epsrel, epsabs))
    return float(epsrel), float(epsabs)


def check_finite(points, values):
    """ Raise InvalidIntegrandError if any of the values is not finite.

    :param points: Evaluation points, first axis matching values.
    :param values: Numpy array of integrand values.
    """
    finite = np.isfinite(values)
    if not np.all(finite):
        index = np.argmin(finite)
        raise InvalidIntegrandError(points[index], values[index])


class Counted(object):
    """ Wrap an integrand and count the number of function evaluations.

    :param fn: The integrand.
    :param vectorized: If true, fn receives arrays of points (one array per
        coordinate, a two dimensional array of points or a one dimensional
        array of abscissas) and every entry along the first axis counts
        as one evaluation.
    """
    def __init__(self, fn, vectorized=False):
        self.fn = fn
        self.vectorized = vectorized
        self.count = 0

    def __call__(self, xs, *args, **kwargs):
        if self.vectorized:
            self.count += np.shape(xs)[0] if np.ndim(xs) else 1
        else:
            self.count += 1
        return self.fn(xs, *args, **kwargs)
