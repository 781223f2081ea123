import numpy as np

from ..errors import InvalidInputError


def discrete_weights(n):
    """ Weights (for unit spacing) of the discrete integration formula.

    Odd n: composite Simpson rule. Even n: the fourth order end correction
    of Hollingsworth and Hunter,

        3/8, 7/6, 23/24, 1, ..., 1, 23/24, 7/6, 3/8,

    which treats the odd number of intervals without losing order. The
    shortest even cases use the trapezoid rule (n=2) and Simpson's 3/8 rule
    (n=4). All formulas except n=2 are exact for cubic polynomials.

    :param n: Number of samples, n >= 2.
    :return: Numpy array of length n.
    """
    if n < 2:
        raise InvalidInputError("Need at least 2 samples to integrate, "
                                "got %d." % n)
    if n == 2:
        return np.array([.5, .5])
    if n == 4:
        return np.array([3, 9, 9, 3]) / 8
    weights = np.ones(n)
    if n % 2 == 1:
        weights[1:-1:2] = 4
        weights[2:-1:2] = 2
        return weights / 3

    ends = np.array([3 / 8, 7 / 6, 23 / 24])
    weights[:3] = ends
    weights[-3:] = ends[::-1]
    return weights


def discrete_integrate(values, h=1.):
    """ Integrate a function given by samples at uniform spacing h.

    No function is evaluated and no error estimate is produced.

    Example:
        >>> xs = np.linspace(0, 1, 5)
        >>> round(float(discrete_integrate(xs**3, h=.25)), 12)
        0.25

    :param values: Sequence of the n function values f(x_0), ..., f(x_n-1).
    :param h: Spacing x_(i+1) - x_i.
    :return: Approximation of the integral from x_0 to x_n-1.
    """
    values = np.asarray(values, dtype=np.float64)
    if values.ndim != 1:
        raise InvalidInputError("Samples must be a one dimensional sequence.")
    return h * np.dot(discrete_weights(values.size), values)
