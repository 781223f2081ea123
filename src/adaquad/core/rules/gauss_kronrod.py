import numpy as np

EPS = np.finfo(np.float64).eps
TINY = np.finfo(np.float64).tiny

# Abscissas and weights of the 7-point Gauss / 15-point Kronrod pair on
# [-1, 1], non-negative half; values from QUADPACK dqk15.f.
_XGK = np.array([
    0.991455371120812639206854697526329,
    0.949107912342758524526189684047851,
    0.864864423359769072789712788640926,
    0.741531185599394439863864773280788,
    0.586087235467691130294144838258730,
    0.405845151377397166906606412076961,
    0.207784955007898467600689403773245,
    0.000000000000000000000000000000000,
])

_WGK = np.array([
    0.022935322010529224963732008058970,
    0.063092092629978553290700663189204,
    0.104790010322250183839876322541518,
    0.140653259715525918745189590510238,
    0.169004726639267902826583426598550,
    0.190350578064785409913256402421014,
    0.204432940075298892414161999234649,
    0.209482141084727828012999174891714,
])

# Gauss weights belong to the odd entries of _XGK (including the center)
_WG = np.array([
    0.129484966168869693270611432679082,
    0.279705391489276667901467771423780,
    0.381830050505118944950369775488975,
    0.417959183673469387755102040816327,
])


class GaussKronrod15(object):
    """ 15-point Gauss-Kronrod rule with embedded 7-point Gauss rule.

    The nodes are ordered from -1 to 1. The Gauss weights are stored on the
    full 15-point stencil with zeros at the Kronrod-only nodes, so both
    estimates are plain dot products with the same function values.
    """
    npoints = 15

    def __init__(self):
        self.nodes = np.concatenate((-_XGK[:-1], _XGK[::-1]))
        self.kronrod_weights = np.concatenate((_WGK[:-1], _WGK[::-1]))

        gauss_half = np.zeros(8)
        gauss_half[1::2] = _WG
        self.gauss_weights = np.concatenate((gauss_half[:-1],
                                             gauss_half[::-1]))

    def points(self, lo, hi):
        """ The abscissas rescaled into [lo, hi]. """
        center = 0.5 * (lo + hi)
        half_length = 0.5 * (hi - lo)
        return center + half_length * self.nodes

    def estimate(self, values, lo, hi):
        """ Kronrod estimate and local error from the values at points(lo, hi).

        The error heuristic is the one of QUADPACK: the Gauss-Kronrod
        difference is scaled by a measure of the variation of the integrand
        over the interval and bounded from below by the rounding error of the
        sum.

        :param values: Numpy array of the 15 function values.
        :return: Tuple (integral_estimate, error_estimate).
        """
        half_length = 0.5 * (hi - lo)
        abs_half_length = abs(half_length)

        res_kronrod = np.dot(self.kronrod_weights, values)
        res_gauss = np.dot(self.gauss_weights, values)
        res_abs = np.dot(self.kronrod_weights, np.abs(values))
        mean = 0.5 * res_kronrod
        res_asc = np.dot(self.kronrod_weights, np.abs(values - mean))

        res_kronrod *= half_length
        res_abs *= abs_half_length
        res_asc *= abs_half_length
        err = abs((res_kronrod - res_gauss * half_length))

        if res_asc != 0 and err != 0:
            err = res_asc * min(1., (200 * err / res_asc) ** 1.5)
        if res_abs > TINY / (50 * EPS):
            err = max(50 * EPS * res_abs, err)

        return float(res_kronrod), float(err)
