import itertools

import numpy as np

LAMBDA2 = np.sqrt(9 / 70)
LAMBDA4 = np.sqrt(9 / 10)
LAMBDA5 = np.sqrt(9 / 19)
# (LAMBDA2 / LAMBDA4)**2, relates the two second differences along an axis
RATIO = LAMBDA2 ** 2 / LAMBDA4 ** 2

# relative difference below which two fourth differences count as equal
DIFF_TOL = 1e-5


class GenzMalik(object):
    """ Degree 7 cubature rule with embedded degree 5 rule (Genz & Malik).

    The stencil on the unit cube [-1, 1]^ndim consists of

        - the center,
        - 2*ndim points +-LAMBDA2 along each axis,
        - 2*ndim points +-LAMBDA4 along each axis,
        - 2*ndim*(ndim-1) points +-LAMBDA4 along two axes at a time,
        - 2^ndim corner points (+-LAMBDA5, ..., +-LAMBDA5),

    for a total of 1 + 4*ndim + 2*ndim*(ndim-1) + 2^ndim points. The weights
    are normalized to a unit volume, estimates are multiplied by the volume
    of the region.

    Reference: A.C. Genz and A.A. Malik, "An adaptive algorithm for numerical
    integration over an n-dimensional rectangular region",
    J. Comput. Appl. Math. 6, 295-302 (1980).

    :param ndim: Dimensionality of the integration region, ndim >= 1.
    """

    def __init__(self, ndim):
        if ndim < 1:
            raise ValueError("GenzMalik needs ndim >= 1, got %s." % ndim)
        self.ndim = ndim

        offsets = [np.zeros(ndim)]
        self.index_center = 0

        def axis_points(lam):
            plus, minus = [], []
            for i in range(ndim):
                point = np.zeros(ndim)
                point[i] = lam
                plus.append(len(offsets))
                offsets.append(point)
                minus.append(len(offsets))
                offsets.append(-point)
            return np.array(plus), np.array(minus)

        self.index_l2_plus, self.index_l2_minus = axis_points(LAMBDA2)
        self.index_l4_plus, self.index_l4_minus = axis_points(LAMBDA4)

        for i, j in itertools.combinations(range(ndim), 2):
            for s_i, s_j in itertools.product((1, -1), repeat=2):
                point = np.zeros(ndim)
                point[i] = s_i * LAMBDA4
                point[j] = s_j * LAMBDA4
                offsets.append(point)

        for signs in itertools.product((1, -1), repeat=ndim):
            offsets.append(LAMBDA5 * np.array(signs, dtype=np.float64))

        self.offsets = np.array(offsets)
        self.npoints = self.offsets.shape[0]

        n = ndim
        weights7 = ((12824 - 9120 * n + 400 * n ** 2) / 19683,
                    980 / 6561,
                    (1820 - 400 * n) / 19683,
                    200 / 19683,
                    6859 / 19683 / 2 ** n)
        weights5 = ((729 - 950 * n + 50 * n ** 2) / 729,
                    245 / 486,
                    (265 - 100 * n) / 1458,
                    25 / 729,
                    0.)
        group_sizes = (1, 2 * n, 2 * n, 2 * n * (n - 1), 2 ** n)
        self.weights7 = np.repeat(weights7, group_sizes)
        self.weights5 = np.repeat(weights5, group_sizes)

    def points(self, center, half_widths):
        """ Stencil scaled into the box center +- half_widths.

        :return: Array of shape (npoints, ndim).
        """
        return center + half_widths * self.offsets

    def estimate(self, values, volume):
        """ Degree 7 estimate and the error |R7 - R5| of a region.

        :param values: Function values at points(center, half_widths).
        :param volume: Volume of the region.
        :return: Tuple (integral_estimate, error_estimate).
        """
        res7 = volume * np.dot(self.weights7, values)
        res5 = volume * np.dot(self.weights5, values)
        return float(res7), float(abs(res7 - res5))

    def fourth_differences(self, values):
        """ Per axis fourth difference of the integrand at the region center.

        Large values indicate an axis along which the integrand is poorly
        resolved; the adaptive algorithm splits along the largest one.
        """
        center_twice = 2 * values[self.index_center]
        diff2 = (values[self.index_l2_plus] + values[self.index_l2_minus] -
                 center_twice)
        diff4 = (values[self.index_l4_plus] + values[self.index_l4_minus] -
                 center_twice)
        return np.abs(diff2 - RATIO * diff4)

    def split_axis(self, values, half_widths):
        """ Axis along which to halve the region.

        The axis with the largest fourth difference; among axes whose
        differences agree up to DIFF_TOL the widest one, then the first.
        """
        diffs = self.fourth_differences(values)
        widths = np.abs(half_widths)
        best = 0
        for axis in range(1, self.ndim):
            tie = (abs(diffs[axis] - diffs[best]) <=
                   DIFF_TOL * max(diffs[axis], diffs[best]))
            if tie:
                if widths[axis] > widths[best]:
                    best = axis
            elif diffs[axis] > diffs[best]:
                best = axis
        return best
