""" Exceptions raised by the adaptive integrators.

All errors derive from QuadratureError, so callers can catch everything
raised by this package in one place. Errors are never retried internally:
a failed call has to be repeated with adjusted tolerances, a larger
subdivision budget or a substitution.
"""


class QuadratureError(RuntimeError):
    """ Base class of all integration errors. """


class InvalidInputError(QuadratureError, ValueError):
    """ Malformed domain, tolerances or sample count.

    Raised before the integrand is evaluated for the first time.
    """


class InvalidIntegrandError(QuadratureError, ArithmeticError):
    """ The integrand returned a non-finite value (nan or +-inf). """

    def __init__(self, point, value):
        self.point = point
        self.value = value
        super().__init__("Integrand returned %s at %s." % (value, point))


class NonConvergenceError(QuadratureError):
    """ Requested accuracy could not be reached.

    The best estimate found before giving up is available as the
    attribute `result` (a QuadratureResult with converged=False), so callers
    may still decide to accept the degraded value.
    """

    def __init__(self, message, result):
        self.result = result
        super().__init__(message)
