from .genz import (GenzFunction, Oscillatory, ProductPeak, CornerPeak,
                   Gaussian, Continuous, Discontinuous, GENZ_FAMILY)

__all__ = ['GenzFunction', 'Oscillatory', 'ProductPeak', 'CornerPeak',
           'Gaussian', 'Continuous', 'Discontinuous', 'GENZ_FAMILY']
