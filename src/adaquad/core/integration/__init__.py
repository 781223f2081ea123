from .integration import QuadratureResult, Region, Partition
from .adaptive import GaussKronrodQuad
from .cubature import GenzMalikCubature
from .discrete import discrete_integrate, discrete_weights
from .functions import integrate, integrate_nd

__all__ = ['QuadratureResult', 'GaussKronrodQuad', 'GenzMalikCubature',
           'integrate', 'integrate_nd', 'discrete_integrate']
