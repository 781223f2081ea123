from .core import *
from .core import __all__
