"""
arburg: autoregressive modelling and extrapolation with Burg's method
"""

from arburg.config import BurgConfig
from arburg.exceptions import (
    BurgError,
    InvalidInputError,
    InsufficientDataError,
    NotTrainedError,
    DegenerateRecursionError
)
from arburg.models import BurgModel, FittedBurgModel, BurgForecast
from arburg.data import Window
from arburg import metrics

__version__ = "1.0.0"
__all__ = [
    'BurgConfig', 'BurgModel', 'FittedBurgModel', 'BurgForecast', 'Window', 'metrics',
    'BurgError', 'InvalidInputError', 'InsufficientDataError', 'NotTrainedError', 'DegenerateRecursionError'
]
