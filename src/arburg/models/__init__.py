"""
Burg autoregressive models.
"""

from arburg.models.base_forecaster import BaseForecaster
from arburg.models.burg import BurgModel, FittedBurgModel, burg_recursion, effective_horizon
from arburg.models.burg_forecast import BurgForecast
from arburg.models.mean_forecast import MeanForecast

__all__ = [
    'BaseForecaster',
    'BurgModel',
    'FittedBurgModel',
    'BurgForecast',
    'MeanForecast',
    'burg_recursion',
    'effective_horizon'
]
