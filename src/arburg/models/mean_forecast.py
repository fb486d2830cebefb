"""
Mean forecast, used when a Burg fit is not possible.
"""

import numpy as np
from typing import Optional

from arburg.models.base_forecaster import BaseForecaster


class MeanForecast(BaseForecaster):
    """
    Forecasts the mean of the historical data, ignoring NaNs.
    """

    def forecast(self, history: np.ndarray, covariates: Optional[np.ndarray] = None, forecast_horizon: Optional[int] = None) -> np.ndarray:
        """
        Forecast the nan-mean of the history.

        Args:
            history: Historical time series data (shape: [history_length] or [batch_size, history_length])
            covariates: Optional covariate data (ignored)
            forecast_horizon: Number of future points to forecast (default: 1)

        Returns:
            Mean values (shape: [forecast_horizon] or [batch_size, forecast_horizon]);
            rows without valid data forecast zero
        """
        if forecast_horizon is None:
            forecast_horizon = 1

        history = np.asarray(history, dtype=np.float64)
        batched = history.ndim == 2
        history = np.atleast_2d(history)
        valid_counts = np.sum(~np.isnan(history), axis=1)
        totals = np.nansum(history, axis=1)
        means = np.zeros(history.shape[0])
        np.divide(totals, valid_counts, out=means, where=valid_counts > 0)

        forecasts = np.repeat(means[:, np.newaxis], forecast_horizon, axis=1)
        return forecasts if batched else forecasts[0]
