"""
Burg AR forecaster following the BaseForecaster interface.
"""

import numpy as np
from typing import Optional

from arburg.exceptions import DegenerateRecursionError
from arburg.models.base_forecaster import BaseForecaster
from arburg.models.burg import BurgModel
from arburg.models.mean_forecast import MeanForecast
from arburg.models.utils import fill_nans_with_mean


class BurgForecast(BaseForecaster):
    """
    Burg AR forecaster for arbitrary horizons.

    A single BurgModel.predict() call stops at the model order. Longer horizons
    are reached by predicting again from the series extended with the values
    forecast so far.
    """

    def __init__(self, order: int = 4, demean: bool = True, refit: bool = True):
        """
        Initialize Burg forecaster.

        Args:
            order: AR model order
            demean: Remove the history mean before fitting and add it back afterwards
            refit: Retrain on the extended series each round; otherwise keep the
                first coefficients and only re-seed the tail
        """
        self.model = BurgModel(order)
        self.demean = demean
        self.refit = refit
        self.fallback = MeanForecast()

    @property
    def order(self) -> int:
        return self.model.order

    def forecast(self, history: np.ndarray, covariates: Optional[np.ndarray] = None, forecast_horizon: Optional[int] = None) -> np.ndarray:
        """
        Generate Burg AR forecast.

        Args:
            history: Historical time series data (shape: [history_length] or [batch_size, history_length])
            covariates: Optional covariate data (ignored)
            forecast_horizon: Number of future points to forecast (default: 1)

        Returns:
            Forecast values (shape: [forecast_horizon] or [batch_size, forecast_horizon])
        """
        if forecast_horizon is None:
            forecast_horizon = 1

        history = np.asarray(history, dtype=np.float64)
        if history.ndim == 2:
            forecasts = [self._forecast_series(history[i], forecast_horizon) for i in range(history.shape[0])]
            return np.stack(forecasts, axis=0)  # [batch_size, forecast_horizon]
        return self._forecast_series(history, forecast_horizon)

    def _forecast_series(self, history: np.ndarray, forecast_horizon: int) -> np.ndarray:
        # filter history with nanmean
        history = fill_nans_with_mean(history)

        if len(history) <= self.order:
            print(f"Warning: history of {len(history)} points is too short for AR({self.order}), forecasting the mean")
            return self.fallback.forecast(history, forecast_horizon=forecast_horizon)

        offset = float(np.mean(history)) if self.demean else 0.0
        series = history - offset

        try:
            forecast = self._roll(series, forecast_horizon)
        except DegenerateRecursionError as e:
            print(f"Warning: {e}; forecasting the mean")
            return self.fallback.forecast(history, forecast_horizon=forecast_horizon)

        return forecast + offset

    def _roll(self, series: np.ndarray, forecast_horizon: int) -> np.ndarray:
        fitted = self.model.fit(series)
        extended = series
        forecast = np.empty(0)

        while len(forecast) < forecast_horizon:
            step = fitted.predict(min(forecast_horizon - len(forecast), self.order))
            forecast = np.concatenate([forecast, step])
            extended = np.concatenate([extended, step])
            if len(forecast) < forecast_horizon:
                fitted = self.model.fit(extended) if self.refit else fitted.reseed(extended)

        return forecast
