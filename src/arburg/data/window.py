"""
Window class representing a single holdout evaluation unit.
"""

import numpy as np
from typing import Any, Dict, Optional

from ..metrics import evaluate_metrics
from ..models.utils import as_series


class Window:
    """
    Represents a single evaluation unit (history, target).
    Stores ground truth and submitted forecast.
    """

    def __init__(self, history: np.ndarray, target: np.ndarray):
        """
        Initialize a window with history and target.

        Args:
            history: Historical data for forecasting
            target: Ground truth target values
        """
        self._history = np.array(history, dtype=np.float64)
        self._target = np.array(target, dtype=np.float64)
        self._forecast: Optional[np.ndarray] = None
        self._evaluation_results: Optional[Dict[str, np.ndarray]] = None

    @classmethod
    def from_series(cls, series: Any, forecast_horizon: int) -> "Window":
        """
        Split the last ``forecast_horizon`` points of a series off as target.

        Args:
            series: Complete time series
            forecast_horizon: Number of trailing points held out
        """
        values = as_series(series)
        if forecast_horizon <= 0 or forecast_horizon >= len(values):
            raise ValueError(
                f"forecast_horizon must be between 1 and {len(values) - 1}, got {forecast_horizon}"
            )
        return cls(values[:-forecast_horizon], values[-forecast_horizon:])

    def history(self) -> np.ndarray:
        """Return the historical data."""
        return self._history.copy()

    def target(self) -> np.ndarray:
        """Return the target values."""
        return self._target.copy()

    def forecast(self) -> Optional[np.ndarray]:
        """Return the submitted forecast."""
        return self._forecast.copy() if self._forecast is not None else None

    def submit_forecast(self, forecast: np.ndarray) -> None:
        """
        Store forecast and trigger evaluation once for this window.

        Args:
            forecast: Predicted values, same shape as the target
        """
        forecast = np.asarray(forecast, dtype=np.float64)
        if forecast.shape != self._target.shape:
            raise ValueError(f"Forecast shape {forecast.shape} does not match target shape {self._target.shape}")

        self._forecast = forecast.copy()
        self._evaluation_results = evaluate_metrics(self._target, self._forecast)

    def evaluate(self) -> Dict[str, np.ndarray]:
        """
        Return cached metric results.

        Returns:
            Dictionary of evaluation metrics
        """
        if self._evaluation_results is None:
            raise ValueError("No forecast submitted yet. Call submit_forecast() first.")
        return {name: values.copy() for name, values in self._evaluation_results.items()}

    @property
    def has_forecast(self) -> bool:
        """Check if forecast has been submitted."""
        return self._forecast is not None
