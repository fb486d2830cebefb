"""
Burg autoregressive model.

Fits an AR(m) model by minimizing the sum of forward and backward prediction
error energy while constraining the coefficients to satisfy the Levinson-Durbin
recursion, then extrapolates the series through the AR linear recurrence.

References:
    C. Collomb, "Burg's Method, Algorithm and Recursion" (2009)
"""

import numpy as np
from typing import Any, Optional, Tuple
from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from arburg.config import BurgConfig
from arburg.exceptions import (
    DegenerateRecursionError,
    InsufficientDataError,
    InvalidInputError,
    NotTrainedError,
)
from arburg.models.utils import as_series


# |mu| <= 1 holds exactly; allow for rounding on perfectly predictable series
REFLECTION_TOLERANCE = 1e-8


def burg_recursion(x: np.ndarray, order: int) -> np.ndarray:
    """
    Run Burg's recursion on a validated series.

    Args:
        x: 1-D float64 series with more than ``order`` values
        order: AR model order m

    Returns:
        AR polynomial coefficients a_1..a_m (the leading a_0 = 1 is dropped)

    Raises:
        DegenerateRecursionError: if the error energy vanishes before step m
    """
    N = len(x)
    A = np.zeros(order + 1)
    A[0] = 1.0

    f = x.copy()
    b = x.copy()

    D = 2.0 * np.sum(f ** 2) - f[0] ** 2 - b[N - 1] ** 2
    energy_floor = np.finfo(np.float64).eps * D

    for k in range(order):
        if not np.isfinite(D) or D <= energy_floor:
            raise DegenerateRecursionError(k, float(D))

        mu = -2.0 / D * np.dot(f[k + 1:], b[:N - k - 1])
        if not np.isfinite(mu) or abs(mu) > 1.0 + REFLECTION_TOLERANCE:
            raise DegenerateRecursionError(k, float(D), float(mu))

        # Right-hand sides are evaluated in full before assignment, so every
        # pair is updated from its old values.
        A[:k + 2] = A[:k + 2] + mu * A[k + 1::-1]

        f_old = f[k + 1:].copy()
        b_old = b[:N - k - 1].copy()
        f[k + 1:] = f_old + mu * b_old
        b[:N - k - 1] = b_old + mu * f_old

        D = (1.0 - mu ** 2) * D - f[k + 1] ** 2 - b[N - k - 2] ** 2

    return A[1:]


def effective_horizon(count: Optional[int], order: int) -> int:
    """
    Number of values a single predict() call returns.

    A count of 0 (or None) or anything above ``order`` becomes ``order``; one
    call never forecasts further than the model order.

    Raises:
        InvalidInputError: if count is negative or not an integer
    """
    if count is None:
        return order
    if isinstance(count, bool) or not isinstance(count, (int, np.integer)):
        raise InvalidInputError(f"Forecast count must be an integer, got {type(count).__name__}")
    if count < 0:
        raise InvalidInputError(f"Forecast count must be non-negative, got {count}")
    if count == 0 or count > order:
        return order
    return int(count)


class FittedBurgModel(BaseModel):
    """
    Immutable result of fitting a Burg AR model.

    Holds the coefficients and the series tail from the same fit, so it can be
    shared and predicted from without synchronisation.
    """

    model_config = ConfigDict(frozen=True)

    order: int
    coefficients: Tuple[float, ...]
    series_tail: Tuple[float, ...]

    @field_validator("coefficients", "series_tail")
    @classmethod
    def _finite(cls, values: Tuple[float, ...]) -> Tuple[float, ...]:
        if not np.all(np.isfinite(values)):
            raise ValueError("values must be finite")
        return values

    @model_validator(mode="after")
    def _lengths_match_order(self) -> "FittedBurgModel":
        if len(self.coefficients) != self.order or len(self.series_tail) != self.order:
            raise ValueError(
                f"expected {self.order} coefficients and tail values, got "
                f"{len(self.coefficients)} and {len(self.series_tail)}"
            )
        return self

    def predict(self, count: Optional[int] = 0) -> np.ndarray:
        """
        Extrapolate the series past its tail.

        Args:
            count: Number of values to predict; 0 or more than ``order`` means ``order``

        Returns:
            The newly predicted values (the seed tail is not included)
        """
        m = self.order
        n = effective_horizon(count, m)
        coeffs = np.asarray(self.coefficients)

        predicted = np.empty(m + n)
        predicted[:m] = self.series_tail
        for i in range(m, m + n):
            # coeffs[j] pairs with predicted[i - 1 - j]
            predicted[i] = -np.dot(coeffs, predicted[i - m:i][::-1])

        return predicted[m:]

    def reseed(self, tail: Any) -> "FittedBurgModel":
        """Return a copy predicting from the last ``order`` values of ``tail``."""
        values = as_series(tail)
        if len(values) < self.order:
            raise InvalidInputError(f"Seed tail needs {self.order} values, got {len(values)}")
        return self.model_copy(update={"series_tail": tuple(values[-self.order:].tolist())})


class BurgModel:
    """
    AR model of fixed order trained with Burg's method.

    ``train`` stores the most recent fit; ``predict`` extrapolates from it.
    The instance is mutable: use ``fit`` and the returned FittedBurgModel when
    the model is shared between callers.
    """

    def __init__(self, order: int):
        """
        Initialize a Burg model.

        Args:
            order: AR model order (positive integer)
        """
        self._config = BurgConfig(order=order)
        self._fitted: Optional[FittedBurgModel] = None

    def __repr__(self) -> str:
        return f"BurgModel(order={self.order}, trained={self.is_trained})"

    @property
    def order(self) -> int:
        return self._config.order

    @property
    def fitted(self) -> Optional[FittedBurgModel]:
        return self._fitted

    @property
    def is_trained(self) -> bool:
        return self._fitted is not None

    @property
    def coefficients(self) -> Optional[np.ndarray]:
        """Coefficients a_1..a_m from the last train(), or None."""
        if self._fitted is None:
            return None
        return np.asarray(self._fitted.coefficients)

    @property
    def series_tail(self) -> Optional[np.ndarray]:
        """Last ``order`` values of the last trained series, or None."""
        if self._fitted is None:
            return None
        return np.asarray(self._fitted.series_tail)

    def fit(self, series: Any) -> FittedBurgModel:
        """
        Fit the model without touching this instance.

        Args:
            series: Time series with more than ``order`` finite values

        Returns:
            Immutable fitted model
        """
        x = as_series(series)
        m = self.order
        if len(x) <= m:
            raise InsufficientDataError(len(x), m)

        coefficients = burg_recursion(x, m)
        return FittedBurgModel(
            order=m,
            coefficients=tuple(coefficients.tolist()),
            series_tail=tuple(x[-m:].tolist()),
        )

    def train(self, series: Any) -> np.ndarray:
        """
        Compute the AR coefficients of ``series`` and keep them for predict().

        Args:
            series: Time series with more than ``order`` finite values

        Returns:
            Coefficients a_1..a_m
        """
        self._fitted = self.fit(series)
        return self.coefficients

    def predict(self, count: Optional[int] = 0) -> np.ndarray:
        """
        Predict the next values of the last trained series.

        Args:
            count: Number of values; 0 or more than ``order`` means ``order``

        Returns:
            Forecast values
        """
        if self._fitted is None:
            raise NotTrainedError("BurgModel.predict() called before train()")
        return self._fitted.predict(count)
