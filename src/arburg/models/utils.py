"""
Utility functions for Burg model inputs.
"""

import numpy as np
import pandas as pd
from typing import Any

from arburg.exceptions import InvalidInputError


_NUMERIC_KINDS = {"integer", "floating", "mixed-integer-float"}


def as_series(series: Any) -> np.ndarray:
    """
    Validate a time series and return it as a 1-D float64 array.

    Args:
        series: list, tuple, 1-D numpy array or pandas Series of real numbers

    Returns:
        Copy of the series as a float64 array

    Raises:
        InvalidInputError: if the input is not a flat ordered sequence of
            finite real numbers
    """
    if isinstance(series, pd.Series):
        values = series.to_numpy()
    elif isinstance(series, (list, tuple, np.ndarray)):
        # np.asarray would silently turn a mixed [1, True] into integers
        if not isinstance(series, np.ndarray) and any(isinstance(v, (bool, np.bool_)) for v in series):
            raise InvalidInputError("Time series must hold real numbers, got boolean values")
        try:
            values = np.asarray(series)
        except ValueError as e:
            # ragged nesting
            raise InvalidInputError(f"Time series must be a flat sequence: {e}") from e
    else:
        raise InvalidInputError(
            f"Time series must be a list, tuple, numpy array or pandas Series, got {type(series).__name__}"
        )

    if values.ndim != 1:
        raise InvalidInputError(f"Time series must be one-dimensional, got shape {values.shape}")
    if values.size == 0:
        return np.empty(0, dtype=np.float64)

    if pd.api.types.is_bool_dtype(values.dtype) or values.dtype.kind == "c":
        raise InvalidInputError(f"Time series must hold real numbers, got dtype {values.dtype}")
    if values.dtype.kind == "O":
        kind = pd.api.types.infer_dtype(values, skipna=False)
        if kind not in _NUMERIC_KINDS:
            raise InvalidInputError(f"Time series must hold real numbers, got {kind} values")
    elif not pd.api.types.is_numeric_dtype(values.dtype):
        raise InvalidInputError(f"Time series must hold real numbers, got dtype {values.dtype}")

    result = values.astype(np.float64)
    if not np.all(np.isfinite(result)):
        bad = int(np.sum(~np.isfinite(result)))
        raise InvalidInputError(f"Time series contains {bad} non-finite value(s)")
    return result


def fill_nans_with_mean(data: np.ndarray) -> np.ndarray:
    """
    Replace NaN values with the nanmean of the series (zeros if all are NaN).

    Args:
        data: 1-D input series

    Returns:
        Series without NaNs
    """
    if np.all(np.isnan(data)):
        return np.zeros_like(data)
    return np.where(np.isnan(data), np.nanmean(data), data)
