"""
Evaluation metrics for Burg forecasts.

All metrics take arrays of shape [batch_size, num_values] (1-D inputs are
treated as a single batch element) and return one value per batch element.
"""

import numpy as np
from typing import Dict, Tuple


LOW_VARIANCE_THRESHOLD = 1e-3
MIN_DENOMINATOR = 1e-4  # Minimum denominator to prevent division by very small numbers


def _prepare(y_true: np.ndarray, y_pred: np.ndarray) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    y_true = np.atleast_2d(np.asarray(y_true, dtype=np.float64))
    y_pred = np.atleast_2d(np.asarray(y_pred, dtype=np.float64))
    if y_true.shape != y_pred.shape:
        raise ValueError(f"Forecast shape {y_pred.shape} does not match target shape {y_true.shape}")
    valid_mask = ~(np.isnan(y_true) | np.isnan(y_pred))
    return y_true, y_pred, valid_mask


def _masked_mean(values: np.ndarray, valid_mask: np.ndarray, name: str) -> np.ndarray:
    counts = np.sum(valid_mask, axis=1)
    totals = np.sum(np.where(valid_mask, values, 0.0), axis=1)
    result = np.full(values.shape[0], np.nan)
    np.divide(totals, counts, out=result, where=counts > 0)

    empty_batches = counts == 0
    if np.any(empty_batches):
        print(f"Warning: {name} calculation failed for {np.sum(empty_batches)} batch elements - no valid data points after NaN removal")
    return result


def MAE(y_true: np.ndarray, y_pred: np.ndarray) -> np.ndarray:
    """
    Mean Absolute Error.

    Args:
        y_true: Ground truth values (shape: [batch_size, num_values])
        y_pred: Predicted values (shape: [batch_size, num_values])

    Returns:
        MAE values, one per batch element (shape: [batch_size])
    """
    y_true, y_pred, valid_mask = _prepare(y_true, y_pred)
    return _masked_mean(np.abs(y_true - y_pred), valid_mask, "MAE")


def RMSE(y_true: np.ndarray, y_pred: np.ndarray) -> np.ndarray:
    """
    Root Mean Square Error.

    Args:
        y_true: Ground truth values (shape: [batch_size, num_values])
        y_pred: Predicted values (shape: [batch_size, num_values])

    Returns:
        RMSE values, one per batch element (shape: [batch_size])
    """
    y_true, y_pred, valid_mask = _prepare(y_true, y_pred)
    return np.sqrt(_masked_mean((y_true - y_pred) ** 2, valid_mask, "RMSE"))


def MAPE(y_true: np.ndarray, y_pred: np.ndarray) -> np.ndarray:
    """
    Mean Absolute Percentage Error.

    Targets whose magnitude is below 1% of their standard deviation (or below
    MIN_DENOMINATOR) are left out; when every target is that small, or the
    target is nearly constant, the MAE is normalised by the target magnitude
    instead.

    Returns:
        MAPE values as percentages, one per batch element (shape: [batch_size])
    """
    y_true, y_pred, valid_mask = _prepare(y_true, y_pred)
    mape_per_batch = np.full(y_true.shape[0], np.nan)

    for i in range(y_true.shape[0]):
        mask = valid_mask[i]
        if not np.any(mask):
            print("Warning: MAPE calculation failed for 1 batch elements - no valid data points after NaN removal")
            continue

        target = y_true[i][mask]
        errors = np.abs(target - y_pred[i][mask])
        target_std = np.std(target)

        if target_std >= LOW_VARIANCE_THRESHOLD:
            min_threshold = max(target_std * 0.01, MIN_DENOMINATOR)
            above = np.abs(target) > min_threshold
            if np.any(above):
                mape_per_batch[i] = np.mean(errors[above] / np.abs(target[above])) * 100
                continue

        # Low variance or all values too small
        normalization_factor = max(abs(np.mean(target)), MIN_DENOMINATOR)
        mape_per_batch[i] = np.mean(errors) / normalization_factor * 100

    return mape_per_batch


def NMAE(y_true: np.ndarray, y_pred: np.ndarray) -> np.ndarray:
    """
    Normalized Mean Absolute Error: MAE divided by the target standard
    deviation (target range or magnitude for low variance targets), capped at 3.

    Returns:
        NMAE values, one per batch element (shape: [batch_size])
    """
    y_true, y_pred, valid_mask = _prepare(y_true, y_pred)
    mae = _masked_mean(np.abs(y_true - y_pred), valid_mask, "NMAE")
    nmae_per_batch = np.full(y_true.shape[0], np.nan)

    for i in range(y_true.shape[0]):
        if np.isnan(mae[i]):
            continue
        target = y_true[i][valid_mask[i]]
        target_std = np.std(target)
        target_range = np.max(target) - np.min(target)

        if target_std >= LOW_VARIANCE_THRESHOLD:
            normalization_factor = target_std
        elif target_range >= LOW_VARIANCE_THRESHOLD:
            normalization_factor = target_range
        else:
            normalization_factor = max(abs(np.mean(target)), 1e-6)

        nmae_per_batch[i] = min(mae[i] / normalization_factor, 3.0)

    return nmae_per_batch


def evaluate_metrics(y_true: np.ndarray, y_pred: np.ndarray) -> Dict[str, np.ndarray]:
    """
    Evaluate all metrics for given predictions.

    Args:
        y_true: Ground truth values (shape: [batch_size, num_values])
        y_pred: Predicted values (shape: [batch_size, num_values])

    Returns:
        Dictionary containing metric vectors (one per batch element)
    """
    return {
        'MAPE': MAPE(y_true, y_pred),
        'MAE': MAE(y_true, y_pred),
        'RMSE': RMSE(y_true, y_pred),
        'NMAE': NMAE(y_true, y_pred)
    }
