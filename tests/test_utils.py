from __future__ import annotations

import numpy as np
import pandas as pd
import pytest

from arburg.exceptions import InvalidInputError
from arburg.models.utils import as_series, fill_nans_with_mean


def test_as_series_returns_float_copy():
    source = np.array([1, 2, 3])
    result = as_series(source)

    assert result.dtype == np.float64
    result[0] = 10.0
    assert source[0] == 1


def test_as_series_accepts_pandas_and_empty_input():
    np.testing.assert_array_equal(as_series(pd.Series([1.5, 2.5])), [1.5, 2.5])
    assert as_series([]).shape == (0,)


def test_as_series_rejects_booleans_mixed_with_numbers():
    for series in ([1, True, 2, 3], (0.5, np.bool_(False), 1.5)):
        with pytest.raises(InvalidInputError):
            as_series(series)


def test_fill_nans_with_mean():
    data = np.array([np.nan, 1.0, np.nan, 3.0])

    np.testing.assert_array_equal(fill_nans_with_mean(data), [2.0, 1.0, 2.0, 3.0])
    np.testing.assert_array_equal(fill_nans_with_mean(np.array([np.nan, np.nan])), [0.0, 0.0])
    np.testing.assert_array_equal(fill_nans_with_mean(np.array([1.0, 2.0])), [1.0, 2.0])
