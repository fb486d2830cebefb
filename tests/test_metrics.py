from __future__ import annotations

import numpy as np
import pytest

from arburg.metrics import MAE, MAPE, NMAE, RMSE, evaluate_metrics


def test_mae_and_rmse():
    y_true = np.array([[1.0, 2.0, 3.0]])
    y_pred = np.array([[1.0, 2.0, 4.0]])

    assert MAE(y_true, y_pred) == pytest.approx([1 / 3])
    assert RMSE(y_true, y_pred) == pytest.approx([np.sqrt(1 / 3)])


def test_one_dimensional_inputs_are_one_batch():
    assert MAE([1.0, 2.0], [2.0, 4.0]).shape == (1,)
    assert MAE([1.0, 2.0], [2.0, 4.0])[0] == pytest.approx(1.5)


def test_nan_pairs_are_masked():
    y_true = np.array([[1.0, np.nan, 3.0], [1.0, 1.0, 1.0]])
    y_pred = np.array([[2.0, 5.0, 3.0], [1.0, np.nan, 3.0]])

    np.testing.assert_allclose(MAE(y_true, y_pred), [0.5, 1.0])


def test_rows_without_valid_data_are_nan(capsys):
    y_true = np.array([[np.nan, np.nan], [1.0, 2.0]])
    y_pred = np.array([[1.0, 2.0], [1.0, 2.0]])

    result = RMSE(y_true, y_pred)
    assert np.isnan(result[0])
    assert result[1] == 0.0
    assert "RMSE calculation failed for 1 batch elements" in capsys.readouterr().out


def test_shape_mismatch_raises():
    with pytest.raises(ValueError):
        MAE(np.zeros((1, 3)), np.zeros((1, 4)))


def test_mape():
    assert MAPE([100.0, 200.0], [110.0, 180.0])[0] == pytest.approx(10.0)


def test_mape_constant_target_uses_magnitude():
    assert MAPE([5.0, 5.0, 5.0], [6.0, 4.0, 5.0])[0] == pytest.approx(100 * (2 / 3) / 5)


def test_nmae_normalises_by_std_and_caps():
    y_true = np.array([1.0, 2.0, 3.0])
    assert NMAE(y_true, y_true + 1.0)[0] == pytest.approx(1.0 / np.std(y_true))
    assert NMAE(y_true, y_true + 100.0)[0] == 3.0


def test_evaluate_metrics_returns_all_metrics():
    results = evaluate_metrics(np.array([[1.0, 2.0]]), np.array([[1.0, 2.0]]))

    assert set(results) == {"MAPE", "MAE", "RMSE", "NMAE"}
    for values in results.values():
        assert values.shape == (1,)
        assert values[0] == pytest.approx(0.0)
