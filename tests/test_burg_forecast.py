from __future__ import annotations

import numpy as np
import pytest

from arburg import BurgForecast, BurgModel
from arburg.models import BaseForecaster, MeanForecast


NOISY = np.array([0.3, -1.2, 0.8, 2.1, -0.4, 0.9, -1.7, 0.5, 1.3, -0.6, 0.2, -0.9, 1.1, 0.4, -0.3, 1.8])
ALTERNATING = np.array([1.0, -1.0] * 5)


def test_is_base_forecaster():
    forecaster = BurgForecast(order=3)
    assert isinstance(forecaster, BaseForecaster)
    assert forecaster.order == 3


def test_default_horizon_is_one():
    assert BurgForecast(order=2).forecast(NOISY).shape == (1,)


def test_single_round_matches_model():
    order = 4
    forecast = BurgForecast(order=order, demean=False).forecast(NOISY, forecast_horizon=order)

    model = BurgModel(order)
    model.train(NOISY)
    np.testing.assert_array_equal(forecast, model.predict())


@pytest.mark.parametrize("refit", [True, False])
def test_horizon_beyond_order_rolls_forward(refit):
    forecaster = BurgForecast(order=1, demean=False, refit=refit)
    forecast = forecaster.forecast(ALTERNATING, forecast_horizon=5)

    np.testing.assert_allclose(forecast, [1.0, -1.0, 1.0, -1.0, 1.0], atol=1e-9)


def test_without_refit_coefficients_are_reused():
    order = 3
    forecast = BurgForecast(order=order, demean=False, refit=False).forecast(NOISY, forecast_horizon=7)

    fitted = BurgModel(order).fit(NOISY)
    expected = list(fitted.predict(3))
    expected += list(fitted.reseed(np.concatenate([NOISY, expected])).predict(3))
    expected += list(fitted.reseed(np.concatenate([NOISY, expected])).predict(1))
    np.testing.assert_allclose(forecast, expected)


def test_demean_is_shift_equivariant():
    forecaster = BurgForecast(order=3, demean=True)
    base = forecaster.forecast(NOISY, forecast_horizon=6)
    shifted = forecaster.forecast(NOISY + 10.0, forecast_horizon=6)

    assert len(base) == 6
    np.testing.assert_allclose(shifted, base + 10.0, atol=1e-8)


def test_batch_history():
    history = np.vstack([NOISY, 2.0 * NOISY])
    forecast = BurgForecast(order=2).forecast(history, forecast_horizon=3)

    assert forecast.shape == (2, 3)
    np.testing.assert_allclose(forecast[1], 2.0 * forecast[0], rtol=1e-9, atol=1e-12)


def test_nans_are_filled_with_mean():
    history = NOISY.copy()
    history[[2, 7]] = np.nan
    forecast = BurgForecast(order=2).forecast(history, forecast_horizon=4)

    assert forecast.shape == (4,)
    assert np.all(np.isfinite(forecast))


def test_short_history_falls_back_to_mean(capsys):
    forecast = BurgForecast(order=4).forecast(np.array([1.0, 2.0, 3.0]), forecast_horizon=2)

    np.testing.assert_allclose(forecast, [2.0, 2.0])
    assert "too short" in capsys.readouterr().out


def test_constant_history_falls_back_to_mean(capsys):
    forecast = BurgForecast(order=2).forecast(np.full(10, 4.0), forecast_horizon=3)

    np.testing.assert_allclose(forecast, [4.0, 4.0, 4.0])
    assert "degenerated" in capsys.readouterr().out


def test_mean_forecast_ignores_nans():
    forecaster = MeanForecast()
    assert isinstance(forecaster, BaseForecaster)

    np.testing.assert_allclose(forecaster.forecast(np.array([1.0, np.nan, 3.0]), forecast_horizon=2), [2.0, 2.0])
    assert forecaster.forecast(np.array([5.0])).shape == (1,)


def test_mean_forecast_batch_and_empty_rows():
    history = np.array([[1.0, 2.0, 3.0], [np.nan, np.nan, np.nan]])
    forecast = MeanForecast().forecast(history, forecast_horizon=2)

    np.testing.assert_allclose(forecast, [[2.0, 2.0], [0.0, 0.0]])


def test_fallback_uses_mean_forecaster(monkeypatch):
    calls = []
    forecaster = BurgForecast(order=4)

    def fake_forecast(history, covariates=None, forecast_horizon=None):
        calls.append(len(history))
        return np.full(forecast_horizon, -1.0)

    monkeypatch.setattr(forecaster.fallback, "forecast", fake_forecast)

    np.testing.assert_array_equal(forecaster.forecast(np.array([1.0, 2.0]), forecast_horizon=3), [-1.0, -1.0, -1.0])
    assert calls == [2]
