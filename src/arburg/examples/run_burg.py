"""
Fit a Burg AR model to one column of a CSV or parquet file and extrapolate it.

Example:
    python -m arburg.examples.run_burg --input prices.csv --column close --order 8 --holdout 8
"""

import argparse
import numpy as np
import pandas as pd
from pathlib import Path
from typing import List, Optional

from arburg.data import Window
from arburg.exceptions import BurgError
from arburg.models import BurgForecast, BurgModel


def load_series(input_path: str, column: Optional[str] = None) -> np.ndarray:
    """
    Load one numeric column from a CSV or parquet file, dropping NaNs.

    Args:
        input_path: Path to a .csv or .parquet file
        column: Column name (default: first numeric column)

    Returns:
        Series values
    """
    path = Path(input_path)
    if path.suffix.lower() == ".parquet":
        df = pd.read_parquet(path)
    else:
        df = pd.read_csv(path)

    if column is None:
        numeric_cols = df.select_dtypes(include="number").columns
        if len(numeric_cols) == 0:
            raise ValueError(f"No numeric column found in {input_path}")
        column = numeric_cols[0]
    elif column not in df.columns:
        raise ValueError(f"Column '{column}' not found in {input_path}. Available columns: {list(df.columns)}")

    return df[column].dropna().to_numpy()


def _format_values(values: np.ndarray) -> str:
    return ", ".join(f"{v:.6g}" for v in values)


def run(series: np.ndarray, order: int, horizon: int = 0, holdout: int = 0,
        demean: bool = True, plot_path: Optional[str] = None) -> None:
    """Train, predict and optionally evaluate on a holdout; prints a report."""
    model = BurgModel(order)
    coefficients = model.train(series)
    forecast = model.predict(horizon)

    print(f"AR order: {model.order}")
    print(f"Training points: {len(series)}")
    print(f"Coefficients: {_format_values(coefficients)}")
    print(f"Forecast ({len(forecast)} steps): {_format_values(forecast)}")

    if holdout:
        window = Window.from_series(series, holdout)
        holdout_forecast = BurgForecast(order=order, demean=demean).forecast(
            window.history(), forecast_horizon=holdout
        )
        window.submit_forecast(holdout_forecast)

        print(f"\nHoldout evaluation ({holdout} steps):")
        for metric, value in window.evaluate().items():
            print(f"  {metric}: {value[0]:.4f}")

        if plot_path:
            from arburg.plotting import plot_window_forecasts
            plot_window_forecasts(window, {f"Burg AR({order})": holdout_forecast},
                                  seed_length=order, chunk_size=order,
                                  title=f"Burg AR({order}) holdout forecast", save_path=plot_path)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Fit a Burg AR model and extrapolate a time series")
    parser.add_argument("--input", required=True, help="CSV or parquet file holding the series")
    parser.add_argument("--column", help="Column to model (default: first numeric column)")
    parser.add_argument("--order", type=int, required=True, help="AR model order")
    parser.add_argument("--horizon", type=int, default=0, help="Values to predict (0 or more than order means order)")
    parser.add_argument("--holdout", type=int, default=0, help="Trailing points held out for evaluation")
    parser.add_argument("--no-demean", action="store_true", help="Do not remove the mean for the holdout forecast")
    parser.add_argument("--plot", help="Save a holdout plot to this path (requires --holdout)")

    args = parser.parse_args(argv)

    if args.plot and not args.holdout:
        parser.error("--plot requires --holdout")

    try:
        series = load_series(args.input, args.column)
        run(series, args.order, horizon=args.horizon, holdout=args.holdout,
            demean=not args.no_demean, plot_path=args.plot)
    except (BurgError, ValueError) as e:
        print(f"Error: {e}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
