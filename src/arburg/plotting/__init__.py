"""
Plotting utilities for Burg forecasts.
"""

from arburg.plotting.plot_forecasts import plot_window_forecasts

__all__ = ['plot_window_forecasts']
