"""
Forecast plotting utilities for Burg model visualization.
"""

import matplotlib.pyplot as plt
import numpy as np
from typing import Dict, Optional
from pathlib import Path
from ..data.window import Window


def plot_window_forecasts(
    window: Window,
    forecasts: Dict[str, Optional[np.ndarray]],
    seed_length: Optional[int] = None,
    chunk_size: Optional[int] = None,
    title: Optional[str] = None,
    figsize: tuple = (12, 6),
    save_path: Optional[str] = None,
    show_plot: bool = False
):
    """
    Plot a window with its history, target, and multiple forecasts.

    Args:
        window: Window object containing history and target
        forecasts: Dictionary mapping model names to forecast arrays
        seed_length: Mark the last seed_length history points, the series tail
            that seeds AR prediction (usually the model order)
        chunk_size: Draw a boundary after every chunk_size forecast steps, where
            one predict() call ends and the next is seeded (usually the model order)
        title: Optional title for the plot
        figsize: Figure size tuple (width, height)
        save_path: Optional path to save the plot
        show_plot: Show the figure instead of closing it

    Returns:
        The pyplot module when show_plot is set, otherwise None
    """
    history = window.history()
    target = window.target()

    plt.figure(figsize=figsize)

    history_indices = np.arange(len(history))
    plt.plot(history_indices, history, 'b-', linewidth=2, label='History', alpha=0.8)

    if seed_length:
        seed_length = min(seed_length, len(history))
        plt.plot(history_indices[-seed_length:], history[-seed_length:], 'o', color='navy',
                 markersize=6, label=f'Series tail (last {seed_length})')

    target_indices = np.arange(len(history), len(history) + len(target))
    plt.plot(target_indices, target, 'g-', linewidth=2, label='Target', alpha=0.8)

    colors = ['red', 'orange', 'purple', 'brown', 'pink', 'gray', 'olive', 'cyan', 'black', 'yellow']
    for i, (model_name, forecast) in enumerate(forecasts.items()):
        if forecast is None:
            print(f"Warning: Skipping {model_name} forecast (None)")
            continue

        color = colors[i % len(colors)]
        forecast_indices = np.arange(len(history), len(history) + len(forecast))
        plt.plot(forecast_indices, forecast, '--', color=color, linewidth=2,
                 label=f'{model_name} Forecast', alpha=0.8)

    # Separate history from target/forecasts
    plt.axvline(x=len(history) - 0.5, color='black', linestyle=':', alpha=0.5)

    if chunk_size:
        horizon = max([len(f) for f in forecasts.values() if f is not None] + [len(target)])
        for boundary in range(chunk_size, horizon, chunk_size):
            plt.axvline(x=len(history) + boundary - 0.5, color='gray', linestyle='--', alpha=0.3)

    plt.xlabel('Time Steps', fontsize=14)
    plt.ylabel('Value', fontsize=14)
    plt.title(title or 'History, Target, and Forecasts', fontsize=18)
    plt.legend(loc='upper left', fontsize=10)
    plt.grid(True, alpha=0.3)
    plt.tight_layout()

    if save_path:
        save_path = Path(save_path)
        save_path.parent.mkdir(parents=True, exist_ok=True)

        plt.savefig(save_path, dpi=150, bbox_inches='tight')
        print(f"Plot saved to: {save_path}")
    if show_plot:
        plt.show()
        return plt
    else:
        plt.close()
