"""
Exception hierarchy for Burg AR fitting and prediction.
"""

from typing import Optional


class BurgError(Exception):
    """Base class for all arburg errors."""


class InvalidInputError(BurgError, ValueError):
    """Input is not a flat ordered sequence of finite real numbers."""


class InsufficientDataError(BurgError, ValueError):
    """Training series is not longer than the model order."""

    def __init__(self, length: int, order: int):
        self.length = length
        self.order = order
        super().__init__(
            f"Time series has {length} values but an AR({order}) model needs at least {order + 1}"
        )


class NotTrainedError(BurgError, RuntimeError):
    """Prediction was requested before a successful train()."""


class DegenerateRecursionError(BurgError, ArithmeticError):
    """
    The Burg recursion hit a vanishing (or non-finite) prediction-error energy.

    Continuing would divide by ~0 and poison every coefficient with Inf/NaN.
    """

    def __init__(self, step: int, energy: float, reflection: Optional[float] = None):
        self.step = step
        self.energy = energy
        self.reflection = reflection
        detail = f"error energy {energy!r}"
        if reflection is not None:
            detail += f", reflection coefficient {reflection!r}"
        super().__init__(f"Burg recursion degenerated at step {step + 1} ({detail})")
