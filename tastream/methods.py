"""Windowed methods over value series: derivative and convolution average."""

from __future__ import annotations

import math
from collections.abc import Sequence

from .core import Window, WrongMethodParametersError

MAX_WEIGHTS = 255


class Derivative:
    """Change of the series over ``length`` steps, divided by ``length``."""

    def __init__(self, length: int, value: float) -> None:
        if length < 1:
            raise WrongMethodParametersError(f"derivative length must be > 0, got {length}")
        self._divider = 1.0 / length
        self._window: Window[float] = Window(length, float(value))

    def next(self, value: float) -> float:
        previous = self._window.push(value)
        return (value - previous) * self._divider


Differential = Derivative


class Conv:
    """Convolution moving average with the given weights.

    The last weight applies to the newest value.
    """

    def __init__(self, weights: Sequence[float], value: float) -> None:
        weights = [float(w) for w in weights]
        if not 1 <= len(weights) <= MAX_WEIGHTS:
            raise WrongMethodParametersError(
                f"weights count must be in [1; {MAX_WEIGHTS}], got {len(weights)}"
            )
        total = math.fsum(weights)
        self._weights = weights
        self._wsum_invert = 1.0 / total if total else math.inf
        self._window: Window[float] = Window(len(weights), float(value))

    def next(self, value: float) -> float:
        self._window.push(value)
        return self.peek()

    def peek(self) -> float:
        """Return the weighted average of the current window."""
        total = sum(v * w for v, w in zip(self._window, reversed(self._weights)))
        return total * self._wsum_invert