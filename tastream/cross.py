"""Detection of two series crossing each other."""

from __future__ import annotations


class CrossAbove:
    """Reports when ``value`` crosses ``base`` upwards."""

    def __init__(self, value: float = 0.0, base: float = 0.0) -> None:
        self._last_delta = value - base

    def binary(self, value: float, base: float) -> bool:
        """Return True when ``value`` crossed ``base`` upwards on this step."""
        last_delta = self._last_delta
        current_delta = value - base
        self._last_delta = current_delta
        return last_delta < 0.0 and current_delta >= 0.0

    def next(self, value: float, base: float) -> int:
        """Return 1 on an upward cross, otherwise 0."""
        return int(self.binary(value, base))


class CrossUnder:
    """Reports when ``value`` crosses ``base`` downwards."""

    def __init__(self, value: float = 0.0, base: float = 0.0) -> None:
        self._last_delta = value - base

    def binary(self, value: float, base: float) -> bool:
        """Return True when ``value`` crossed ``base`` downwards on this step."""
        last_delta = self._last_delta
        current_delta = value - base
        self._last_delta = current_delta
        return last_delta > 0.0 and current_delta <= 0.0

    def next(self, value: float, base: float) -> int:
        """Return 1 on a downward cross, otherwise 0."""
        return int(self.binary(value, base))


class Cross:
    """Reports crosses in either direction: 1 upwards, -1 downwards, 0 otherwise."""

    def __init__(self, value: float = 0.0, base: float = 0.0) -> None:
        self._up = CrossAbove(value, base)
        self._down = CrossUnder(value, base)

    def next(self, value: float, base: float) -> int:
        up = self._up.binary(value, base)
        down = self._down.binary(value, base)
        return int(up) - int(down)