"""Methods that read whole candles: accumulation/distribution, Heikin Ashi, timeframe collapsing."""

from __future__ import annotations

from .core import Candle, Window, WrongMethodParametersError


class ADI:
    """Accumulation/distribution index.

    Sums ``clv * volume`` of every candle. With ``length == 0`` the sum runs over
    the whole series; otherwise only over the last ``length`` candles.
    """

    def __init__(self, length: int, candle: Candle) -> None:
        if length < 0:
            raise WrongMethodParametersError(f"ADI length must not be negative, got {length}")
        self._windowed = length > 0
        if self._windowed:
            clvv = candle.clv() * candle.volume
            self._sum = clvv * length
            self._window: Window[float] = Window(length, clvv)
        else:
            self._sum = 0.0
            self._window = Window(0, 0.0)

    def next(self, candle: Candle) -> float:
        clvv = candle.clv() * candle.volume
        self._sum += clvv
        if self._windowed:
            self._sum -= self._window.push(clvv)
        return self.peek()

    def peek(self) -> float:
        """Return the last calculated value."""
        return self._sum


class HeikinAshi:
    """Converts ordinary candles into Heikin Ashi candles.

    The open of every produced candle is taken from the candle given at creation.
    """

    def __init__(self, candle: Candle) -> None:
        self._prev = Candle(candle.open, candle.high, candle.low, candle.close, candle.volume)

    def next(self, candle: Candle) -> Candle:
        open_ = (self._prev.open + self._prev.close) * 0.5
        return Candle(
            open=open_,
            high=max(candle.high, open_),
            low=min(candle.low, open_),
            close=candle.ohlc4(),
            volume=candle.volume,
        )


class CollapseTimeframe:
    """Merges every ``period`` consecutive candles into one."""

    def __init__(self, period: int) -> None:
        if period < 1:
            raise WrongMethodParametersError(f"period must be > 0, got {period}")
        self._period = period
        self._index = 0
        self._current: Candle | None = None

    def next(self, candle: Candle) -> Candle | None:
        """Feed one candle; return the merged candle when a group completes, else None."""
        self._current = candle if self._current is None else self._current + candle
        self._index += 1
        if self._index == self._period:
            self._index = 0
            merged, self._current = self._current, None
            return merged
        return None