"""Parabolic stop and reverse indicator."""

from __future__ import annotations

from dataclasses import dataclass

from .core import Candle, IndicatorResult, ParameterParseError, WrongConfigError


@dataclass
class ParabolicSAR:
    """Parabolic SAR configuration.

    Produces two values, ``SAR`` and ``trend`` (-1.0 or 1.0), and one signal:
    the new trend whenever the trend changes, otherwise 0.
    """

    af_step: float = 0.02
    af_max: float = 0.2

    NAME = "ParabolicSAR"

    def validate(self) -> bool:
        return self.af_step < self.af_max

    def set(self, name: str, value: str) -> None:
        """Set a parameter by name from its text value."""
        if name not in ("af_step", "af_max"):
            raise ParameterParseError(name, value)
        try:
            parsed = float(value)
        except ValueError:
            raise ParameterParseError(name, value) from None
        setattr(self, name, parsed)

    def size(self) -> tuple[int, int]:
        """Return the number of values and signals produced per step."""
        return (2, 1)

    def init(self, candle: Candle) -> ParabolicSARInstance:
        if not self.validate():
            raise WrongConfigError()
        return ParabolicSARInstance(self, candle)


ParabolicStopAndReverse = ParabolicSAR


class ParabolicSARInstance:
    """Running state of a :class:`ParabolicSAR`."""

    def __init__(self, config: ParabolicSAR, candle: Candle) -> None:
        self.config = config
        self._trend = 1
        self._trend_inc = 1
        self._low = candle.low
        self._high = candle.high
        self._sar = candle.low
        self._prev_high = candle.high
        self._prev_low = candle.low
        self._prev_trend = 0

    def next(self, candle: Candle) -> IndicatorResult:
        if self._trend > 0:
            if self._high < candle.high:
                self._high = candle.high
                self._trend_inc += 1
            if candle.low < self._sar:
                self._trend = -self._trend
                self._low = candle.low
                self._trend_inc = 1
                self._sar = self._high
        elif self._trend < 0:
            if self._low > candle.low:
                self._low = candle.low
                self._trend_inc += 1
            if candle.high > self._sar:
                self._trend = -self._trend
                self._high = candle.high
                self._trend_inc = 1
                self._sar = self._low

        trend = self._trend
        sar = self._sar

        af = min(self.config.af_max, self.config.af_step * self._trend_inc)

        if self._trend > 0:
            self._sar = af * (self._high - self._sar) + self._sar
            self._sar = min(self._sar, candle.low, self._prev_low)
        elif self._trend < 0:
            self._sar = af * (self._low - self._sar) + self._sar
            self._sar = max(self._sar, candle.high, self._prev_high)

        self._prev_high = candle.high
        self._prev_low = candle.low

        signal = trend if self._prev_trend != trend else 0
        self._prev_trend = trend

        return IndicatorResult(values=(sar, float(trend)), signals=(signal,))