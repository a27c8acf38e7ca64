"""Relative strength index."""

from __future__ import annotations

import dataclasses
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, ClassVar

from .core import Candle, IndicatorResult, ParameterParseError, Source, WrongConfigError
from .cross import Cross
from .moving_averages import MovingAverageKind, MovingAverageSpec

_PARSERS: dict[str, Callable[[str], Any]] = {
    "ma": MovingAverageSpec.parse,
    "zone": float,
    "source": Source.parse,
}


@dataclass
class RelativeStrengthIndex:
    """RSI configuration.

    Produces one value in [0.0; 1.0] and two signals: on entering an
    over-zone (sell when crossing the upper zone upwards, buy when crossing
    the lower zone downwards) and on leaving it (sell when crossing the upper
    zone downwards, buy when crossing the lower zone upwards).
    """

    ma: MovingAverageSpec = MovingAverageSpec(MovingAverageKind.EMA, 14)
    zone: float = 0.3
    source: Source = Source.CLOSE

    NAME: ClassVar[str] = "RelativeStrengthIndex"

    def validate(self) -> bool:
        return self.ma.period > 2 and 0.0 < self.zone <= 0.5

    def set(self, name: str, value: str) -> None:
        """Set a parameter by name from its text value."""
        parser = _PARSERS.get(name)
        if parser is None:
            raise ParameterParseError(name, value)
        try:
            parsed = parser(value)
        except ValueError:
            raise ParameterParseError(name, value) from None
        setattr(self, name, parsed)

    def size(self) -> tuple[int, int]:
        """Return the number of values and signals produced per step."""
        return (1, 2)

    def init(self, candle: Candle) -> RelativeStrengthIndexInstance:
        if not self.validate():
            raise WrongConfigError()
        return RelativeStrengthIndexInstance(dataclasses.replace(self), candle)


RSI = RelativeStrengthIndex


class RelativeStrengthIndexInstance:
    """Running state of a :class:`RelativeStrengthIndex`."""

    def __init__(self, config: RelativeStrengthIndex, candle: Candle) -> None:
        self.config = config
        self._previous = candle.source(config.source)
        self._posma = config.ma.create(0.0)
        self._negma = config.ma.create(0.0)
        self._cross_upper = Cross(0.5, 1.0 - config.zone)
        self._cross_lower = Cross(0.5, config.zone)

    def next(self, candle: Candle) -> IndicatorResult:
        src = candle.source(self.config.source)
        change = src - self._previous
        self._previous = src

        pos = self._posma.next(max(change, 0.0))
        neg = -self._negma.next(min(change, 0.0))

        if pos != 0.0 or neg != 0.0:
            value = pos / (pos + neg)
        else:
            value = 0.5

        zone = self.config.zone
        oversold = self._cross_lower.next(value, zone)
        overbought = self._cross_upper.next(value, 1.0 - zone)

        signal1 = int(oversold < 0) - int(overbought > 0)
        signal2 = int(oversold > 0) - int(overbought < 0)
        return IndicatorResult(values=(value,), signals=(signal1, signal2))