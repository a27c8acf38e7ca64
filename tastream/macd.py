"""Moving average convergence/divergence indicator."""

from __future__ import annotations

import dataclasses
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, ClassVar

from .core import Candle, IndicatorResult, ParameterParseError, Source, WrongConfigError
from .cross import Cross
from .moving_averages import MovingAverageKind, MovingAverageSpec

_PARSERS: dict[str, Callable[[str], Any]] = {
    "ma1": MovingAverageSpec.parse,
    "ma2": MovingAverageSpec.parse,
    "signal": MovingAverageSpec.parse,
    "source": Source.parse,
}


@dataclass
class MACD:
    """MACD configuration.

    Produces two values, ``MACD`` and ``signal line``, and two signals:
    ``MACD`` crossing the signal line, and ``MACD`` crossing zero
    (1 upwards, -1 downwards, 0 otherwise).
    """

    ma1: MovingAverageSpec = MovingAverageSpec(MovingAverageKind.EMA, 12)
    ma2: MovingAverageSpec = MovingAverageSpec(MovingAverageKind.EMA, 26)
    signal: MovingAverageSpec = MovingAverageSpec(MovingAverageKind.EMA, 9)
    source: Source = Source.CLOSE

    NAME: ClassVar[str] = "MACD"

    def validate(self) -> bool:
        return (
            self.ma1.period < self.ma2.period
            and self.ma1.period > 1
            and self.signal.period > 1
        )

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
        return (2, 2)

    def init(self, candle: Candle) -> MACDInstance:
        if not self.validate():
            raise WrongConfigError()
        return MACDInstance(dataclasses.replace(self), candle)


MovingAverageConvergenceDivergence = MACD


class MACDInstance:
    """Running state of a :class:`MACD`."""

    def __init__(self, config: MACD, candle: Candle) -> None:
        self.config = config
        src = candle.source(config.source)
        self._ma1 = config.ma1.create(src)
        self._ma2 = config.ma2.create(src)
        self._ma3 = config.signal.create(0.0)
        self._cross1 = Cross()
        self._cross2 = Cross()

    def next(self, candle: Candle) -> IndicatorResult:
        src = candle.source(self.config.source)
        macd = self._ma1.next(src) - self._ma2.next(src)
        sigline = self._ma3.next(macd)
        signal1 = self._cross1.next(macd, sigline)
        signal2 = self._cross2.next(macd, 0.0)
        return IndicatorResult(values=(macd, sigline), signals=(signal1, signal2))