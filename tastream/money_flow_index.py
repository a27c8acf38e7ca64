"""Money flow index."""

from __future__ import annotations

import dataclasses
import math
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, ClassVar

from .core import Candle, IndicatorResult, ParameterParseError, Window, WrongConfigError
from .cross import Cross


def _parse_period(text: str) -> int:
    period = int(text)
    if period < 0:
        raise ValueError(f"period must not be negative: {text!r}")
    return period


_PARSERS: dict[str, Callable[[str], Any]] = {
    "period": _parse_period,
    "zone": float,
}


def _flows(candle: Candle, previous: Candle) -> tuple[float, float]:
    """Positive and negative money flow of ``candle`` relative to ``previous``."""
    tp1 = candle.tp()
    tp2 = previous.tp()
    return (float(tp1 > tp2) * candle.volume, float(tp1 < tp2) * candle.volume)


@dataclass
class MoneyFlowIndex:
    """Money flow index configuration.

    Produces three values, ``upper bound``, ``MFI`` and ``lower bound``, and
    two signals: on entering a zone (buy when crossing the lower bound
    downwards, sell when crossing the upper bound upwards) and on leaving it
    (buy when crossing the lower bound upwards, sell when crossing the upper
    bound downwards).
    """

    period: int = 14
    zone: float = 0.2

    NAME: ClassVar[str] = "MoneyFlowIndex"

    def validate(self) -> bool:
        return 0.0 <= self.zone <= 0.5

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
        return (3, 2)

    def init(self, candle: Candle) -> MoneyFlowIndexInstance:
        if not self.validate():
            raise WrongConfigError()
        return MoneyFlowIndexInstance(dataclasses.replace(self), candle)


class MoneyFlowIndexInstance:
    """Running state of a :class:`MoneyFlowIndex`."""

    def __init__(self, config: MoneyFlowIndex, candle: Candle) -> None:
        self.config = config
        self._window: Window[Candle] = Window(config.period, candle)
        self._prev_candle = candle
        self._last_prev_candle = candle
        self._pmf = 0.0
        self._nmf = 0.0
        self._cross_lower = Cross()
        self._cross_upper = Cross()

    def next(self, candle: Candle) -> IndicatorResult:
        pos, neg = _flows(candle, self._prev_candle)
        last_candle = self._window.push(candle)
        left_pos, left_neg = _flows(last_candle, self._last_prev_candle)

        self._last_prev_candle = last_candle
        self._prev_candle = candle

        self._pmf += pos - left_pos
        self._nmf += neg - left_neg

        mfr = 1.0 if self._nmf == 0.0 else self._pmf / self._nmf
        denominator = 1.0 + mfr
        if denominator == 0.0:
            value = -math.copysign(math.inf, denominator) + 1.0
        else:
            value = 1.0 - 1.0 / denominator

        upper = 1.0 - self.config.zone
        lower = self.config.zone

        cross_upper = self._cross_upper.next(value, upper)
        cross_lower = self._cross_lower.next(value, lower)

        enters_zone = int(cross_lower < 0) - int(cross_upper > 0)
        leaves_zone = int(cross_lower > 0) - int(cross_upper < 0)

        return IndicatorResult(
            values=(upper, value, lower),
            signals=(enters_zone, leaves_zone),
        )