"""Klinger volume oscillator."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import ClassVar

from .core import Candle, IndicatorResult, ParameterParseError, WrongConfigError, sign
from .cross import Cross
from .moving_averages import MovingAverageKind, MovingAverageSpec

_NAMES = ("ma1", "ma2", "signal")


@dataclass
class KlingerVolumeOscillator:
    """Klinger volume oscillator configuration.

    Produces two values, ``main`` and ``signal line``, and two signals:
    ``main`` crossing zero, and ``main`` crossing the signal line.
    """

    ma1: MovingAverageSpec = MovingAverageSpec(MovingAverageKind.EMA, 34)
    ma2: MovingAverageSpec = MovingAverageSpec(MovingAverageKind.EMA, 55)
    signal: MovingAverageSpec = MovingAverageSpec(MovingAverageKind.EMA, 13)

    NAME: ClassVar[str] = "KlingerVolumeOscillator"

    def validate(self) -> bool:
        return (
            self.ma1.is_similar_to(self.ma2)
            and self.ma1.period > 1
            and self.signal.period > 1
            and self.ma1.period < self.ma2.period
        )

    def set(self, name: str, value: str) -> None:
        """Set a parameter by name from its text value."""
        if name not in _NAMES:
            raise ParameterParseError(name, value)
        try:
            parsed = MovingAverageSpec.parse(value)
        except ValueError:
            raise ParameterParseError(name, value) from None
        setattr(self, name, parsed)

    def size(self) -> tuple[int, int]:
        """Return the number of values and signals produced per step."""
        return (2, 2)

    def init(self, candle: Candle) -> KlingerVolumeOscillatorInstance:
        if not self.validate():
            raise WrongConfigError()
        return KlingerVolumeOscillatorInstance(dataclasses.replace(self), candle)


class KlingerVolumeOscillatorInstance:
    """Running state of a :class:`KlingerVolumeOscillator`."""

    def __init__(self, config: KlingerVolumeOscillator, candle: Candle) -> None:
        self.config = config
        self._ma1 = config.ma1.create(0.0)
        self._ma2 = config.ma2.create(0.0)
        self._ma3 = config.signal.create(0.0)
        self._cross1 = Cross()
        self._cross2 = Cross()
        self._last_tp = candle.tp()

    def next(self, candle: Candle) -> IndicatorResult:
        tp = candle.tp()
        direction = tp - self._last_tp
        self._last_tp = tp

        vol = sign(direction) * candle.volume
        ko = self._ma1.next(vol) - self._ma2.next(vol)
        sigline = self._ma3.next(ko)

        s1 = self._cross1.next(ko, 0.0)
        s2 = self._cross2.next(ko, sigline)
        return IndicatorResult(values=(ko, sigline), signals=(s1, s2))