"""Exponential moving averages and a compact description of a moving average."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Protocol

from .core import ParameterParseError, WrongMethodParametersError


def _check_length(length: int) -> int:
    if length < 1:
        raise WrongMethodParametersError(f"moving average length must be > 0, got {length}")
    return length


class MovingAverage(Protocol):
    """Anything that smooths a stream of values one step at a time."""

    def next(self, value: float) -> float: ...

    def peek(self) -> float: ...


class EMA:
    """Exponential moving average of a given length."""

    def __init__(self, length: int, value: float) -> None:
        _check_length(length)
        self.alpha = 2.0 / (length + 1)
        self._value = float(value)

    def next(self, value: float) -> float:
        self._value += (value - self._value) * self.alpha
        return self._value

    def peek(self) -> float:
        """Return the last calculated value."""
        return self._value


class DMA:
    """EMA applied to an EMA."""

    def __init__(self, length: int, value: float) -> None:
        _check_length(length)
        self._ema = EMA(length, value)
        self._dma = EMA(length, value)

    def next(self, value: float) -> float:
        return self._dma.next(self._ema.next(value))

    def peek(self) -> float:
        return self._dma.peek()


class TMA:
    """EMA applied three times in a row."""

    def __init__(self, length: int, value: float) -> None:
        _check_length(length)
        self._dma = DMA(length, value)
        self._tma = EMA(length, value)

    def next(self, value: float) -> float:
        return self._tma.next(self._dma.next(value))

    def peek(self) -> float:
        return self._tma.peek()


class DEMA:
    """Double exponential moving average: ``2 * ema - dma``."""

    def __init__(self, length: int, value: float) -> None:
        _check_length(length)
        self._ema = EMA(length, value)
        self._dma = EMA(length, value)

    def next(self, value: float) -> float:
        self._dma.next(self._ema.next(value))
        return self.peek()

    def peek(self) -> float:
        return self._ema.peek() * 2.0 - self._dma.peek()


class TEMA:
    """Triple exponential moving average: ``3 * (ema - dma) + tma``."""

    def __init__(self, length: int, value: float) -> None:
        _check_length(length)
        self._ema = EMA(length, value)
        self._dma = EMA(length, value)
        self._tma = EMA(length, value)

    def next(self, value: float) -> float:
        self._tma.next(self._dma.next(self._ema.next(value)))
        return self.peek()

    def peek(self) -> float:
        return (self._ema.peek() - self._dma.peek()) * 3.0 + self._tma.peek()


class MovingAverageKind(enum.Enum):
    """The moving averages a :class:`MovingAverageSpec` can describe."""

    EMA = "ema"
    DMA = "dma"
    TMA = "tma"
    DEMA = "dema"
    TEMA = "tema"


_FACTORIES: dict[MovingAverageKind, type] = {
    MovingAverageKind.EMA: EMA,
    MovingAverageKind.DMA: DMA,
    MovingAverageKind.TMA: TMA,
    MovingAverageKind.DEMA: DEMA,
    MovingAverageKind.TEMA: TEMA,
}


@dataclass(frozen=True)
class MovingAverageSpec:
    """A moving average kind with its period, written as text like ``"ema-12"``."""

    kind: MovingAverageKind
    period: int

    @classmethod
    def parse(cls, text: str) -> MovingAverageSpec:
        """Parse ``"<kind>-<period>"``, the kind case-insensitively."""
        name, sep, period_text = text.strip().partition("-")
        if not sep:
            raise ParameterParseError("ma", text)
        try:
            kind = MovingAverageKind(name.lower())
            period = int(period_text)
        except ValueError:
            raise ParameterParseError("ma", text) from None
        if period < 0:
            raise ParameterParseError("ma", text)
        return cls(kind, period)

    def create(self, value: float) -> MovingAverage:
        """Create the described moving average, starting from ``value``."""
        return _FACTORIES[self.kind](self.period, value)

    def is_similar_to(self, other: MovingAverageSpec) -> bool:
        """Return True when both describe the same kind of moving average."""
        return self.kind is other.kind

    def __str__(self) -> str:
        return f"{self.kind.value}-{self.period}"