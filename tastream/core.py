"""Core types shared by methods and indicators: errors, candles, windows and results."""

from __future__ import annotations

import enum
from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


class TaError(ValueError):
    """Base class for every error raised by this package."""


class WrongConfigError(TaError):
    """An indicator configuration failed validation."""

    def __init__(self, message: str = "wrong indicator configuration") -> None:
        super().__init__(message)


class WrongMethodParametersError(TaError):
    """A method was created with parameters it cannot work with."""

    def __init__(self, message: str = "wrong method parameters") -> None:
        super().__init__(message)


class ParameterParseError(TaError):
    """A named parameter could not be parsed from its text value."""

    def __init__(self, name: str, value: str) -> None:
        super().__init__(f"cannot parse parameter {name!r} from {value!r}")
        self.name = name
        self.value = value


class Source(enum.Enum):
    """Which value of a candle an indicator reads."""

    OPEN = "open"
    HIGH = "high"
    LOW = "low"
    CLOSE = "close"
    VOLUME = "volume"
    HL2 = "hl2"
    TP = "tp"
    OHLC4 = "ohlc4"

    @classmethod
    def parse(cls, text: str) -> Source:
        """Parse a source name, case-insensitively; "hlc3" is accepted for TP."""
        key = text.strip().lower()
        if key == "hlc3":
            key = "tp"
        try:
            return cls(key)
        except ValueError:
            raise ParameterParseError("source", text) from None


@dataclass(frozen=True)
class Candle:
    """One OHLCV bar."""

    open: float
    high: float
    low: float
    close: float
    volume: float = 0.0

    def tp(self) -> float:
        """Typical price: mean of high, low and close."""
        return (self.high + self.low + self.close) / 3.0

    def hl2(self) -> float:
        """Mean of high and low."""
        return (self.high + self.low) * 0.5

    def ohlc4(self) -> float:
        """Mean of open, high, low and close."""
        return (self.open + self.high + self.low + self.close) * 0.25

    def clv(self) -> float:
        """Close location value in [-1.0; 1.0]; 0.0 when the bar has no range."""
        if self.high == self.low:
            return 0.0
        return ((self.close - self.low) - (self.high - self.close)) / (self.high - self.low)

    def source(self, source: Source) -> float:
        """Return the value selected by ``source``."""
        match source:
            case Source.OPEN:
                return self.open
            case Source.HIGH:
                return self.high
            case Source.LOW:
                return self.low
            case Source.CLOSE:
                return self.close
            case Source.VOLUME:
                return self.volume
            case Source.HL2:
                return self.hl2()
            case Source.TP:
                return self.tp()
            case Source.OHLC4:
                return self.ohlc4()
        raise TypeError(f"unknown source {source!r}")

    def __add__(self, other: object) -> Candle:
        """Merge a later bar into this one, as when collapsing timeframes."""
        if not isinstance(other, Candle):
            return NotImplemented
        return Candle(
            open=self.open,
            high=max(self.high, other.high),
            low=min(self.low, other.low),
            close=other.close,
            volume=self.volume + other.volume,
        )


class Window(Generic[T]):
    """Fixed-size window of the latest values, indexed and iterated newest first."""

    def __init__(self, size: int, value: T) -> None:
        if size < 0:
            raise WrongMethodParametersError("window size must not be negative")
        self._items: deque[T] = deque([value] * size, maxlen=size)

    def push(self, value: T) -> T:
        """Add a value and return the one that left the window.

        An empty window keeps nothing and hands the value straight back.
        """
        if not self._items.maxlen:
            return value
        oldest = self._items[-1]
        self._items.appendleft(value)
        return oldest

    def __getitem__(self, index: int) -> T:
        return self._items[index]

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Window({list(self._items)!r})"


@dataclass(frozen=True)
class IndicatorResult:
    """Values and signals produced by one indicator step.

    Signals are integers: positive to buy, negative to sell, zero for none.
    """

    values: tuple[float, ...] = ()
    signals: tuple[int, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", tuple(self.values))
        object.__setattr__(self, "signals", tuple(self.signals))


def sign(value: float) -> float:
    """Return 1.0, -1.0 or 0.0 by the sign of ``value``."""
    if value > 0.0:
        return 1.0
    if value < 0.0:
        return -1.0
    return 0.0