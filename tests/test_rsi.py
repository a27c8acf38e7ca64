import math

import pytest

from tastream.core import Candle, ParameterParseError, Source, WrongConfigError
from tastream.moving_averages import MovingAverageKind, MovingAverageSpec
from tastream.rsi import RSI, RelativeStrengthIndex


def _candle(price):
    return Candle(open=price, high=price + 1.0, low=price - 1.0, close=price, volume=1.0)


def test_defaults_follow_source():
    cfg = RelativeStrengthIndex()
    assert cfg.ma == MovingAverageSpec(MovingAverageKind.EMA, 14)
    assert cfg.zone == 0.3
    assert cfg.source is Source.CLOSE
    assert cfg.validate()
    assert cfg.size() == (1, 2)
    assert RSI is RelativeStrengthIndex


def test_constant_input_gives_middle_value():
    candle = _candle(42.0)
    instance = RSI().init(candle)
    for _ in range(20):
        result = instance.next(candle)
        assert result.values == (0.5,)
        assert result.signals == (0, 0)


def test_rising_input_gives_top_and_sell_signal():
    instance = RSI().init(_candle(10.0))
    first = instance.next(_candle(11.0))
    assert first.values[0] == pytest.approx(1.0)
    assert first.signals == (-1, 0)
    for i in range(2, 20):
        result = instance.next(_candle(10.0 + i))
        assert result.values[0] == pytest.approx(1.0)
        assert result.signals == (0, 0)


def test_falling_input_gives_bottom_and_buy_signal():
    instance = RSI().init(_candle(100.0))
    first = instance.next(_candle(99.0))
    assert first.values[0] == pytest.approx(0.0)
    assert first.signals == (1, 0)


def test_values_stay_in_range():
    instance = RSI().init(_candle(50.0))
    seen = set()
    for i in range(300):
        result = instance.next(_candle(50.0 + 10.0 * math.sin(i / 7.0) + math.cos(i)))
        assert 0.0 <= result.values[0] <= 1.0
        seen.update(result.signals)
    assert seen <= {-1, 0, 1}


@pytest.mark.parametrize(
    "cfg",
    [
        RSI(ma=MovingAverageSpec(MovingAverageKind.EMA, 2)),
        RSI(zone=0.0),
        RSI(zone=0.6),
    ],
)
def test_invalid_config_rejected(cfg):
    assert not cfg.validate()
    with pytest.raises(WrongConfigError):
        cfg.init(_candle(1.0))


def test_set_parameters_and_errors():
    cfg = RSI()
    cfg.set("ma", "ema-3")
    cfg.set("zone", "0.25")
    cfg.set("source", "open")
    assert cfg.ma == MovingAverageSpec(MovingAverageKind.EMA, 3)
    assert cfg.zone == 0.25
    assert cfg.source is Source.OPEN
    with pytest.raises(ParameterParseError):
        cfg.set("zone", "wide")
    with pytest.raises(ParameterParseError):
        cfg.set("period", "3")
    assert cfg.zone == 0.25