import math

import pytest

from tastream.core import Candle, ParameterParseError, WrongConfigError
from tastream.money_flow_index import MoneyFlowIndex


def _candle(price, volume=100.0):
    return Candle(open=price, high=price + 1.0, low=price - 1.0, close=price, volume=volume)


def test_defaults_follow_source():
    cfg = MoneyFlowIndex()
    assert cfg.period == 14
    assert cfg.zone == 0.2
    assert cfg.validate()
    assert cfg.size() == (3, 2)


def test_flat_candles_give_middle_value():
    candle = _candle(30.0)
    instance = MoneyFlowIndex().init(candle)
    for _ in range(30):
        result = instance.next(candle)
        upper, value, lower = result.values
        assert value == 0.5
        assert upper == pytest.approx(1.0 - 0.2)
        assert lower == pytest.approx(0.2)
        assert result.signals == (0, 0)


def test_falling_candles_enter_lower_zone():
    instance = MoneyFlowIndex().init(_candle(100.0))
    instance.next(_candle(100.0))
    result = instance.next(_candle(99.0))
    assert result.values[1] == pytest.approx(0.0)
    assert result.signals == (1, 0)


def test_values_stay_in_range():
    instance = MoneyFlowIndex().init(_candle(50.0))
    seen = set()
    for i in range(300):
        result = instance.next(_candle(50.0 + 10.0 * math.sin(i / 6.0), 100.0 + i))
        upper, value, lower = result.values
        assert 0.0 <= value <= 1.0
        assert lower <= upper
        seen.update(result.signals)
    assert seen <= {-1, 0, 1}
    assert seen != {0}


@pytest.mark.parametrize("zone", [-0.1, 0.51])
def test_invalid_zone_rejected(zone):
    cfg = MoneyFlowIndex(zone=zone)
    assert not cfg.validate()
    with pytest.raises(WrongConfigError):
        cfg.init(_candle(1.0))


def test_set_parameters_and_errors():
    cfg = MoneyFlowIndex()
    cfg.set("period", "7")
    cfg.set("zone", "0.5")
    assert cfg.period == 7
    assert cfg.zone == 0.5
    with pytest.raises(ParameterParseError):
        cfg.set("period", "-3")
    with pytest.raises(ParameterParseError):
        cfg.set("period", "1.5")
    with pytest.raises(ParameterParseError) as info:
        cfg.set("source", "close")
    assert info.value.name == "source"
    assert cfg.period == 7