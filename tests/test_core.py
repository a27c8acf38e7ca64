import math

import pytest

from tastream.core import (
    Candle,
    IndicatorResult,
    ParameterParseError,
    Source,
    TaError,
    Window,
    WrongConfigError,
    WrongMethodParametersError,
    sign,
)


def test_candle_add_collapses_bars():
    first = Candle(10.0, 15.0, 5.0, 12.0, 1000.0)
    second = Candle(12.1, 17.0, 6.0, 13.0, 2000.0)
    merged = first + second
    assert merged.open == 10.0
    assert merged.high == 17.0
    assert merged.low == 5.0
    assert merged.close == 13.0
    assert merged.volume == 3000.0


def test_candle_add_rejects_other_types():
    with pytest.raises(TypeError):
        Candle(1.0, 2.0, 0.5, 1.5) + 3


def test_clv_bounds():
    assert Candle(5.0, 10.0, 2.0, 10.0).clv() == 1.0
    assert Candle(5.0, 10.0, 2.0, 2.0).clv() == -1.0
    assert Candle(5.0, 5.0, 5.0, 5.0).clv() == 0.0


def test_averages_of_flat_candle_equal_its_price():
    candle = Candle(7.25, 7.25, 7.25, 7.25, 100.0)
    assert math.isclose(candle.tp(), 7.25)
    assert math.isclose(candle.hl2(), 7.25)
    assert math.isclose(candle.ohlc4(), 7.25)


def test_source_selects_fields():
    candle = Candle(1.0, 4.0, 0.5, 2.0, 300.0)
    assert candle.source(Source.OPEN) == candle.open
    assert candle.source(Source.HIGH) == candle.high
    assert candle.source(Source.LOW) == candle.low
    assert candle.source(Source.CLOSE) == candle.close
    assert candle.source(Source.VOLUME) == candle.volume
    assert candle.source(Source.HL2) == candle.hl2()
    assert candle.source(Source.TP) == candle.tp()
    assert candle.source(Source.OHLC4) == candle.ohlc4()


@pytest.mark.parametrize("source", list(Source))
def test_source_parse_round_trip(source):
    assert Source.parse(source.value) is source
    assert Source.parse(source.value.upper()) is source


def test_source_parse_alias_and_error():
    assert Source.parse("hlc3") is Source.TP
    with pytest.raises(ParameterParseError) as info:
        Source.parse("nonsense")
    assert info.value.name == "source"
    assert info.value.value == "nonsense"


def test_errors_share_base():
    with pytest.raises(TaError):
        Source.parse("nonsense")
    with pytest.raises(ValueError):
        Window(-1, 0.0)
    assert issubclass(WrongConfigError, TaError)
    error = ParameterParseError("a", "b")
    assert error.name == "a"
    assert error.value == "b"


def test_window_push_returns_value_from_size_steps_ago():
    window = Window(3, 0.0)
    pushed = [1.0, 2.0, 3.0, 4.0, 5.0]
    out = [window.push(v) for v in pushed]
    assert out == [0.0, 0.0, 0.0, 1.0, 2.0]
    assert len(window) == 3


def test_window_newest_first():
    window = Window(3, 0)
    for v in (1, 2, 3):
        window.push(v)
    assert list(window) == [3, 2, 1]
    assert window[0] == 3
    assert window[2] == 1


def test_empty_window_passes_values_through():
    window = Window(0, 1.0)
    assert window.push(5.0) == 5.0
    assert len(window) == 0


def test_window_negative_size():
    with pytest.raises(WrongMethodParametersError):
        Window(-1, 0.0)


def test_indicator_result_stores_tuples():
    result = IndicatorResult([1.5, 2.5], [1, -1])
    assert result.values == (1.5, 2.5)
    assert result.signals == (1, -1)


@pytest.mark.parametrize("value,expected", [(3.2, 1.0), (-0.1, -1.0), (0.0, 0.0)])
def test_sign(value, expected):
    assert sign(value) == expected