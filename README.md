# tastream

Streaming technical analysis for OHLCV time series. You feed each method and
indicator one value or one candle at a time. It keeps a small amount of state
and returns its result for that step at once, without going back over earlier
data.

## Installation

```
pip install tastream
```

The package is pure Python and has no runtime dependencies. It needs Python
3.10 or later.

## Contents

### Core types (`tastream.core`)

- `Candle` is a frozen OHLCV bar with these members:
  - the derived prices `tp()`, `hl2()`, `ohlc4()` and `clv()`;
  - `source(Source)`, which picks one price;
  - `+`, which merges a later bar into an earlier one. The result keeps the
    first open and the last close, takes the highest high and the lowest low,
    and adds the volumes.
- `Source` chooses the price an indicator reads. The choices are `OPEN`,
  `HIGH`, `LOW`, `CLOSE`, `VOLUME`, `HL2`, `TP` and `OHLC4`.
  `Source.parse(text)` ignores case and also accepts `"hlc3"` for `TP`.
- `Window` is a fixed-size sliding window. `push(value)` returns the value
  that dropped out of the window. Indexing and iteration go from newest to
  oldest.
- `IndicatorResult` holds the `values` (floats) and `signals` (ints) that an
  indicator returns for one step. A positive signal means buy, a negative one
  means sell, and 0 means no signal.
- `sign(value)` returns 1.0, -1.0 or 0.0.
- Errors: `TaError`, a subclass of `ValueError`, is the base class. Below it
  are `WrongConfigError`, `WrongMethodParametersError` and
  `ParameterParseError`.

### Methods

- `tastream.cross`:
  - `CrossAbove` and `CrossUnder` return 1 on a cross and 0 otherwise.
  - `Cross` returns 1 on an upward cross, -1 on a downward cross and 0
    otherwise.
- `tastream.moving_averages`:
  - `EMA`, `DMA`, `TMA`, `DEMA` and `TEMA`, each with `next` and `peek`.
  - `MovingAverageSpec`, which describes one of these averages as text such
    as `"ema-12"`. It provides `parse`, `create(value)` and `is_similar_to`.
- `tastream.methods`:
  - `Derivative`, also available as `Differential`.
  - `Conv`, a convolution moving average with user-given weights. It accepts
    1 to 255 weights.
- `tastream.candles`:
  - `ADI`, the accumulation/distribution index. A length of 0 makes it sum
    over the whole series.
  - `HeikinAshi`.
  - `CollapseTimeframe`.

### Indicators

Each indicator has a configuration class and an instance class:

- `tastream.parabolic_sar`: `ParabolicSAR` (alias `ParabolicStopAndReverse`)
- `tastream.macd`: `MACD` (alias `MovingAverageConvergenceDivergence`)
- `tastream.klinger`: `KlingerVolumeOscillator`
- `tastream.rsi`: `RelativeStrengthIndex` (alias `RSI`)
- `tastream.money_flow_index`: `MoneyFlowIndex`

## Using methods

Create a method from its parameters and a first value, which sets its starting
state. Then call `next` once for each new value.

```python
from tastream.moving_averages import EMA

ema = EMA(3, 3.0)
ema.next(3.0)
ema.next(6.0)
assert ema.next(9.0) == 6.75
assert ema.next(12.0) == 9.375
```

Cross detection takes the two series as two separate arguments:

```python
from tastream.cross import Cross

cross = Cross(0.0, 5.0)
for value, base in [(1.0, 3.0), (2.0, 1.8), (3.0, 2.9), (4.0, 4.1)]:
    print(cross.next(value, base))   # 0, 1, 0, -1
```

To collapse bars into a longer timeframe:

```python
from tastream.core import Candle
from tastream.candles import CollapseTimeframe

collapser = CollapseTimeframe(2)
assert collapser.next(Candle(10.0, 15.0, 5.0, 12.0, 1000.0)) is None
bar = collapser.next(Candle(12.1, 17.0, 6.0, 13.0, 2000.0))
# bar: open 10.0, high 17.0, low 5.0, close 13.0, volume 3000.0
```

Invalid parameters, such as a zero length, raise `WrongMethodParametersError`.

## Using indicators

An indicator configuration is a dataclass, and every field has a default.

1. Change fields directly, or by name from text with `set(name, value)`. An
   unknown name or a value that cannot be parsed raises `ParameterParseError`.
2. Call `init(candle)` with the first candle. It checks the configuration and
   raises `WrongConfigError` if the configuration is invalid.
3. Call `next(candle)` on the returned instance once for each bar. Each call
   returns an `IndicatorResult`.

```python
from tastream.core import Candle
from tastream.macd import MACD

config = MACD()
config.set("ma1", "dema-4")
config.set("signal", "tema-5")

first = Candle(10.0, 11.0, 9.5, 10.5, 1200.0)
macd = config.init(first)

for candle in [first, Candle(10.5, 11.2, 10.1, 11.0, 900.0)]:
    result = macd.next(candle)
    print(result.values, result.signals)
```

`size()` returns a `(values, signals)` pair with the number of values and
signals each step produces. `validate()` reports whether the current
configuration is acceptable, and does not raise.

## Limitations

- The moving averages are limited to the exponential family: EMA, DMA, TMA,
  DEMA and TEMA. Simple, weighted and median averages are not provided, and
  `MovingAverageSpec` accepts only those five kinds.
- Only the five indicators listed above are included.
- The package is a library only. It has no command-line tool and does not
  load or store market data.

## Running the tests

```
pip install -e ".[test]"
pytest
```