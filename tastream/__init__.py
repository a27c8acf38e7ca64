"""Streaming technical analysis: candles, crosses, exponential moving averages and a few indicators."""

__version__ = "0.1.0"

__all__ = [
    "candles",
    "core",
    "cross",
    "klinger",
    "macd",
    "methods",
    "money_flow_index",
    "moving_averages",
    "parabolic_sar",
    "rsi",
]