"""Describe figures of curves, error bars, candlesticks and filled curves and
render them as gnuplot scripts with embedded binary data."""

__version__ = "0.1.0"