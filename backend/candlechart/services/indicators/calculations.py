"""
Technical Indicator Calculations

Pure Python/NumPy implementations of the chart indicators.
Each function looks at the whole sequence it is given and returns the value
for its last element, or None when the sequence is too short.
Callers decide which prefix of the series to pass in.
"""

from typing import Optional, Sequence

import numpy as np


def _as_array(values: Sequence[float]) -> np.ndarray:
    return np.asarray(values, dtype=float)


# =============================================================================
# MOVING AVERAGES
# =============================================================================


def sma(values: Sequence[float], period: int) -> Optional[float]:
    """Simple Moving Average of the trailing `period` values."""
    data = _as_array(values)
    if len(data) < period:
        return None

    return float(np.sum(data[-period:]) / period)


def ema(values: Sequence[float], period: int) -> Optional[float]:
    """
    Exponential Moving Average.

    Seeded with the first value of the input (not with an SMA of the first
    `period` values) and smoothed over every following value.
    """
    data = _as_array(values)
    if len(data) < period:
        return None

    multiplier = 2 / (period + 1)
    result = data[0]
    for value in data[1:]:
        result = (value * multiplier) + (result * (1 - multiplier))

    return float(result)


# =============================================================================
# VOLATILITY INDICATORS
# =============================================================================


def bollinger_bands(
    values: Sequence[float], period: int = 20, std_dev: float = 2.0
) -> Optional[tuple[float, float, float]]:
    """
    Bollinger Bands over the trailing window (population standard deviation).

    Returns: (upper, middle, lower)
    """
    data = _as_array(values)
    if len(data) < period:
        return None

    middle = sma(data, period)
    window = data[-period:]
    deviation = float(np.sqrt(np.sum((window - middle) ** 2) / period))

    upper = middle + (std_dev * deviation)
    lower = middle - (std_dev * deviation)

    return upper, middle, lower


# =============================================================================
# MOMENTUM INDICATORS
# =============================================================================


def macd(
    values: Sequence[float],
    fast_period: int = 12,
    slow_period: int = 26,
    signal_period: int = 9,
) -> Optional[tuple[float, Optional[float], float]]:
    """
    MACD (Moving Average Convergence Divergence).

    The signal line is the EMA of the current MACD value alone, not of a
    MACD history. One sample never reaches `signal_period`, so the signal is
    always None and the histogram equals the MACD line.

    Returns: (macd_line, signal_line, histogram)
    """
    data = _as_array(values)
    if len(data) < slow_period:
        return None

    macd_line = ema(data, fast_period) - ema(data, slow_period)
    signal_line = ema([macd_line], signal_period)
    histogram = macd_line - (signal_line if signal_line is not None else 0.0)

    return macd_line, signal_line, histogram


def rsi(values: Sequence[float], period: int = 14) -> Optional[float]:
    """
    Relative Strength Index.

    Average gain/loss are plain means of the trailing `period` changes
    (no Wilder smoothing). No losses in the window gives exactly 100.
    """
    data = _as_array(values)
    if len(data) < period + 1:
        return None

    deltas = np.diff(data)
    gains = np.where(deltas > 0, deltas, 0.0)
    losses = np.where(deltas > 0, 0.0, -deltas)

    if len(gains) < period:
        return None

    avg_gain = sma(gains, period)
    avg_loss = sma(losses, period)

    if avg_loss == 0:
        return 100.0

    rs = avg_gain / avg_loss
    return float(100 - (100 / (1 + rs)))
