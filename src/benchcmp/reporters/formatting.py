"""String formatting for durations and ratios."""

from __future__ import annotations

import math


def _decimal(n: float) -> str:
    abs_n = abs(n)
    if abs_n < 1:
        return f"{n:.3f}"
    if abs_n < 10:
        return f"{n:.2f}"
    if abs_n < 100:
        return f"{n:.1f}"
    return f"{n:.0f}"


def format_millis(ms: float) -> str:
    """
    Format a duration given in milliseconds with a fitting unit.

    Examples:
        >>> format_millis(0.0005)
        '500ns'
        >>> format_millis(1234)
        '1.23s'
    """
    abs_ms = abs(ms)
    if abs_ms < 0.001:
        return f"{_decimal(ms * 1000 * 1000)}ns"
    if abs_ms < 1:
        return f"{_decimal(ms * 1000)}μs"
    if abs_ms < 1000:
        return f"{_decimal(ms)}ms"
    return f"{_decimal(ms / 1000)}s"


def format_percent(n: float, d: float) -> str:
    """Format ``n`` as a percentage of ``d`` with two decimals."""
    return f"{n * 100 / d:.2f}%"


def _pad(v: int | float) -> str:
    if isinstance(v, float) and v.is_integer():
        v = int(v)
    return f"0{v}" if v < 10 else f"{v}"


def format_hhmmss(ms: float, round_seconds: bool = False) -> str:
    """Format a duration in milliseconds as ``MM:SS``, or ``HH:MM:SS`` past an hour."""
    s = ms / 1000
    h = math.floor(s / 3600)
    m = math.floor((s - h * 3600) / 60)
    s = s - h * 3600 - m * 60
    if round_seconds:
        s = round(s)

    if h > 0:
        return f"{_pad(h)}:{_pad(m)}:{_pad(s)}"
    return f"{_pad(m)}:{_pad(s)}"
