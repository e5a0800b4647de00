"""Math helpers — rounding, number formatting, length parsing. No engine imports."""

from __future__ import annotations

import math
import re

_LENGTH_RE = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)\s*(?:px)?\s*$")


def round_hundredths(value: float) -> float:
    """Round half-up to two decimals: 0.125 → 0.13, -0.125 → -0.12."""
    return math.floor(value * 100 + 0.5) / 100


def has_fraction(value: float) -> bool:
    """True when the value is not a whole number at one-decimal granularity."""
    return math.fmod(value * 10, 10) != 0


def format_number(value: float) -> str:
    """Shortest text form: integral values print without a decimal point."""
    if math.isfinite(value) and value == int(value):
        return str(int(value))
    return repr(value)


def parse_length(text: str) -> float | None:
    """Parse a unitless or px length. Returns None when the text is not a finite number."""
    match = _LENGTH_RE.match(text)
    if match is None:
        return None
    value = float(match.group(1))
    return value if math.isfinite(value) else None
