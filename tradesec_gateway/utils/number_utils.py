"""Lenient number parsing and display formatting"""

import math
import re
from decimal import Context, Decimal, ROUND_HALF_UP
from typing import Any, Optional

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")
_LEADING_FLOAT = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_leading_int(value: Any) -> Optional[int]:
    """Parse the integer prefix of value ("3 boxes" -> 3, "2.9" -> 2); None if there is none"""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    match = _LEADING_INT.match(str(value))
    if not match:
        return None
    try:
        return int(match.group(1))
    except ValueError:
        # longer than the interpreter's int string conversion limit
        return None


def parse_leading_float(value: Any) -> Optional[float]:
    """Parse the decimal prefix of value ("12.5usd" -> 12.5); None if there is none or it is not finite"""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        match = _LEADING_FLOAT.match(str(value))
        if not match:
            return None
        number = float(match.group(1))
    return number if math.isfinite(number) else None


def _quantize(number: Decimal, places: int) -> Decimal:
    """Round half up to `places` fraction digits, with precision sized to the number"""
    context = Context(prec=max(number.adjusted(), 0) + places + 2)
    return number.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP, context=context)


def format_grouped(value: float) -> str:
    """
    Format with thousands separators and up to 3 fraction digits.

    Matches en-US locale formatting: 1010.0 -> "1,010", 1246.9056 -> "1,246.906".
    """
    text = format(_quantize(Decimal(repr(value)), 3), ",f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_fixed(value: float, places: int = 2) -> str:
    """Format with exactly `places` fraction digits, rounding half up"""
    return format(_quantize(Decimal(value), places), "f")
