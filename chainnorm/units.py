"""Exact integer and decimal-text conversions for on-chain magnitudes.

Magnitudes are Python ints; fixed-point values travel as plain decimal text.
Nothing here passes a magnitude through a float.
"""

import math
import re
from decimal import Decimal
from typing import Any

GWEI_DECIMALS = 9
ETHER_DECIMALS = 18

_INTEGER_RE = re.compile(r"-?\d+")
_HEX_INTEGER_RE = re.compile(r"0[xX][0-9a-fA-F]+")
DECIMAL_TEXT_RE = re.compile(r"\d*\.?\d*")


def parse_integer(value: Any) -> int:
    """Parse an integer from an int, integral number, decimal or 0x-hex string.

    Raises:
        TypeError: For unsupported input types (including bool)
        ValueError: For malformed or non-integral input
    """
    if isinstance(value, bool):
        raise TypeError("bool is not an integer value")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value) or not value.is_integer():
            raise ValueError(f"Not an integral number: {value}")
        return int(value)
    if isinstance(value, Decimal):
        if not value.is_finite() or value != value.to_integral_value():
            raise ValueError(f"Not an integral number: {value}")
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        if _HEX_INTEGER_RE.fullmatch(text):
            return int(text, 16)
        if _INTEGER_RE.fullmatch(text):
            return int(text)
        raise ValueError(f"Malformed integer: {value!r}")
    raise TypeError(f"Unsupported integer type: {type(value).__name__}")


def parse_magnitude(value: Any) -> int:
    """Parse a non-negative integer magnitude (e.g. an amount in wei)."""
    number = parse_integer(value)
    if number < 0:
        raise ValueError(f"Magnitude cannot be negative: {value}")
    return number


def decimal_text(value: Any) -> str:
    """Render a non-negative number as plain decimal text (no exponent).

    Accepts ints, Decimals, finite floats, decimal strings and 0x-hex strings.

    Raises:
        TypeError: For unsupported input types (including bool)
        ValueError: For negative, non-finite or malformed input
    """
    if isinstance(value, bool):
        raise TypeError("bool is not a number")
    if isinstance(value, int):
        text = str(value)
    elif isinstance(value, float):
        if not math.isfinite(value):
            raise ValueError(f"Non-finite number: {value}")
        text = format(Decimal(repr(value)), "f")
    elif isinstance(value, Decimal):
        if not value.is_finite():
            raise ValueError(f"Non-finite number: {value}")
        text = format(value, "f")
    elif isinstance(value, str):
        text = value.strip()
        if _HEX_INTEGER_RE.fullmatch(text):
            text = str(int(text, 16))
    else:
        raise TypeError(f"Unsupported number type: {type(value).__name__}")

    if text.startswith("-"):
        raise ValueError(f"Number cannot be negative: {value}")
    if DECIMAL_TEXT_RE.fullmatch(text) is None or not any(c.isdigit() for c in text):
        raise ValueError(f"Malformed number: {value!r}")
    return text


def format_units(value: Any, unit_decimals: int) -> str:
    """Convert a smallest-unit magnitude to whole units, exactly.

    Trailing fractional zeros are dropped: ``format_units(1500000000, 9)``
    gives ``"1.5"`` and ``format_units(10**18, 18)`` gives ``"1"``.
    """
    if unit_decimals < 0:
        raise ValueError(f"unit_decimals cannot be negative: {unit_decimals}")
    amount = parse_magnitude(value)
    if unit_decimals == 0:
        return str(amount)
    whole, fraction = divmod(amount, 10**unit_decimals)
    fraction_text = str(fraction).rjust(unit_decimals, "0").rstrip("0")
    return f"{whole}.{fraction_text}" if fraction_text else str(whole)
