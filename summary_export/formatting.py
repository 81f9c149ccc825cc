"""Canonical decimal text for metric values.

Numbers leave this module as bare tokens for line protocols: ``.`` as the
decimal separator, no grouping, and never exponent notation.
"""

from __future__ import annotations

import math
from enum import Enum


MAX_FRACTION_DIGITS = 6

NAN_TEXT = "NaN"
POSITIVE_INFINITY_TEXT = "Infinity"
NEGATIVE_INFINITY_TEXT = "-Infinity"


class FormatMode(str, Enum):
    PLAIN = "plain"
    FIXED_PRECISION = "fixed-precision"


def _non_finite_text(value: float) -> str | None:
    if math.isnan(value):
        return NAN_TEXT
    if math.isinf(value):
        return POSITIVE_INFINITY_TEXT if value > 0 else NEGATIVE_INFINITY_TEXT
    return None


def _strip_negative_zero(text: str) -> str:
    return "0" if text == "-0" else text


def decimal_or_nan(value: float) -> str:
    """Round to at most six fractional digits, then trim trailing zeros.

    The ``f`` presentation type rounds the exact binary value half-to-even and
    never switches to exponent notation, whatever the magnitude.
    """

    value = float(value)
    special = _non_finite_text(value)
    if special is not None:
        return special

    text = format(value, f".{MAX_FRACTION_DIGITS}f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return _strip_negative_zero(text)


def whole_or_decimal(value: float) -> str:
    """Whole numbers as plain digits, anything else via :func:`decimal_or_nan`."""

    value = float(value)
    special = _non_finite_text(value)
    if special is not None:
        return special

    if value.is_integer():
        return _strip_negative_zero(format(value, ".0f"))
    return decimal_or_nan(value)


def format_value(value: float, mode: FormatMode = FormatMode.PLAIN) -> str:
    if FormatMode(mode) is FormatMode.FIXED_PRECISION:
        return decimal_or_nan(value)
    return whole_or_decimal(value)
