"""
Display formatting for PocketCalc
Converts between display text and numbers
"""
import math
from decimal import Decimal

import config

ERROR_TEXT = "Error"


class _ErrorValue:
    """Result of an undefined operation such as division by zero"""

    def __repr__(self):
        return "ERROR"


ERROR = _ErrorValue()


def parse_display(text):
    """Parse display text into a float (ERROR for the error sentinel)"""
    if text == ERROR_TEXT:
        return ERROR
    return float(text)


def format_number(value):
    """Format a number for the display.

    The value is rounded to 12 significant digits and written as the
    shortest plain decimal. Anything wider than the display is re-rendered
    from the unrounded value in exponential form, e.g. ``1.23457e+15``.
    """
    if value is ERROR or not math.isfinite(value):
        return ERROR_TEXT

    rounded = float(f"{value:.{config.SIGNIFICANT_DIGITS}g}")
    if rounded == 0:
        # Also folds -0.0 into "0"
        return "0"

    text = _plain_decimal(rounded)
    if len(text) > config.MAX_DISPLAY_LENGTH:
        return _exponential(value)
    return text


def is_plain(text):
    """True if text is a plain decimal literal (not exponential, not Error)"""
    return text != ERROR_TEXT and "e" not in text


def _plain_decimal(value):
    """Shortest positional decimal for a float, without trailing zeros"""
    digits = Decimal(repr(value))
    if digits == digits.to_integral_value():
        return str(int(digits))
    return format(digits.normalize(), "f")


def _exponential(value):
    mantissa, exponent = f"{value:.{config.EXPONENT_DIGITS}e}".split("e")
    sign, power = exponent[0], exponent[1:].lstrip("0") or "0"
    return f"{mantissa}e{sign}{power}"
