"""Formatting and small path helpers shared by the widgets."""

from __future__ import annotations

import math
import os
import re

DEFAULT_PRECISION = 3

_EPSILON = 2.220446049250313e-16
_SUB_MULTIPLIERS = (1.0, 1e3, 1e6, 1e9, 1e12, 1e15)
_SUPER_MULTIPLIERS = (1.0, 1e-3, 1e-6, 1e-9, 1e-12)
_FILTER_RE = re.compile(r".*\(\*\.([a-zA-Z0-9]*)\)")


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def _clamp(low: int, value: int, high: int) -> int:
    return max(low, min(high, value))


def format_binary_quantity(quantity: int, units: str = "B") -> str:
    """Format a quantity with binary (Ki, Mi, Gi) prefixes."""
    magnitude = abs(quantity)
    if magnitude < 1 << 10:
        return f"{quantity} " + ("bytes" if units == "B" else units)
    if magnitude < 1 << 20:
        return f"{quantity / (1 << 10):.3f} Ki{units}"
    if magnitude < 1 << 30:
        return f"{quantity / (1 << 20):.3f} Mi{units}"
    return f"{quantity / (1 << 30):.3f} Gi{units}"


def _format_time(value: float, precision: int, digits: int) -> str:
    seconds = int(math.floor(value))
    frac = value - seconds
    decimal_part = 0

    if precision > 0:
        multiplier = 10.0 ** (precision - 1)
        decimal_part = int(_round_half_away(multiplier * frac))
        if abs(decimal_part - multiplier) < 1:
            decimal_part = 0
            seconds += 1

    minutes = seconds // 60
    hours = minutes // 3600
    seconds %= 60
    minutes %= 60

    if hours > 0:
        text = "%d:%02d:%02d" % (hours, minutes, seconds)
        if hours >= 10:
            precision -= 6
            decimal_part //= 100000
        else:
            precision -= 5
            decimal_part //= 10000
    elif minutes > 0:
        text = "%d:%02d" % (minutes, seconds)
        if minutes >= 10:
            precision -= 4
            decimal_part //= 1000
        else:
            precision -= 3
            decimal_part //= 100
    else:
        text = "%d" % seconds
        precision -= digits

    if precision > 0:
        text += f".{decimal_part:0{precision}d}"

    if minutes == 0 and hours == 0:
        text += " s"

    return text


def format_quantity(
    value: float, precision: int, units: str = "s", sign: bool = False
) -> str:
    """Format a value with SI prefixes and the given number of significant digits.

    Values in seconds of one minute or more are shown as mm:ss or hh:mm:ss.
    """
    if math.isinf(value):
        return ("-∞ " if value < 0 else "∞ ") + units
    if math.isnan(value):
        return "NaN " + units
    if abs(value) < _EPSILON:
        return "0 " + units

    text = ""
    if value < 0:
        value = -value
        text = "-"
    elif sign:
        text = "+"

    digits = math.floor(math.log10(value)) + 1

    if digits > 0:
        if units == "s":
            return text + _format_time(value, precision, digits)

        multiplier = 10.0 ** (precision - 1)
        value = _round_half_away(value * multiplier) / multiplier
        pfx = _clamp(0, _trunc_div(digits - 1, 3), 0 if units == "dB" else 4)
        digits -= 3 * pfx
        decimals = precision - digits if precision > digits else 0
        prefixes = ("", "k", "M", "G", "T")
        return (
            text
            + f"{value * _SUPER_MULTIPLIERS[pfx]:.{decimals}f}"
            + " "
            + prefixes[pfx]
            + units
        )

    multiplier = 10.0 ** (precision - digits)
    value = _round_half_away(value * multiplier) / multiplier
    if value > 0:
        digits = math.floor(math.log10(value)) + 1

    pfx = _clamp(0, _trunc_div(3 - digits, 3), 0 if units == "dB" else 5)
    digits += 3 * pfx
    decimals = precision - digits if precision > digits else 0
    prefixes = ("", "m", "µ", "n", "p", "f")
    return (
        text
        + f"{value * _SUB_MULTIPLIERS[pfx]:.{decimals}f}"
        + " "
        + prefixes[pfx]
        + units
    )


def format_quantity_auto(value: float, units: str = "s") -> str:
    """Format a value choosing the precision from its order of magnitude."""
    digits = 0
    if abs(value) > 0:
        digits = math.floor(math.log10(abs(value)))
    return format_quantity(value, digits, units)


def format_quantity_from_delta(
    value: float, delta: float, units: str = "s", sign: bool = False
) -> str:
    """Format a value with as many digits as its resolution ``delta`` allows."""
    ratio = abs(value / delta)
    sdigits = 0
    if ratio >= 1:
        sdigits = math.ceil(math.log10(ratio)) + 1
    return format_quantity(value, sdigits, units, sign)


def ensure_extension(path: str, ext: str) -> str:
    """Append ``.ext`` to ``path`` if its file name has no suffix."""
    name = os.path.basename(path)
    _, dot, suffix = name.rpartition(".")
    if not dot or not suffix:
        return f"{path}.{ext}"
    return path


def extract_filter_extension(filter_expr: str) -> str:
    """Extract the extension from a file dialog filter such as ``Images (*.png)``."""
    match = _FILTER_RE.search(filter_expr)
    return match.group(1) if match else ""


def format_real(value: float) -> str:
    """Format a real number in ``%g`` style."""
    return "%g" % value


def format_complex(value: complex) -> str:
    """Format a complex number as ``a + bi`` or ``a - bi``."""
    real = format_real(value.real)
    if value.imag < 0:
        return f"{real} - {format_real(-value.imag)}i"
    return f"{real} + {format_real(value.imag)}i"


def format_scientific(value: float) -> str:
    """Format a real number in signed, left-justified scientific notation."""
    return "%+-14.6e" % value


def format_integer_part(value: float) -> str:
    """Format the floor of a real number as an integer."""
    return "%d" % math.floor(value)