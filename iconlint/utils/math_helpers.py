"""Number helpers — precision, rounding, display formatting. No engine imports."""

from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Decimal

import numpy as np

_LEADING_ZERO_RE = re.compile(r"^(-?)0(\.?.+)")


def format_number(value: float) -> str:
    """Shortest round-trip text for a value: 10.0 → '10', 0.5 → '0.5'."""
    if value == 0:
        return "0"
    return np.format_float_positional(value, unique=True, trim="-")


def remove_leading_zeros(value: float) -> str:
    """0.03 → '.03', -0.5 → '-.5'. Used for compact replacement suggestions."""
    return _LEADING_ZERO_RE.sub(r"\1\2", format_number(value))


def decimal_places(value: float) -> int:
    """Number of decimals needed to write ``value`` exactly as it round-trips.

    Derived from the shortest scientific form so 1.123456 → 6 and 1e-7 → 7,
    independent of how the value was originally spelled.
    """
    if not value or not value % 1:
        return 0
    mantissa, exponent = np.format_float_scientific(value, unique=True, trim="-").split("e")
    dot = mantissa.find(".")
    fraction_digits = len(mantissa) - dot - 1 if dot >= 0 else 0
    return max(fraction_digits - int(exponent), 0)


def to_fixed(value: float, digits: int) -> float:
    """Round half away from zero on the exact binary value."""
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))
