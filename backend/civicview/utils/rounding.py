"""Rounding helpers."""

from decimal import Decimal, ROUND_HALF_UP


def round_half_up(value: float, places: int = 0) -> float:
    """
    Round to `places` decimals, halves away from zero.

    Python's built-in round() uses banker's rounding (round(4.25, 1) == 4.2);
    averages and percentages shown to users round 4.25 up to 4.3. The value
    is rounded from its shortest repr, so 4.25 is treated as exactly 4.25.
    """
    exponent = Decimal(1).scaleb(-places)
    return float(Decimal(repr(value)).quantize(exponent, rounding=ROUND_HALF_UP))


def percentage(part: int, whole: int) -> int:
    """Integer percentage of part/whole, half-up. Caller guarantees whole > 0."""
    return int(round_half_up(part / whole * 100))
