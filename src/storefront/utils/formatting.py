"""Number formatting for printed receipts and notices."""

from decimal import ROUND_HALF_UP, Decimal


def format_number(value, places: int = 0) -> str:
    """Fixed-point rendering with half-up rounding (``2.5`` -> ``"3"``)."""
    quantum = Decimal(1).scaleb(-places)
    # Round the shortest decimal form of the float, not its binary expansion
    return str(Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_HALF_UP))
