from decimal import Decimal, ROUND_HALF_UP


def round_half_up(value: float, places: int = 0) -> float:
    """
    Round `value` to `places` decimals, halves away from zero.

    Works on the exact binary value of the float, so 4.125 becomes 4.13 while
    4.335 (stored as 4.33499...) becomes 4.33.
    """
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def percentage(part: int, whole: int) -> int:
    """Return part/whole as a whole-number percentage (0 when whole is 0)."""
    if whole <= 0:
        return 0
    return int(round_half_up(part / whole * 100))
