"""Small numeric and time helpers."""

import math
import time
from decimal import Decimal


def decimal_to_f64(value: Decimal) -> float:
    """Convert a decimal to a float through its text form, or 0.0 if that fails."""
    try:
        return float(str(value))
    except ValueError:
        return 0.0


def truncate_to_decimal(num: float, decimal_places: int) -> float:
    """Cut ``num`` to ``decimal_places`` digits after the point, rounding toward zero."""
    if decimal_places < 0:
        raise ValueError("decimal_places must not be negative")
    multiplier = 10.0**decimal_places
    scaled = num * multiplier
    if not math.isfinite(scaled):
        return scaled / multiplier
    return math.trunc(scaled) / multiplier


def current_timestamp_ms() -> int:
    """Milliseconds since the Unix epoch."""
    return max(time.time_ns() // 1_000_000, 0)