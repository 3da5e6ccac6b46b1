"""Helpers for numeric normalization of user and model input."""

import math


def coerce_number(value) -> float:
    """Normalize raw form values to floats.

    Args:
        value: Raw value typed by the user or read from a payload.

    Returns:
        float: Parsed value, or 0.0 when the value is empty or invalid.
    """
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        try:
            number = float(str(value).strip())
        except ValueError:
            return 0.0
    if math.isnan(number) or math.isinf(number):
        return 0.0
    return number


def coerce_int(value) -> int:
    """Normalize raw form values to integers (truncating decimals)."""
    return int(coerce_number(value))


__all__ = ["coerce_number", "coerce_int"]
