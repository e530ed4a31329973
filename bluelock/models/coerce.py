"""Numeric coercion for raw user input.

Malformed values never raise; they fall back to a safe default.
"""

from typing import Any, Optional


def coerce_float(value: Any, default: Optional[float] = 0.0) -> Optional[float]:
    """Coerce raw user input to a float, falling back to default."""
    try:
        result = float(value)
    except (TypeError, ValueError):
        return default
    if result != result or result in (float("inf"), float("-inf")):
        return default
    return result


def coerce_int(value: Any, default: int = 0) -> int:
    """Coerce raw user input to an int, falling back to default.

    Accepts numeric strings with a fractional part and truncates them,
    the way a leading-integer parse would.
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        pass
    number = coerce_float(value, default=None)
    if number is None:
        return default
    return int(number)
