from __future__ import annotations

import math
from typing import Any, Iterable


def parse_number(value: Any) -> float | None:
    """Parse ints, floats and numeric strings ("25", " 120.00 "). Returns None when not a finite number."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        text = str(value).strip()
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def parse_positive(value: Any) -> float | None:
    number = parse_number(value)
    if number is None or number <= 0:
        return None
    return number


def split_allow_list(value: Any) -> tuple[str, ...]:
    """Normalize a comma-separated string or a list into a tuple of trimmed, non-empty tokens."""
    if value is None:
        return ()
    if isinstance(value, str):
        items: Iterable[Any] = value.split(",")
    elif isinstance(value, (list, tuple, set, frozenset)):
        items = value
    else:
        items = (value,)
    return tuple(str(item).strip() for item in items if item is not None and str(item).strip())


def duration_in_hours(duration: Any, unit: str) -> float:
    number = parse_number(duration)
    if number is None or number < 0:
        return 0.0
    if unit == "Minutes":
        return number / 60.0
    return number
