from __future__ import annotations

import math
from typing import Any


def is_number(value: Any) -> bool:
    """True for real ints/floats; bools, NaN and infinities do not count as stats."""

    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return isinstance(value, int) or math.isfinite(value)


def as_int(value: Any) -> int:
    if not is_number(value):
        return 0
    return int(value)


def as_float(value: Any) -> float:
    if not is_number(value):
        return 0.0
    return float(value)
