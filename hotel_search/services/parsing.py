# hotel_search/services/parsing.py
from __future__ import annotations

import math
import re

# Plain decimal literal, optional exponent. No whitespace, underscores, hex or inf/nan:
# anything looser would parse differently in Python than in a SQL CAST.
DECIMAL_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def to_float(value: str | float | None) -> float | None:
    """Stored numbers are strings; blank, garbage or non-finite means unknown."""
    if value is None:
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str) and DECIMAL_RE.fullmatch(value):
        number = float(value)
    else:
        return None
    return number if math.isfinite(number) else None


def to_int(value: str | float | None) -> int | None:
    number = to_float(value)
    return int(number) if number is not None else None
