# app/domain/numbers.py
from __future__ import annotations

import math
import re
from typing import Any

I64_MIN = -(2**63)
I64_MAX = 2**63 - 1

# Optional sign then ASCII digits; no whitespace, underscores or decimals
_INT_CELL = re.compile(r"[+-]?[0-9]+")


def to_int(x: Any, default: int = 0) -> int:
    """
    Upstream cell -> int, parsed the way a strict i64 parse would:
    "12.5", " 12", 12.7 and anything outside the i64 range => default.
    """
    if isinstance(x, bool):
        return default
    if isinstance(x, int):
        value = x
    elif isinstance(x, str) and _INT_CELL.fullmatch(x):
        value = int(x)
    else:
        return default
    return value if I64_MIN <= value <= I64_MAX else default


def round_half_away(x: float, places: int = 0) -> float:
    """Round half away from zero (0.125 -> 0.13 at 2 places, not banker's rounding)."""
    if not math.isfinite(x):
        return x
    scale = 10.0 ** places
    return math.copysign(math.floor(abs(x) * scale + 0.5), x) / scale
