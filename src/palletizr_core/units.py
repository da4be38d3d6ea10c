from __future__ import annotations

import math
from typing import Union

CM = float
KG = float

EPS = 1e-6

Numeric = Union[int, float, str]


def parse_float(value: Numeric) -> float:
    if isinstance(value, bool):
        raise ValueError(f"not a number: {value!r}")
    if isinstance(value, (int, float)):
        result = float(value)
    else:
        text = str(value).strip()
        if not text:
            raise ValueError("empty input")
        text = text.replace(",", ".")
        result = float(text)
    if math.isnan(result) or math.isinf(result):
        raise ValueError(f"not a finite number: {value!r}")
    return result


def parse_int(value: Numeric) -> int:
    """Parse a whole number, accepting ``"12"`` and ``"12.0"`` alike."""
    number = parse_float(value)
    if not number.is_integer():
        raise ValueError(f"not a whole number: {value!r}")
    return int(number)


def fit_count(extent: float, size: float) -> int:
    """How many ``size`` units fit along ``extent``."""
    if size <= 0 or extent <= 0:
        return 0
    return max(int((extent + EPS) // size), 0)


def format_float(value: float, ndigits: int = 2) -> str:
    return f"{value:.{ndigits}f}"
