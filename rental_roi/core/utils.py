from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal


def safe_divide(numerator: float, denominator: float, fallback: float = 0.0) -> float:
    """Divide, returning ``fallback`` unless the denominator is strictly positive.

    Every ratio KPI goes through here so an empty purchase, no rent or no
    equity gives 0 instead of a division error, NaN or infinity.
    """
    if denominator > 0:
        return numerator / denominator
    return fallback


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (2.5 -> 3, -2.5 -> -2)."""
    return int(math.floor(value + 0.5))


def _group_thousands(digits: str) -> str:
    return f"{int(digits):,}".replace(",", ".")


def number(value: float, decimals: int = 2) -> str:
    """Spanish-style number: ``.`` groups thousands, ``,`` marks decimals.

    Halves round away from zero (``194.5`` -> ``195``).
    """
    quantum = Decimal(1).scaleb(-decimals)
    text = f"{Decimal(abs(value)).quantize(quantum, rounding=ROUND_HALF_UP):f}"
    whole, _, frac = text.partition(".")
    out = _group_thousands(whole)
    if frac:
        out = f"{out},{frac}"
    if value < 0 and any(c not in "0.," for c in out):
        out = "-" + out
    return out


def euro(value: float) -> str:
    return f"{number(value, 0)} €"


def percent(value: float, decimals: int = 1) -> str:
    return f"{value * 100:.{decimals}f}%"
