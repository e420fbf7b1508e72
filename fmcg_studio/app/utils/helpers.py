"""
Helper utilities for the application.
"""
from typing import Optional

DEFAULT_BASE_ADOPTION = 70.0
BASELINE_PRICE = 5.99
BASELINE_ECO_PACKAGE = 75.0


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def adjusted_adoption(base: Optional[float], price: float, eco_package: float) -> float:
    """
    Recompute adoption probability from the slider positions.

    Args:
        base: Adoption probability returned by the model; 70 when missing
        price: Target price in USD
        eco_package: Eco-friendly packaging share in percent

    Returns:
        clamp(base + (eco - 75) / 10 - (price - 5.99) * 2, 0, 100), rounded to one decimal
    """
    if not isinstance(base, (int, float)) or isinstance(base, bool):
        base = DEFAULT_BASE_ADOPTION
    eco_bonus = (eco_package - BASELINE_ECO_PACKAGE) / 10
    price_penalty = (price - BASELINE_PRICE) * 2
    return round(clamp(base + eco_bonus - price_penalty, 0.0, 100.0), 1)


def is_blank(text: Optional[str]) -> bool:
    return not (text or "").strip()
