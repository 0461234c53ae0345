import math
from typing import Optional

from ..config.settings import settings


def format_price(value: int, symbol: Optional[str] = None) -> str:
    """Whole-unit price with thousands separators, e.g. ``1250 -> '₺1,250'``."""
    symbol = settings.CURRENCY_SYMBOL if symbol is None else symbol
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}{abs(value):,}"


def rating_stars(rating: float, max_stars: int = 5) -> int:
    """Filled stars for a 0-10 rating, halves rounded up."""
    stars = math.floor(rating / 2.0 + 0.5)
    return max(0, min(stars, max_stars))
