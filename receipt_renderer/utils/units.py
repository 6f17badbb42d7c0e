"""Unit conversion helpers for print and screen measurements."""
from __future__ import annotations

from typing import Dict, Tuple

POINTS_PER_INCH = 72
CSS_PIXELS_PER_INCH = 96

PAGE_SIZES: Dict[str, Tuple[float, float]] = {
    "A4": (595.2756, 841.8898),
    "LETTER": (612.0, 792.0),
}

def points_to_pixels(value: float) -> float:
    """Convert typographic points to CSS pixels."""
    return value * CSS_PIXELS_PER_INCH / POINTS_PER_INCH

def page_size(name: str) -> Tuple[float, float]:
    """Return (width, height) in points for a named paper size."""
    try:
        return PAGE_SIZES[name.upper()]
    except KeyError:
        raise ValueError(f"Unsupported page size: {name}") from None
