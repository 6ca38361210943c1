"""Color helpers for badges.

Colors travel through the service as normalized strings: either one of the
named badge colors (``brightgreen``, ``red`` ...) or a ``#``-prefixed hex
value. They are only turned into concrete hex values when an SVG is drawn.
"""

import re
from typing import Optional, Union

NAMED_COLORS = {
    "brightgreen": "#4c1",
    "green": "#97ca00",
    "yellow": "#dfb317",
    "yellowgreen": "#a4a61d",
    "orange": "#fe7d37",
    "red": "#e05d44",
    "blue": "#007ec6",
    "grey": "#555",
    "lightgrey": "#9f9f9f",
}

COLOR_ALIASES = {
    "gray": "grey",
    "lightgray": "lightgrey",
    "critical": "red",
    "important": "orange",
    "success": "brightgreen",
    "informational": "blue",
    "inactive": "lightgrey",
}

_HEX_COLOR = re.compile(r"^#?([0-9a-f]{3}|[0-9a-f]{6})$")


def normalize_color(color: Optional[str]) -> Optional[str]:
    """Normalize a user or service supplied color.

    Args:
        color: Color name, alias or hex value (with or without '#')

    Returns:
        Canonical color name or '#'-prefixed lowercase hex, None if unusable
    """
    if not color:
        return None

    candidate = color.strip().lower()
    candidate = COLOR_ALIASES.get(candidate, candidate)
    if candidate in NAMED_COLORS:
        return candidate

    match = _HEX_COLOR.match(candidate)
    if match:
        return f"#{match.group(1)}"

    return None


def to_svg_color(color: Optional[str], fallback: str) -> str:
    """Resolve a normalized color to the hex value used in SVG output."""
    normalized = normalize_color(color) or normalize_color(fallback)
    if normalized is None:
        raise ValueError(f"Unusable fallback color: {fallback}")
    return NAMED_COLORS.get(normalized, normalized)


def floor_count_color(
    value: Union[int, float], yellow: int, yellowgreen: int, green: int
) -> str:
    """Pick a color for a count using ascending thresholds."""
    if value <= 0:
        return "red"
    if value < yellow:
        return "yellow"
    if value < yellowgreen:
        return "yellowgreen"
    if value < green:
        return "green"
    return "brightgreen"


def download_count_color(downloads: Union[int, float]) -> str:
    """Color for download and install counts."""
    return floor_count_color(downloads, 10, 100, 1000)
