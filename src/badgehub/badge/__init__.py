"""Badge construction and rendering.

Provides value objects, number and color formatting, the downloads badge
helper and the SVG renderer.
"""

from badgehub.badge.badge_data import (
    BadgeData,
    BadgeFormat,
    BadgeOverrides,
    split_badge_format,
)
from badgehub.badge.coalesce import coalesce_badge
from badgehub.badge.downloads import render_downloads_badge
from badgehub.badge.renderer import render_svg

__all__ = [
    "BadgeData",
    "BadgeFormat",
    "BadgeOverrides",
    "coalesce_badge",
    "render_downloads_badge",
    "render_svg",
    "split_badge_format",
]
