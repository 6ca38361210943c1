"""SVG rendering of finished badges."""

from pybadges import badge as pybadge

from badgehub.badge.badge_data import BadgeData
from badgehub.badge.color_formatters import to_svg_color
from badgehub.constants import DEFAULT_BADGE_COLOR, DEFAULT_LABEL_COLOR


def render_svg(badge: BadgeData) -> str:
    """Draw a badge as an SVG document using pybadges."""
    return pybadge(
        left_text=badge.label or "",
        right_text=badge.message,
        left_color=to_svg_color(badge.label_color, DEFAULT_LABEL_COLOR),
        right_color=to_svg_color(badge.color, DEFAULT_BADGE_COLOR),
    )
