"""Badge value objects shared by services, renderers and controllers."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class BadgeFormat(str, Enum):
    """Output formats a badge can be rendered in."""

    SVG = "svg"
    JSON = "json"


@dataclass
class BadgeData:
    """Badge content produced by a service.

    Attributes:
        label: Left-hand text, None to fall back to the service default
        message: Right-hand text
        color: Message background color, None to fall back to defaults
        label_color: Label background color
        is_error: Whether the badge reports a failure
    """

    label: Optional[str] = None
    message: str = ""
    color: Optional[str] = None
    label_color: Optional[str] = None
    is_error: bool = False


@dataclass
class BadgeOverrides:
    """Per-request badge customization taken from query parameters."""

    label: Optional[str] = None
    color: Optional[str] = None
    label_color: Optional[str] = None


def split_badge_format(segment: str) -> tuple[str, BadgeFormat]:
    """Strip a format extension from the last path segment.

    Args:
        segment: Last path segment, e.g. "1.26.json" or "view-job-filters"

    Returns:
        Tuple of (segment without extension, requested format); svg by default
    """
    for badge_format in BadgeFormat:
        suffix = f".{badge_format.value}"
        if segment.endswith(suffix) and len(segment) > len(suffix):
            return segment[: -len(suffix)], badge_format
    return segment, BadgeFormat.SVG
