"""Rendering of download and install count badges."""

from typing import Optional, Union

from badgehub.badge.badge_data import BadgeData
from badgehub.badge.color_formatters import download_count_color
from badgehub.badge.text_formatters import metric


def render_downloads_badge(
    downloads: Union[int, float],
    version: Optional[str] = None,
    versioned_label_prefix: str = "downloads",
    label_override: Optional[str] = None,
    color_override: Optional[str] = None,
    interval: Optional[str] = None,
    message_suffix_override: Optional[str] = None,
) -> BadgeData:
    """Render a badge describing a download (or install) count.

    Args:
        downloads: Count to display
        version: Version the count applies to, if any
        versioned_label_prefix: Label prefix used when a version is given
        label_override: Explicit label, wins over the versioned label
        color_override: Explicit color, wins over the count-based color
        interval: Period the count covers, rendered as "/interval"
        message_suffix_override: Free text appended after the count

    Returns:
        BadgeData with label left unset when no version or override applies
    """
    label = None
    if label_override:
        label = label_override
    elif version:
        label = f"{versioned_label_prefix}@{version}"

    if message_suffix_override:
        message_suffix = f" {message_suffix_override}"
    elif interval:
        message_suffix = f"/{interval}"
    else:
        message_suffix = ""

    return BadgeData(
        label=label,
        message=f"{metric(downloads)}{message_suffix}",
        color=color_override or download_count_color(downloads),
    )
