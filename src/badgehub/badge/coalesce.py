"""Merge request overrides, service output and service defaults into one badge."""

from typing import Optional, TypeVar

from badgehub.badge.badge_data import BadgeData, BadgeOverrides
from badgehub.badge.color_formatters import normalize_color
from badgehub.constants import DEFAULT_BADGE_COLOR, DEFAULT_LABEL_COLOR

T = TypeVar("T")


def _first_set(*values: Optional[T]) -> Optional[T]:
    for value in values:
        if value is not None:
            return value
    return None


def coalesce_badge(
    overrides: BadgeOverrides,
    service_data: BadgeData,
    default_data: BadgeData,
) -> BadgeData:
    """Build the final badge.

    The label comes from the override, then the service, then the default.
    An override color never recolors an error badge. An empty label override
    is honoured and yields a message-only badge.

    Args:
        overrides: Query parameter overrides
        service_data: Badge content returned by the service
        default_data: Service defaults (typically just the label)

    Returns:
        Fully populated BadgeData
    """
    override_color = None if service_data.is_error else overrides.color

    color = _first_set(
        normalize_color(override_color),
        normalize_color(service_data.color),
        normalize_color(default_data.color),
    )
    label_color = _first_set(
        normalize_color(overrides.label_color),
        normalize_color(service_data.label_color),
        normalize_color(default_data.label_color),
    )

    return BadgeData(
        label=_first_set(overrides.label, service_data.label, default_data.label)
        or "",
        message=service_data.message,
        color=color or DEFAULT_BADGE_COLOR,
        label_color=label_color or DEFAULT_LABEL_COLOR,
        is_error=service_data.is_error,
    )
