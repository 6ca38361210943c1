"""Jenkins badge endpoints.

Serves plugin install count badges, overall and per plugin version. The last
path segment may carry a ".svg" or ".json" extension to pick the output
format.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Path, Query, Request, Response

from badgehub.badge.badge_data import BadgeOverrides, split_badge_format
from badgehub.controller.schemas.badges import BADGE_RESPONSES, badge_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/jenkins", tags=["downloads"])

MAX_OVERRIDE_LENGTH = 256


def get_badge_overrides(
    label: Optional[str] = Query(
        None,
        max_length=MAX_OVERRIDE_LENGTH,
        description="Override the badge label",
    ),
    color: Optional[str] = Query(
        None,
        max_length=MAX_OVERRIDE_LENGTH,
        description="Override the message color (name or hex)",
    ),
    label_color: Optional[str] = Query(
        None,
        alias="labelColor",
        max_length=MAX_OVERRIDE_LENGTH,
        description="Override the label color (name or hex)",
    ),
) -> BadgeOverrides:
    return BadgeOverrides(label=label, color=color, label_color=label_color)


@router.get(
    "/plugin/i/{plugin}",
    summary="Jenkins Plugin installs",
    description="Latest total install count of a Jenkins plugin. Append `.json` for the JSON badge.",
    responses=BADGE_RESPONSES,
)
async def plugin_installs(
    request: Request,
    plugin: str = Path(..., examples=["view-job-filters"]),
    overrides: BadgeOverrides = Depends(get_badge_overrides),
) -> Response:
    """Render the install count badge for a plugin.

    Args:
        request: FastAPI request
        plugin: Plugin identifier, optionally suffixed with .svg or .json
        overrides: Label and color overrides from the query string

    Returns:
        SVG or JSON badge
    """
    plugin_id, badge_format = split_badge_format(plugin)
    service = request.app.state.jenkins_plugin_installs_service

    logger.debug(f"Jenkins installs badge requested: {plugin_id} ({badge_format.value})")
    badge = await service.invoke(overrides, plugin=plugin_id)
    return badge_response(badge, badge_format)


@router.get(
    "/plugin/i/{plugin}/{version}",
    summary="Jenkins Plugin installs (version)",
    description="Install count of a specific Jenkins plugin version. Append `.json` for the JSON badge.",
    responses=BADGE_RESPONSES,
)
async def plugin_version_installs(
    request: Request,
    plugin: str = Path(..., examples=["view-job-filters"]),
    version: str = Path(..., examples=["1.26"]),
    overrides: BadgeOverrides = Depends(get_badge_overrides),
) -> Response:
    """Render the install count badge for one version of a plugin.

    Args:
        request: FastAPI request
        plugin: Plugin identifier
        version: Plugin version, optionally suffixed with .svg or .json
        overrides: Label and color overrides from the query string

    Returns:
        SVG or JSON badge
    """
    plugin_version, badge_format = split_badge_format(version)
    service = request.app.state.jenkins_plugin_installs_service

    logger.debug(
        f"Jenkins installs badge requested: {plugin}@{plugin_version} "
        f"({badge_format.value})"
    )
    badge = await service.invoke(overrides, plugin=plugin, version=plugin_version)
    return badge_response(badge, badge_format)
