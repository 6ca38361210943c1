"""Jenkins plugin installs badge service.

Reads the installation trend published by the Jenkins statistics site and
renders the install count, either the latest overall figure or the figure for
one plugin version.
"""

import logging
from typing import Annotated, Dict, Optional, Union
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict, Field

from badgehub.badge.badge_data import BadgeData
from badgehub.badge.downloads import render_downloads_badge
from badgehub.exception.api_exceptions import NotFoundError
from badgehub.infrastructure.http.json_client import UpstreamJsonClient
from badgehub.service.base_json_service import BaseJsonBadgeService

logger = logging.getLogger(__name__)

NonNegativeInt = Annotated[int, Field(ge=0)]


class InstallationsStats(BaseModel):
    """Install counts keyed by date."""

    installations: Dict[str, NonNegativeInt] = Field(..., min_length=1)


class InstallationsPerVersionStats(BaseModel):
    """Install counts keyed by plugin version."""

    model_config = ConfigDict(populate_by_name=True)

    installations_per_version: Dict[str, NonNegativeInt] = Field(
        ..., alias="installationsPerVersion", min_length=1
    )


PluginStats = Union[InstallationsStats, InstallationsPerVersionStats]


class JenkinsPluginInstallsService(BaseJsonBadgeService):
    """Badge service for Jenkins plugin install counts.

    Attributes:
        base_url: Base URL of the Jenkins statistics site
    """

    category = "downloads"
    default_badge_data = BadgeData(label="installs")

    def __init__(self, json_client: UpstreamJsonClient, base_url: str):
        super().__init__(json_client)
        self.base_url = base_url.rstrip("/")

    def stats_url(self, plugin: str) -> str:
        """Build the installation trend URL for a plugin.

        The identifier is percent-encoded as a single path segment.
        """
        plugin_segment = quote(plugin, safe="")
        return (
            f"{self.base_url}/plugin-installation-trend/{plugin_segment}.stats.json"
        )

    async def fetch(self, plugin: str, version: Optional[str] = None) -> PluginStats:
        """Fetch and validate the plugin's installation statistics.

        Args:
            plugin: Jenkins plugin identifier
            version: Plugin version; selects the per-version schema when given

        Returns:
            Validated statistics document

        Raises:
            NotFoundError: Plugin unknown upstream ("plugin not found")
            InvalidResponseError: Document does not match the expected schema
            InaccessibleError: Statistics site unreachable or failing
        """
        schema = InstallationsPerVersionStats if version else InstallationsStats
        return await self._request_json(
            url=self.stats_url(plugin),
            schema=schema,
            http_errors={404: "plugin not found"},
        )

    @staticmethod
    def transform(stats: PluginStats, version: Optional[str] = None) -> int:
        """Extract the install count.

        Without a version, the count under the lexicographically greatest
        (latest) date key is returned. With a version, the count for exactly
        that version key is returned.

        Args:
            stats: Validated statistics document
            version: Plugin version, if any

        Returns:
            Install count

        Raises:
            NotFoundError: Version absent from the per-version counts
        """
        if not version:
            latest_date = max(stats.installations)
            return stats.installations[latest_date]

        installs = stats.installations_per_version.get(version)
        if installs is None:
            raise NotFoundError(
                pretty_message="version not found",
                details={"version": version},
            )
        return installs

    @staticmethod
    def render(installs: int, version: Optional[str] = None) -> BadgeData:
        return render_downloads_badge(
            downloads=installs,
            versioned_label_prefix="installs",
            version=version,
        )

    async def handle(self, plugin: str, version: Optional[str] = None) -> BadgeData:
        """Fetch, extract and render the install count for a plugin."""
        stats = await self.fetch(plugin=plugin, version=version)
        installs = self.transform(stats, version)
        logger.debug(
            f"Jenkins plugin {plugin} has {installs} installs",
            extra={"plugin": plugin, "version": version},
        )
        return self.render(installs, version)
