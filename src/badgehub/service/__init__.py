"""Service layer for badgehub badge logic.

Exports BaseJsonBadgeService, the contract shared by JSON-backed badge
services, and JenkinsPluginInstallsService.
"""

from badgehub.service.base_json_service import BaseJsonBadgeService
from badgehub.service.jenkins_plugin_installs_service import (
    JenkinsPluginInstallsService,
)

__all__ = [
    "BaseJsonBadgeService",
    "JenkinsPluginInstallsService",
]
