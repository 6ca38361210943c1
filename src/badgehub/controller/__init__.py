"""API controllers.

This package provides the badge endpoint controllers and the health check.
"""

from badgehub.controller import health_controller, jenkins_controller

__all__ = [
    "health_controller",
    "jenkins_controller",
]
