"""badgehub - Badge rendering service for third-party package statistics.

badgehub serves small status badges (label + value) that describe statistics
fetched from upstream JSON APIs. Each badge route is backed by a service that
fetches a JSON document, validates it against a schema, extracts a value and
renders it as SVG or as shields-compatible JSON.

Key Features:
- Jenkins plugin install counts, overall or per plugin version
- SVG badges rendered with pybadges, JSON badges in the endpoint schema
- Label, color and label color overrides via query parameters
- Upstream failures rendered as readable error badges

Version: 1.0.0
"""

__version__ = "1.0.0"
