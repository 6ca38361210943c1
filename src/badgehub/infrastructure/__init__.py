"""Infrastructure layer.

This package provides implementations for external system integrations,
currently the HTTP client used to reach upstream JSON APIs.
"""
