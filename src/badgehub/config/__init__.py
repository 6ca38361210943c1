"""Configuration package.

Exports AppSettings and the get_settings() singleton accessor.
"""

from badgehub.config.app_settings import AppSettings, get_settings

__all__ = ["AppSettings", "get_settings"]
