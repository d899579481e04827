"""Core app configuration and database."""

from versex.core.config import get_settings, settings
from versex.core.database import get_db

__all__ = ["get_settings", "settings", "get_db"]
