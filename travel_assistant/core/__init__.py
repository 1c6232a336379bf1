"""
Core module - shared functionality.

Provides:
- Configuration management
- Database connection and session handling
- Base models and mixins
- Exception hierarchy
"""

from travel_assistant.core.config import Settings, get_settings
from travel_assistant.core.database import get_db, init_db, engine

__all__ = [
    "Settings",
    "get_settings",
    "get_db",
    "init_db",
    "engine",
]
