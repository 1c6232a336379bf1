"""
Core models - database tables for states, cities, ride postings and settings.
"""

from travel_assistant.core.models.base import Base, TimestampMixin, StateModelMixin
from travel_assistant.core.models.state import State
from travel_assistant.core.models.city import City
from travel_assistant.core.models.ride import RideNeed, RideShare
from travel_assistant.core.models.plugin_settings import PluginSettings, SETTINGS_ROW_ID

__all__ = [
    # Base
    "Base",
    "TimestampMixin",
    "StateModelMixin",
    # Models
    "State",
    "City",
    "RideNeed",
    "RideShare",
    "PluginSettings",
    "SETTINGS_ROW_ID",
]
