"""
Admin panel processing.
"""

from travel_assistant.admin.settings_process import SettingsProcessor, TIME_ZONES

__all__ = ["SettingsProcessor", "TIME_ZONES"]
