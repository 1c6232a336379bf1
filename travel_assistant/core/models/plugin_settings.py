"""
Plugin settings model - a single row (id = 1) edited from the admin panel.
"""

from sqlalchemy import Column, Integer, String

from travel_assistant.core.models.base import Base, TimestampMixin

SETTINGS_ROW_ID = 1


class PluginSettings(Base, TimestampMixin):
    """Sender identity for automated emails and the plugin's time zone."""

    __tablename__ = "plugin_settings"

    id = Column(Integer, primary_key=True)
    email_name = Column(String(255), nullable=False, comment="Automated email from name")
    email_address = Column(String(255), nullable=False, comment="Automated email from address")
    time_zone = Column(String(64), nullable=False, comment="IANA time zone name")
