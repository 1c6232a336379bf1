"""
Plugin settings processing.

Used by the admin settings panel to:
- Determine whether or not the settings form was submitted
- Validate all incoming data
- Update the plugin's settings

Usage:
    processor = SettingsProcessor(db)
    redirect_to = processor.process(form)   # None when nothing was submitted
"""

import logging
from typing import Any, Mapping, Optional

from email_validator import EmailNotValidError, validate_email
from sqlalchemy.orm import Session

from travel_assistant.core.exceptions import ValidationFailed
from travel_assistant.core.models.plugin_settings import PluginSettings, SETTINGS_ROW_ID

logger = logging.getLogger(__name__)

FIELD_NAME = "email-name"
FIELD_ADDRESS = "email-address"
FIELD_TIME_ZONE = "timezone"

TIME_ZONES = (
    "America/New_York",
    "America/Chicago",
    "America/Denver",
    "America/Los_Angeles",
    "America/Anchorage",
    "Pacific/Honolulu",
)

UPDATED_REDIRECT = "admin/settings?updated=1"


def normalize_email(address: Any) -> Optional[str]:
    """The normalized form of an email address, or None when it is invalid."""
    if not isinstance(address, str):
        return None
    try:
        return validate_email(address, check_deliverability=False).normalized
    except EmailNotValidError:
        return None


def is_valid_email(address: Any) -> bool:
    return normalize_email(address) is not None


class SettingsProcessor:
    """Validates and saves the admin settings form."""

    def __init__(self, db: Session):
        self.db = db
        self.name: Optional[str] = None
        self.address: Optional[str] = None
        self.time_zone: Optional[str] = None

    @staticmethod
    def user_submitted_form(form: Optional[Mapping[str, Any]]) -> bool:
        """
        Check that every field is present and non-empty (not necessarily valid).
        """
        if not form:
            return False
        return all(form.get(field) for field in (FIELD_NAME, FIELD_ADDRESS, FIELD_TIME_ZONE))

    def validate_and_retain(self, form: Mapping[str, Any]) -> None:
        """
        Validate the submitted data and keep it for ``update``.

        Raises:
            ValidationFailed: when any field is invalid
        """
        self.name = str(form[FIELD_NAME]).strip()
        if not self.name:
            raise ValidationFailed("The plugin's email name is invalid")

        address = normalize_email(form[FIELD_ADDRESS])
        if address is None:
            raise ValidationFailed("The plugin's email address is invalid")
        self.address = address

        time_zone = form[FIELD_TIME_ZONE]
        if time_zone not in TIME_ZONES:
            raise ValidationFailed("The plugin's time zone is invalid")
        self.time_zone = time_zone

    def update(self) -> PluginSettings:
        """Save the retained values to the settings row."""
        row = self.db.get(PluginSettings, SETTINGS_ROW_ID)
        if row is None:
            row = PluginSettings(id=SETTINGS_ROW_ID)
            self.db.add(row)

        row.email_name = self.name
        row.email_address = self.address
        row.time_zone = self.time_zone
        self.db.commit()

        logger.info(f"Plugin settings updated: {self.name} <{self.address}>, {self.time_zone}")
        return row

    def process(self, form: Optional[Mapping[str, Any]]) -> Optional[str]:
        """
        Validate and save a submitted form.

        Returns:
            The redirect target after a successful update, or None when the
            form was not submitted
        """
        if not self.user_submitted_form(form):
            return None

        self.validate_and_retain(form)
        self.update()
        return UPDATED_REDIRECT


def current_settings(db: Session) -> Optional[PluginSettings]:
    """The saved settings row, if any."""
    return db.get(PluginSettings, SETTINGS_ROW_ID)
