"""
Admin settings schemas.
"""

from typing import List

from pydantic import BaseModel


class SettingsResponse(BaseModel):
    """Current plugin settings."""
    email_name: str
    email_address: str
    time_zone: str
    time_zones: List[str]
    saved: bool = False
