"""
API schemas - Pydantic models for request/response validation.
"""

from travel_assistant.api.schemas.common import MessageResponse, ErrorResponse
from travel_assistant.api.schemas.state import (
    StateResponse,
    CodeOptionResponse,
    ListingEntryResponse,
    ListingResponse,
)
from travel_assistant.api.schemas.settings import SettingsResponse

__all__ = [
    # Common
    "MessageResponse",
    "ErrorResponse",
    # State
    "StateResponse",
    "CodeOptionResponse",
    "ListingEntryResponse",
    "ListingResponse",
    # Settings
    "SettingsResponse",
]
