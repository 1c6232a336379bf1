"""
Exception hierarchy for Travel Assistant.

"Not found" outcomes are not exceptions; see
``travel_assistant.directory.regions.NotFound``.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional


class TravelAssistantError(Exception):
    """Base class for all Travel Assistant errors."""
    pass


class InvalidArgument(TravelAssistantError, ValueError):
    """A caller supplied a malformed argument (e.g. a non-positive column size)."""
    pass


class SlugCollisionError(TravelAssistantError):
    """Two or more regions derive the same URL slug."""

    def __init__(self, collisions: Dict[str, List[str]]):
        self.collisions = collisions
        detail = "; ".join(
            f"{slug!r} <- {', '.join(codes)}" for slug, codes in sorted(collisions.items())
        )
        super().__init__(f"Region slug collision detected: {detail}")


class RegionStoreError(TravelAssistantError):
    """The region store failed to read region or activity data."""
    pass


class ValidationFailed(TravelAssistantError):
    """Submitted admin data failed validation."""
    pass


class EmailError(TravelAssistantError):
    """Base class for email dispatch errors."""
    pass


class NetworkConnectionError(EmailError):
    """Communication with the email service failed."""
    pass


@dataclass(eq=False)
class MandrillSendFailed(EmailError):
    """Mandrill refused to send a message."""
    reason: str
    recipient: Optional[str] = None
    status: Optional[str] = None

    def __str__(self) -> str:
        if self.recipient:
            return f"Mandrill could not send to {self.recipient}: {self.reason}"
        return f"Mandrill could not send the email: {self.reason}"
