"""
Notification emails and delivery providers.
"""

from travel_assistant.notifications.emails import (
    Email,
    RideOfferEmail,
    RideRequestEmail,
    Sender,
    load_sender,
)
from travel_assistant.notifications.providers import (
    ConsoleEmailProvider,
    EmailMessage,
    EmailProvider,
    MandrillEmailProvider,
    SMTPEmailProvider,
    get_provider,
)

__all__ = [
    "ConsoleEmailProvider",
    "Email",
    "EmailMessage",
    "EmailProvider",
    "MandrillEmailProvider",
    "RideOfferEmail",
    "RideRequestEmail",
    "SMTPEmailProvider",
    "Sender",
    "get_provider",
    "load_sender",
]
