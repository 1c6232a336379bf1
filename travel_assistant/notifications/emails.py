"""
Notification emails.

Each email class takes a minimal amount of data, assembles the subject and
the HTML and plain-text bodies (``build_body``), and hands the result to an
EmailProvider (``send``).
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from html import escape
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from travel_assistant.core.config import get_settings
from travel_assistant.core.database import get_db_session
from travel_assistant.core.models.plugin_settings import PluginSettings, SETTINGS_ROW_ID
from travel_assistant.notifications.providers import EmailMessage, EmailProvider, get_provider

logger = logging.getLogger(__name__)

EMAIL_STYLE = """
    body { font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif; }
    .container { max-width: 600px; margin: 0 auto; padding: 20px; }
    .header { background: #0f766e; color: white; padding: 20px; border-radius: 8px 8px 0 0; }
    .content { background: #f9fafb; padding: 20px; border: 1px solid #e5e7eb; }
    .trip { background: white; padding: 15px; border-radius: 8px; margin: 15px 0; border: 1px solid #e5e7eb; }
    .btn { display: inline-block; background: #0f766e; color: white; padding: 12px 24px; text-decoration: none; border-radius: 6px; margin-top: 15px; }
    .footer { padding: 20px; color: #6b7280; font-size: 12px; }
"""


@dataclass
class Sender:
    """The from name and address of automated emails."""
    name: str
    address: str


def load_sender(db: Optional[Session] = None) -> Sender:
    """
    Sender from the saved plugin settings, else from configuration.

    Without a session, one is opened for the lookup.
    """
    if db is None:
        try:
            with get_db_session() as session:
                return load_sender(session)
        except SQLAlchemyError as e:
            logger.warning(f"Plugin settings unavailable, using configured sender: {e}")
            return configured_sender()

    row = db.get(PluginSettings, SETTINGS_ROW_ID)
    if row is not None:
        return Sender(name=row.email_name, address=row.email_address)

    return configured_sender()


def configured_sender() -> Sender:
    """Sender from the email_from_* configuration."""
    settings = get_settings()
    return Sender(name=settings.email_from_name, address=settings.email_from_address)


def format_departure(leaving: datetime) -> str:
    return leaving.strftime("%B %d, %Y at %I:%M %p")


class Email(ABC):
    """
    Contract for notification emails.

    Subclasses set ``subject``, ``html_body`` and ``text_body`` in
    ``build_body``.
    """

    def __init__(
        self,
        to_email: str,
        to_name: Optional[str] = None,
        sender: Optional[Sender] = None,
        provider: Optional[EmailProvider] = None,
        db: Optional[Session] = None,
    ):
        self.to_email = to_email
        self.to_name = to_name
        self.sender = sender or load_sender(db)
        self.provider = provider or get_provider()

        self.subject: Optional[str] = None
        self.html_body: Optional[str] = None
        self.text_body: Optional[str] = None

    @abstractmethod
    def build_body(self) -> None:
        """Build the HTML and plain-text bodies from the gathered data."""
        pass

    @property
    def is_built(self) -> bool:
        return self.html_body is not None

    def to_message(self) -> EmailMessage:
        if not self.is_built:
            self.build_body()
        return EmailMessage(
            to=self.to_email,
            to_name=self.to_name,
            subject=self.subject,
            html_body=self.html_body,
            text_body=self.text_body,
            from_email=self.sender.address,
            from_name=self.sender.name,
        )

    async def send(self) -> bool:
        """
        Send the email through the provider.

        Raises:
            NetworkConnectionError: the email service could not be reached
            MandrillSendFailed: Mandrill refused the message
        """
        message = self.to_message()
        logger.info(f"Sending {type(self).__name__} to {self.to_email}")
        return await self.provider.send(message)

    def _wrap_html(self, heading: str, inner: str, footer: str) -> str:
        return f"""
        <!DOCTYPE html>
        <html>
        <head>
            <style>{EMAIL_STYLE}</style>
        </head>
        <body>
            <div class="container">
                <div class="header">
                    <h1 style="margin: 0;">{escape(heading)}</h1>
                </div>
                <div class="content">
                    {inner}
                </div>
                <div class="footer">
                    <p>{escape(footer)}</p>
                </div>
            </div>
        </body>
        </html>
        """


class RideRequestEmail(Email):
    """Sent to a driver when a member asks for seats in their shared ride."""

    def __init__(
        self,
        to_email: str,
        rider_name: str,
        rider_email: str,
        from_city: str,
        to_city: str,
        leaving: datetime,
        ride_url: str,
        seats: int = 1,
        note: Optional[str] = None,
        to_name: Optional[str] = None,
        sender: Optional[Sender] = None,
        provider: Optional[EmailProvider] = None,
        db: Optional[Session] = None,
    ):
        super().__init__(to_email, to_name, sender, provider, db)
        self.rider_name = rider_name
        self.rider_email = rider_email
        self.from_city = from_city
        self.to_city = to_city
        self.leaving = leaving
        self.ride_url = ride_url
        self.seats = seats
        self.note = note

    def build_body(self) -> None:
        seat_label = "seat" if self.seats == 1 else "seats"
        departure = format_departure(self.leaving)
        self.subject = f"{self.rider_name} would like to join your ride to {self.to_city}"

        note_html = f'<p style="margin-top: 10px;">"{escape(self.note)}"</p>' if self.note else ""
        inner = f"""
                    <p>{escape(self.rider_name)} asked for {self.seats} {seat_label} in your ride:</p>
                    <div class="trip">
                        <div style="font-weight: 600;">{escape(self.from_city)} to {escape(self.to_city)}</div>
                        <div style="color: #6b7280; font-size: 14px; margin-top: 5px;">Leaving {departure}</div>
                        {note_html}
                    </div>
                    <p>Reply to <a href="mailto:{escape(self.rider_email, quote=True)}">{escape(self.rider_email)}</a> to arrange the trip.</p>
                    <a href="{escape(self.ride_url, quote=True)}" class="btn">View Your Ride</a>
        """
        self.html_body = self._wrap_html(
            "New Ride Request",
            inner,
            f"You're receiving this because you shared a ride on {self.sender.name}.",
        )

        note_text = f'\nNote: "{self.note}"\n' if self.note else ""
        self.text_body = f"""
New Ride Request

{self.rider_name} asked for {self.seats} {seat_label} in your ride:

{self.from_city} to {self.to_city}
Leaving {departure}
{note_text}
Contact: {self.rider_email}
View your ride: {self.ride_url}

---
You're receiving this because you shared a ride on {self.sender.name}.
        """


class RideOfferEmail(Email):
    """Sent to a member who needs a ride when a driver offers one."""

    def __init__(
        self,
        to_email: str,
        driver_name: str,
        driver_email: str,
        from_city: str,
        to_city: str,
        leaving: datetime,
        ride_url: str,
        note: Optional[str] = None,
        to_name: Optional[str] = None,
        sender: Optional[Sender] = None,
        provider: Optional[EmailProvider] = None,
        db: Optional[Session] = None,
    ):
        super().__init__(to_email, to_name, sender, provider, db)
        self.driver_name = driver_name
        self.driver_email = driver_email
        self.from_city = from_city
        self.to_city = to_city
        self.leaving = leaving
        self.ride_url = ride_url
        self.note = note

    def build_body(self) -> None:
        departure = format_departure(self.leaving)
        self.subject = f"{self.driver_name} can give you a ride to {self.to_city}"

        note_html = f'<p style="margin-top: 10px;">"{escape(self.note)}"</p>' if self.note else ""
        inner = f"""
                    <p>{escape(self.driver_name)} offered to drive you:</p>
                    <div class="trip">
                        <div style="font-weight: 600;">{escape(self.from_city)} to {escape(self.to_city)}</div>
                        <div style="color: #6b7280; font-size: 14px; margin-top: 5px;">Leaving {departure}</div>
                        {note_html}
                    </div>
                    <p>Reply to <a href="mailto:{escape(self.driver_email, quote=True)}">{escape(self.driver_email)}</a> to accept.</p>
                    <a href="{escape(self.ride_url, quote=True)}" class="btn">View Your Request</a>
        """
        self.html_body = self._wrap_html(
            "A Ride Is Available",
            inner,
            f"You're receiving this because you asked for a ride on {self.sender.name}.",
        )

        note_text = f'\nNote: "{self.note}"\n' if self.note else ""
        self.text_body = f"""
A Ride Is Available

{self.driver_name} offered to drive you:

{self.from_city} to {self.to_city}
Leaving {departure}
{note_text}
Contact: {self.driver_email}
View your request: {self.ride_url}

---
You're receiving this because you asked for a ride on {self.sender.name}.
        """
