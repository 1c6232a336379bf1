"""
Email delivery providers.

Supports:
- Mandrill transactional email API (production)
- SMTP (fallback)
- Console (development/testing)

Providers raise NetworkConnectionError when the service cannot be reached and
MandrillSendFailed when Mandrill refuses a message.
"""

import logging
import smtplib
from abc import ABC, abstractmethod
from dataclasses import dataclass
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from email.utils import formataddr
from typing import Optional

import httpx

from travel_assistant.core.config import Settings, get_settings
from travel_assistant.core.exceptions import MandrillSendFailed, NetworkConnectionError
from travel_assistant.core.http import create_async_client, with_retry

logger = logging.getLogger(__name__)

MANDRILL_REJECTED_STATUSES = ("rejected", "invalid")


@dataclass
class EmailMessage:
    """Email message structure."""
    to: str
    subject: str
    html_body: str
    text_body: Optional[str] = None
    to_name: Optional[str] = None
    from_email: Optional[str] = None
    from_name: Optional[str] = None


class EmailProvider(ABC):
    """Abstract base class for email providers."""

    @abstractmethod
    async def send(self, message: EmailMessage) -> bool:
        """Send an email message."""
        pass


class ConsoleEmailProvider(EmailProvider):
    """Console-based email provider for development."""

    def __init__(self):
        self.sent = []

    async def send(self, message: EmailMessage) -> bool:
        logger.info(f"[EMAIL] To: {message.to}")
        logger.info(f"[EMAIL] From: {message.from_name} <{message.from_email}>")
        logger.info(f"[EMAIL] Subject: {message.subject}")
        logger.info(f"[EMAIL] Body: {(message.text_body or message.html_body)[:200]}...")
        self.sent.append(message)
        return True


class MandrillEmailProvider(EmailProvider):
    """Mandrill transactional email provider."""

    def __init__(
        self,
        api_key: str,
        api_url: str = "https://mandrillapp.com/api/1.0",
        max_attempts: int = 3,
        min_wait: float = 1.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.api_url = api_url.rstrip("/")
        self.transport = transport
        self._post = with_retry(max_attempts=max_attempts, min_wait=min_wait)(self._post_once)

    def build_payload(self, message: EmailMessage) -> dict:
        """Build the messages/send request body."""
        recipient = {"email": message.to, "type": "to"}
        if message.to_name:
            recipient["name"] = message.to_name

        payload = {
            "key": self.api_key,
            "message": {
                "subject": message.subject,
                "html": message.html_body,
                "to": [recipient],
            },
        }
        if message.text_body:
            payload["message"]["text"] = message.text_body
        if message.from_email:
            payload["message"]["from_email"] = message.from_email
        if message.from_name:
            payload["message"]["from_name"] = message.from_name

        return payload

    async def _post_once(self, payload: dict) -> httpx.Response:
        async with create_async_client(transport=self.transport) as client:
            return await client.post(f"{self.api_url}/messages/send.json", json=payload)

    async def send(self, message: EmailMessage) -> bool:
        try:
            response = await self._post(self.build_payload(message))
        except httpx.HTTPError as e:
            logger.error(f"Mandrill unreachable: {e}")
            raise NetworkConnectionError(f"Could not reach Mandrill: {e}") from e

        try:
            data = response.json()
        except ValueError:
            data = None

        # API errors come back as a single object: {"status": "error", "name": ..., "message": ...}
        if response.status_code != 200 or not isinstance(data, list):
            reason = data.get("message") if isinstance(data, dict) else response.text
            status = data.get("name") if isinstance(data, dict) else str(response.status_code)
            logger.error(f"Mandrill API error ({status}): {reason}")
            raise MandrillSendFailed(reason=reason or "Unknown error", status=status)

        for result in data:
            if result.get("status") in MANDRILL_REJECTED_STATUSES:
                raise MandrillSendFailed(
                    reason=result.get("reject_reason") or result["status"],
                    recipient=result.get("email"),
                    status=result.get("status"),
                )

        logger.info(f"Mandrill accepted email to {message.to}: {[r.get('_id') for r in data]}")
        return True


class SMTPEmailProvider(EmailProvider):
    """SMTP email provider."""

    def __init__(self, host: str, port: int, username: str, password: str):
        self.host = host
        self.port = port
        self.username = username
        self.password = password

    def build_mime(self, message: EmailMessage) -> MIMEMultipart:
        msg = MIMEMultipart("alternative")
        msg["Subject"] = message.subject
        msg["From"] = formataddr((message.from_name or "", message.from_email or self.username))
        msg["To"] = formataddr((message.to_name or "", message.to))

        if message.text_body:
            msg.attach(MIMEText(message.text_body, "plain"))
        msg.attach(MIMEText(message.html_body, "html"))
        return msg

    async def send(self, message: EmailMessage) -> bool:
        msg = self.build_mime(message)
        try:
            with smtplib.SMTP(self.host, self.port) as server:
                server.starttls()
                if self.username:
                    server.login(self.username, self.password)
                server.send_message(msg)
        except (smtplib.SMTPException, OSError) as e:
            logger.error(f"SMTP email failed: {e}")
            raise NetworkConnectionError(f"SMTP delivery to {message.to} failed: {e}") from e

        return True


def get_provider(settings: Optional[Settings] = None) -> EmailProvider:
    """Get the appropriate email provider based on configuration."""
    settings = settings or get_settings()

    if settings.email_provider == "mandrill":
        return MandrillEmailProvider(settings.mandrill_api_key, settings.mandrill_api_url)

    if settings.email_provider == "smtp":
        return SMTPEmailProvider(
            host=settings.smtp_host,
            port=settings.smtp_port,
            username=settings.smtp_username,
            password=settings.smtp_password,
        )

    return ConsoleEmailProvider()
