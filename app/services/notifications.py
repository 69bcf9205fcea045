"""
Outbound notifications for lead-capture forms.

Email goes through the Resend HTTP API and push notifications through
Pushover. Messages are rendered here and delivered from dramatiq workers
(see app.workers.notification_worker), so request handlers never wait on a
third-party provider.
"""

import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Optional

import httpx
from jinja2 import Environment, FileSystemLoader, select_autoescape

from app.config import settings

logger = logging.getLogger(__name__)

_email_templates = Environment(
    loader=FileSystemLoader(Path(__file__).resolve().parents[1] / "templates" / "email"),
    autoescape=select_autoescape(["html"]),
    trim_blocks=True,
    lstrip_blocks=True,
)


class NotificationError(Exception):
    """A notification provider rejected the request or could not be reached."""


@dataclass
class EmailMessage:
    subject: str
    html: str
    text: str
    reply_to: Optional[str] = None
    to: list = field(default_factory=list)

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class PushMessage:
    title: str
    message: str
    priority: int = 0
    sound: str = "pushover"

    def to_dict(self) -> dict:
        return asdict(self)


def render_email(template: str, subject: str, reply_to: Optional[str] = None, **context) -> EmailMessage:
    """Render the html and plain-text variants of an email template."""
    context.setdefault("site_url", settings.site_url)
    html = _email_templates.get_template(f"{template}.html").render(**context)
    text = _email_templates.get_template(f"{template}.txt").render(**context)
    recipients = [settings.notification_email] if settings.notification_email else []
    return EmailMessage(subject=subject, html=html, text=text, reply_to=reply_to, to=recipients)


def contact_messages(data) -> tuple:
    email = render_email(
        "contact",
        f"[Soup Shoppe Contact] {data.subject}",
        reply_to=data.email,
        data=data,
    )
    push = PushMessage(title="New Contact Message", message=f"{data.name}: {data.subject}")
    return email, push


def catering_messages(data) -> tuple:
    email = render_email(
        "catering",
        f"[Soup Shoppe Catering] Request from {data.full_name}",
        reply_to=data.email,
        data=data,
    )
    push = PushMessage(
        title="New Catering Request",
        message=f"{data.full_name} - {data.event_date} ({data.guest_count or '?'} guests)",
        priority=1,
    )
    return email, push


def suggestion_messages(suggestion) -> tuple:
    email = render_email(
        "suggestion",
        f"New Menu Suggestion: {suggestion.item_name}",
        reply_to=suggestion.contact_email,
        data=suggestion,
    )
    push = PushMessage(
        title="New Menu Suggestion",
        message=f"{suggestion.guest_name} suggested {suggestion.item_name} ({suggestion.item_type})",
    )
    return email, push


def enrollment_messages(enrollment) -> tuple:
    email = render_email(
        "delivery_enrollment",
        f"New Delivery Signup: {enrollment.guest_name}",
        data=enrollment,
    )
    push = PushMessage(
        title="New Delivery Signup",
        message=f"{enrollment.guest_name} ({enrollment.phone_number})",
    )
    return email, push


class NotificationService:
    """Delivers email via Resend and push notifications via Pushover."""

    def __init__(self, transport: Optional[httpx.BaseTransport] = None, timeout: float = 15.0):
        self.transport = transport
        self.timeout = timeout

    def _client(self) -> httpx.Client:
        return httpx.Client(transport=self.transport, timeout=self.timeout)

    def send_email(self, message: EmailMessage) -> bool:
        """
        Send an email through Resend.

        Returns False without sending when email is not configured.

        Raises:
            NotificationError: the provider rejected the message or was unreachable
        """
        if not settings.resend_api_key or not message.to:
            logger.info("Email notifications disabled - Resend not configured")
            return False

        payload = {
            "from": settings.notification_from,
            "to": message.to,
            "subject": message.subject,
            "html": message.html,
            "text": message.text,
        }
        if message.reply_to:
            payload["reply_to"] = message.reply_to

        try:
            with self._client() as client:
                response = client.post(
                    settings.resend_api_url,
                    json=payload,
                    headers={"Authorization": f"Bearer {settings.resend_api_key}"},
                )
        except httpx.HTTPError as e:
            raise NotificationError(f"Resend request failed: {e}") from e

        if response.status_code >= 400:
            logger.error("Resend API error %s: %s", response.status_code, response.text)
            raise NotificationError(f"Resend API returned {response.status_code}")

        logger.info("Email sent via Resend: %s", response.json().get("id"))
        return True

    def send_push(self, message: PushMessage) -> bool:
        """
        Send a Pushover notification.

        Returns False without sending when Pushover is not configured.

        Raises:
            NotificationError: the provider rejected the message or was unreachable
        """
        if not settings.pushover_user_key or not settings.pushover_api_token:
            logger.info(
                "Pushover notifications disabled - PUSHOVER_USER_KEY or PUSHOVER_API_TOKEN not configured"
            )
            return False

        try:
            with self._client() as client:
                response = client.post(
                    settings.pushover_api_url,
                    json={
                        "token": settings.pushover_api_token,
                        "user": settings.pushover_user_key,
                        **message.to_dict(),
                    },
                )
        except httpx.HTTPError as e:
            raise NotificationError(f"Pushover request failed: {e}") from e

        body = response.json() if response.content else {}
        if response.status_code >= 400 or body.get("status") != 1:
            logger.error("Pushover API error %s: %s", response.status_code, body)
            raise NotificationError(f"Pushover API returned {response.status_code}")

        logger.info("Pushover notification sent: %s", message.title)
        return True


notification_service = NotificationService()
