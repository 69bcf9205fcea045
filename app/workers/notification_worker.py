"""
Dramatiq actors that deliver lead notifications.

Provider failures raise NotificationError so dramatiq's retry policy applies;
a provider without credentials is skipped.
"""
import logging

import dramatiq

# Import broker setup (must be before actor definitions)
from app.workers import broker  # noqa: F401
from app.services.notifications import (
    EmailMessage,
    PushMessage,
    notification_service,
)

logger = logging.getLogger(__name__)


@dramatiq.actor(max_retries=3, min_backoff=5000, max_backoff=60000)
def send_email(message: dict):
    notification_service.send_email(EmailMessage(**message))


@dramatiq.actor(max_retries=3, min_backoff=5000, max_backoff=60000)
def send_push(message: dict):
    notification_service.send_push(PushMessage(**message))


def enqueue(email: EmailMessage, push: PushMessage) -> None:
    """Queue both notifications for a lead; enqueue failures are only logged."""
    for actor, message in ((send_email, email), (send_push, push)):
        try:
            actor.send(message.to_dict())
        except Exception:  # broker unreachable
            logger.exception("Failed to enqueue %s notification", actor.actor_name)
