"""Lead capture: contact, catering, menu suggestions and delivery opt-in."""

import csv
import io
import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from app.models.delivery_enrollment import DeliveryEnrollment
from app.models.menu_suggestion import MenuSuggestion, SUGGESTION_STATUSES
from app.schemas import (
    CateringRequest,
    ContactRequest,
    DeliveryEnrollmentIn,
    MenuSuggestionIn,
)
from app.services import notifications
from app.workers import notification_worker

logger = logging.getLogger(__name__)

CSV_HEADER = ["Name", "Phone Number", "Opt-In", "Preferred Time", "Notes", "Date"]


class OptInRequiredError(ValueError):
    """Delivery enrollment submitted without text-message consent."""


class LeadService:
    """Service for storing leads and dispatching their notifications."""

    @staticmethod
    def submit_contact(data: ContactRequest) -> None:
        logger.info("Contact form submission from %s", data.email)
        notification_worker.enqueue(*notifications.contact_messages(data))

    @staticmethod
    def submit_catering(data: CateringRequest) -> None:
        logger.info("Catering request from %s for %s", data.email, data.event_date)
        notification_worker.enqueue(*notifications.catering_messages(data))

    @staticmethod
    def create_suggestion(db: Session, data: MenuSuggestionIn) -> MenuSuggestion:
        suggestion = MenuSuggestion(
            guest_name=data.guest_name,
            contact_email=data.contact_email or None,
            contact_phone=data.contact_phone or None,
            item_name=data.item_name,
            item_type=data.item_type,
            description=data.description or None,
            status="new",
        )
        db.add(suggestion)
        db.commit()
        db.refresh(suggestion)

        notification_worker.enqueue(*notifications.suggestion_messages(suggestion))
        return suggestion

    @staticmethod
    def list_suggestions(db: Session) -> List[MenuSuggestion]:
        return db.query(MenuSuggestion).order_by(MenuSuggestion.created_at.desc()).all()

    @staticmethod
    def update_suggestion_status(
        db: Session, suggestion_id: str, status: str
    ) -> Optional[MenuSuggestion]:
        if status not in SUGGESTION_STATUSES:
            raise ValueError(f"Invalid status: {status}")
        suggestion = db.get(MenuSuggestion, suggestion_id)
        if not suggestion:
            return None
        suggestion.status = status
        db.commit()
        db.refresh(suggestion)
        return suggestion

    @staticmethod
    def create_enrollment(db: Session, data: DeliveryEnrollmentIn) -> DeliveryEnrollment:
        """
        Enroll a guest in the delivery text program.

        Raises:
            OptInRequiredError: consent to receive texts was not confirmed
        """
        if not data.opt_in_confirmed:
            raise OptInRequiredError("You must agree to receive text messages")

        enrollment = DeliveryEnrollment(
            guest_name=data.guest_name,
            phone_number=data.phone_number,
            opt_in_confirmed=True,
            preferred_contact_window=data.preferred_contact_window or None,
            notes=data.notes or None,
        )
        db.add(enrollment)
        db.commit()
        db.refresh(enrollment)

        notification_worker.enqueue(*notifications.enrollment_messages(enrollment))
        return enrollment

    @staticmethod
    def list_enrollments(db: Session) -> List[DeliveryEnrollment]:
        return (
            db.query(DeliveryEnrollment)
            .order_by(DeliveryEnrollment.created_at.desc())
            .all()
        )

    @staticmethod
    def enrollments_csv(enrollments: List[DeliveryEnrollment]) -> str:
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerow(CSV_HEADER)
        for e in enrollments:
            writer.writerow(
                [
                    e.guest_name,
                    e.phone_number,
                    "true" if e.opt_in_confirmed else "false",
                    e.preferred_contact_window or "",
                    e.notes or "",
                    e.created_at.isoformat() if e.created_at else "",
                ]
            )
        return buffer.getvalue()
