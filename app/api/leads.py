"""Lead capture forms and their admin views."""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response
from sqlalchemy.orm import Session

from app.database import get_db
from app.models.user import User
from app.schemas import (
    CateringRequest,
    ContactRequest,
    DeliveryEnrollmentIn,
    DeliveryEnrollmentOut,
    MenuSuggestionIn,
    MenuSuggestionOut,
    SuggestionStatusUpdate,
)
from app.services.auth.dependencies import require_admin
from app.services.lead_service import LeadService, OptInRequiredError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["leads"])


@router.post("/contact")
async def submit_contact(data: ContactRequest):
    LeadService.submit_contact(data)
    return {"success": True, "message": "Thanks for reaching out! We'll get back to you soon."}


@router.post("/catering")
async def submit_catering(data: CateringRequest):
    LeadService.submit_catering(data)
    return {"success": True, "message": "Catering request received! We'll be in touch."}


@router.post("/menu-suggestions")
async def submit_suggestion(data: MenuSuggestionIn, db: Session = Depends(get_db)):
    suggestion = LeadService.create_suggestion(db, data)
    return {
        "success": True,
        "message": "Thank you for your suggestion!",
        "suggestion": MenuSuggestionOut.model_validate(suggestion).model_dump(
            by_alias=True, mode="json"
        ),
    }


@router.get("/admin/menu-suggestions", response_model=List[MenuSuggestionOut])
async def list_suggestions(
    user: User = Depends(require_admin), db: Session = Depends(get_db)
):
    return LeadService.list_suggestions(db)


@router.patch("/admin/menu-suggestions/{suggestion_id}", response_model=MenuSuggestionOut)
async def update_suggestion(
    suggestion_id: str,
    data: SuggestionStatusUpdate,
    user: User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    suggestion = LeadService.update_suggestion_status(db, suggestion_id, data.status)
    if not suggestion:
        raise HTTPException(status_code=404, detail="Suggestion not found")
    return suggestion


@router.post("/delivery-enrollment")
async def enroll_delivery(data: DeliveryEnrollmentIn, db: Session = Depends(get_db)):
    try:
        enrollment = LeadService.create_enrollment(db, data)
    except OptInRequiredError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {
        "success": True,
        "message": "You're enrolled!",
        "enrollment": DeliveryEnrollmentOut.model_validate(enrollment).model_dump(
            by_alias=True, mode="json"
        ),
    }


@router.get("/admin/delivery-enrollments", response_model=List[DeliveryEnrollmentOut])
async def list_enrollments(
    user: User = Depends(require_admin), db: Session = Depends(get_db)
):
    return LeadService.list_enrollments(db)


@router.get("/admin/delivery-enrollments/csv")
async def export_enrollments_csv(
    user: User = Depends(require_admin), db: Session = Depends(get_db)
):
    body = LeadService.enrollments_csv(LeadService.list_enrollments(db))
    return Response(
        content=body,
        media_type="text/csv",
        headers={"Content-Disposition": "attachment; filename=delivery-enrollments.csv"},
    )
