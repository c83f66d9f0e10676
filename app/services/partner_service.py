"""
app/services/partner_service.py
Partner directory and partner application data access
"""
import logging
import re
import time
import uuid
from datetime import datetime
from typing import List, Optional
from urllib.parse import quote

from fastapi import HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.models import Partner, PartnerApplication, ApplicationStatus
from app.schemas.partner import PartnerCreate, PartnerUpdate
from app.schemas.partner_application import PartnerApplicationCreate, split_discounts
from app.services import storage

logger = logging.getLogger(__name__)

AVATAR_API = "https://api.dicebear.com/7.x/initials/svg?seed="


def placeholder_image(name: Optional[str]) -> str:
    return AVATAR_API + quote(name or "Partner", safe="!~*'()")


# ─── Partners ────────────────────────────────────────────────────────────────

def get_partners(db: Session) -> List[Partner]:
    return db.query(Partner).order_by(Partner.created_at).all()


def filter_partners(partners: List[Partner], type_filter: Optional[str] = "all", search: Optional[str] = "") -> List[Partner]:
    """Directory filter: type must match (unless "all") and name must contain the search, case-insensitively."""
    wanted_type = None if not type_filter or type_filter == "all" else str(type_filter)
    needle = (search or "").lower()
    result = []
    for partner in partners:
        partner_type = partner.type.value if hasattr(partner.type, "value") else partner.type
        if wanted_type and partner_type != wanted_type:
            continue
        if needle and needle not in (partner.name or "").lower():
            continue
        result.append(partner)
    return result


def get_partner_by_id(db: Session, partner_id: str) -> Partner:
    partner = db.query(Partner).filter(Partner.id == partner_id).first()
    if not partner:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Partner not found")
    return partner


def create_partner(db: Session, data: PartnerCreate) -> Partner:
    values = data.model_dump()
    if not values.get("image"):
        values["image"] = placeholder_image(data.name)

    partner = Partner(id=str(uuid.uuid4()), **values)
    db.add(partner)
    _commit(db, "creating partner")
    db.refresh(partner)
    logger.info("Partner %s created (%s)", partner.id, partner.name)
    return partner


def update_partner(db: Session, partner_id: str, data: PartnerUpdate) -> Partner:
    partner = get_partner_by_id(db, partner_id)

    update_data = data.model_dump(exclude_unset=True)
    if "discounts" in update_data and update_data["discounts"] is None:
        update_data["discounts"] = []
    for field, value in update_data.items():
        setattr(partner, field, value)
    partner.updated_at = datetime.utcnow()

    _commit(db, "updating partner")
    db.refresh(partner)
    return partner


def delete_partner(db: Session, partner_id: str) -> None:
    partner = get_partner_by_id(db, partner_id)
    db.delete(partner)
    _commit(db, "deleting partner")
    logger.info("Partner %s deleted", partner_id)


def toggle_partner_status(db: Session, partner_id: str, active: Optional[bool] = None) -> Partner:
    """Set ``active`` (or flip it when no value is given). Discounts are left untouched."""
    partner = get_partner_by_id(db, partner_id)
    partner.active = (not partner.active) if active is None else active
    partner.updated_at = datetime.utcnow()
    _commit(db, "toggling partner status")
    db.refresh(partner)
    return partner


def upload_partner_image(data: bytes, content_type: str, partner_name: str) -> str:
    ext = storage.image_extension(content_type)
    slug = re.sub(r"\s+", "-", partner_name or "partner").lower()
    file_key = f"partner-images/{slug}-{int(time.time() * 1000)}.{ext}"
    return storage.upload(file_key, data, content_type)


# ─── Applications ────────────────────────────────────────────────────────────

def get_partner_applications(db: Session, status_filter: Optional[ApplicationStatus] = None) -> List[PartnerApplication]:
    query = db.query(PartnerApplication)
    if status_filter:
        query = query.filter(PartnerApplication.status == status_filter)
    return query.order_by(PartnerApplication.application_date.desc()).all()


def get_application_by_id(db: Session, application_id: str) -> PartnerApplication:
    application = db.query(PartnerApplication).filter(PartnerApplication.id == application_id).first()
    if not application:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Application not found")
    return application


def submit_partner_application(db: Session, data: PartnerApplicationCreate) -> PartnerApplication:
    """Store a new pending application. Identical submissions create separate records."""
    values = data.model_dump()
    values["proposed_discounts"] = split_discounts(data.proposed_discounts)

    application = PartnerApplication(
        id=str(uuid.uuid4()),
        application_date=datetime.utcnow(),
        status=ApplicationStatus.PENDING,
        **values,
    )
    db.add(application)
    _commit(db, "submitting partner application")
    db.refresh(application)
    logger.info("Partner application %s submitted (%s)", application.id, application.name)
    return application


def update_application_status(
    db: Session,
    application_id: str,
    new_status: ApplicationStatus,
    message: Optional[str] = None,
) -> PartnerApplication:
    application = get_application_by_id(db, application_id)
    application.status = new_status
    if message:
        application.message = message
    _commit(db, "updating application status")
    db.refresh(application)
    return application


def reject_application(db: Session, application: PartnerApplication, message: Optional[str] = None) -> PartnerApplication:
    _ensure_pending(application)
    return update_application_status(db, application.id, ApplicationStatus.REJECTED, message)


def approve_application(db: Session, application: PartnerApplication, message: Optional[str] = None) -> Partner:
    """
    Approve an application and derive its partner record.

    The two writes are committed separately. If the partner insert fails the
    application stays approved without a partner; it then shows up in
    ``find_orphaned_approvals`` and can be completed with
    ``retry_partner_creation``.
    """
    _ensure_pending(application)
    update_application_status(db, application.id, ApplicationStatus.APPROVED, message)

    try:
        return create_partner_from_application(db, application)
    except HTTPException as e:
        logger.error("Application %s approved but partner creation failed: %s", application.id, e.detail)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Application approved but the partner record could not be created. Retry from the admin panel."
        )


def create_partner_from_application(db: Session, application: PartnerApplication) -> Partner:
    """Insert the partner and mark the application as materialized in the same commit."""
    now = datetime.utcnow()
    image = application.image_url or placeholder_image(application.name)
    partner = Partner(
        id=str(uuid.uuid4()),
        name=application.name,
        type=application.type,
        location=application.location,
        phone=application.phone,
        website=application.website,
        social_media_link=application.social_media_link,
        member_benefit=application.member_benefit,
        email=application.email,
        contact_person=application.contact_person,
        discounts=[
            {"id": str(index), "description": description}
            for index, description in enumerate(application.proposed_discounts or [])
        ],
        active=True,
        image=image,
        image_url=image,
        application_id=application.id,
        approved_at=now,
    )
    db.add(partner)
    application.partner_created_at = now
    _commit(db, "creating partner from application")
    db.refresh(partner)
    logger.info("Partner %s created from application %s", partner.id, application.id)
    return partner


def find_orphaned_approvals(db: Session) -> List[PartnerApplication]:
    """
    Approved applications whose partner insert never succeeded.

    An application whose partner was later deleted by an admin is not an
    orphan: it already has ``partner_created_at``.
    """
    return (
        db.query(PartnerApplication)
        .filter(
            PartnerApplication.status == ApplicationStatus.APPROVED,
            PartnerApplication.partner_created_at.is_(None),
        )
        .order_by(PartnerApplication.application_date)
        .all()
    )


def retry_partner_creation(db: Session, application: PartnerApplication) -> Partner:
    if application.status != ApplicationStatus.APPROVED:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Application is not approved")
    if application.partner_created_at is not None:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Partner already created for this application")
    return create_partner_from_application(db, application)


# ─── Helpers ─────────────────────────────────────────────────────────────────

def _ensure_pending(application: PartnerApplication) -> None:
    if application.status != ApplicationStatus.PENDING:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Application already {application.status.value}"
        )


def _commit(db: Session, action: str) -> None:
    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Error %s: %s", action, e)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=f"Error {action}"
        )
