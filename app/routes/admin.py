"""
app/routes/admin.py
Admin panel: partner application review and partner management
"""
from fastapi import APIRouter, BackgroundTasks, Depends, File, Form, Query, UploadFile, status
from sqlalchemy.orm import Session
from sqlalchemy import func
from typing import List, Optional
from pydantic import BaseModel

from app.database import get_db
from app.models import User, Partner, PartnerApplication, ApplicationStatus, Membership
from app.dependencies import require_admin
from app.schemas import ImageUploadResponse
from app.schemas.partner import PartnerCreate, PartnerUpdate, PartnerResponse, ToggleActiveRequest
from app.schemas.partner_application import PartnerApplicationResponse, ReviewRequest
from app.services import partner_service
from app.services.emails import send_application_decision_email

router = APIRouter()


# ─── Schemas ─────────────────────────────────────────────────────────────────

class DashboardStats(BaseModel):
    total_partners: int
    active_partners: int
    pending_applications: int
    approved_applications: int
    rejected_applications: int
    total_memberships: int


# ─── Dashboard ───────────────────────────────────────────────────────────────

@router.get("/dashboard", response_model=DashboardStats)
def admin_dashboard(
    db: Session = Depends(get_db),
    _: User = Depends(require_admin)
):
    def applications_with(status_value):
        return db.query(func.count(PartnerApplication.id)).filter(PartnerApplication.status == status_value).scalar()

    return DashboardStats(
        total_partners=db.query(func.count(Partner.id)).scalar(),
        active_partners=db.query(func.count(Partner.id)).filter(Partner.active == True).scalar(),
        pending_applications=applications_with(ApplicationStatus.PENDING),
        approved_applications=applications_with(ApplicationStatus.APPROVED),
        rejected_applications=applications_with(ApplicationStatus.REJECTED),
        total_memberships=db.query(func.count(Membership.id)).scalar(),
    )


# ─── Applications ────────────────────────────────────────────────────────────

@router.get("/applications", response_model=List[PartnerApplicationResponse])
def admin_list_applications(
    status_filter: Optional[ApplicationStatus] = Query(None, alias="status"),
    db: Session = Depends(get_db),
    _: User = Depends(require_admin)
):
    return partner_service.get_partner_applications(db, status_filter)


@router.get("/applications/orphaned", response_model=List[PartnerApplicationResponse])
def admin_orphaned_applications(
    db: Session = Depends(get_db),
    _: User = Depends(require_admin)
):
    """Approved applications whose partner record is missing"""
    return partner_service.find_orphaned_approvals(db)


@router.get("/applications/{application_id}", response_model=PartnerApplicationResponse)
def admin_get_application(
    application_id: str,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin)
):
    return partner_service.get_application_by_id(db, application_id)


@router.post("/applications/{application_id}/approve", response_model=PartnerResponse)
def admin_approve_application(
    application_id: str,
    background_tasks: BackgroundTasks,
    body: ReviewRequest = ReviewRequest(),
    db: Session = Depends(get_db),
    _: User = Depends(require_admin)
):
    """Approve the application and create the partner entry"""
    application = partner_service.get_application_by_id(db, application_id)
    partner = partner_service.approve_application(db, application, body.message)
    background_tasks.add_task(
        send_application_decision_email,
        application.email, application.name, ApplicationStatus.APPROVED, body.message,
    )
    return partner


@router.post("/applications/{application_id}/reject", response_model=PartnerApplicationResponse)
def admin_reject_application(
    application_id: str,
    background_tasks: BackgroundTasks,
    body: ReviewRequest = ReviewRequest(),
    db: Session = Depends(get_db),
    _: User = Depends(require_admin)
):
    application = partner_service.get_application_by_id(db, application_id)
    application = partner_service.reject_application(db, application, body.message)
    background_tasks.add_task(
        send_application_decision_email,
        application.email, application.name, ApplicationStatus.REJECTED, body.message,
    )
    return application


@router.post("/applications/{application_id}/retry", response_model=PartnerResponse, status_code=status.HTTP_201_CREATED)
def admin_retry_partner_creation(
    application_id: str,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin)
):
    """Create the missing partner for an approved application"""
    application = partner_service.get_application_by_id(db, application_id)
    return partner_service.retry_partner_creation(db, application)


# ─── Partners ────────────────────────────────────────────────────────────────

@router.get("/partners", response_model=List[PartnerResponse])
def admin_list_partners(
    type: str = "all",
    search: Optional[str] = None,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin)
):
    """All partners, active or not"""
    return partner_service.filter_partners(partner_service.get_partners(db), type, search)


@router.post("/partners", response_model=PartnerResponse, status_code=status.HTTP_201_CREATED)
def admin_create_partner(
    body: PartnerCreate,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin)
):
    return partner_service.create_partner(db, body)


@router.post("/partners/images", response_model=ImageUploadResponse, status_code=status.HTTP_201_CREATED)
async def admin_upload_partner_image(
    file: UploadFile = File(...),
    partner_name: str = Form(...),
    _: User = Depends(require_admin)
):
    """Upload a partner logo; the returned URL goes into the partner's image fields"""
    data = await file.read()
    url = partner_service.upload_partner_image(data, file.content_type, partner_name)
    return ImageUploadResponse(url=url)


@router.get("/partners/{partner_id}", response_model=PartnerResponse)
def admin_get_partner(
    partner_id: str,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin)
):
    return partner_service.get_partner_by_id(db, partner_id)


@router.patch("/partners/{partner_id}", response_model=PartnerResponse)
def admin_update_partner(
    partner_id: str,
    body: PartnerUpdate,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin)
):
    return partner_service.update_partner(db, partner_id, body)


@router.patch("/partners/{partner_id}/toggle-active", response_model=PartnerResponse)
def admin_toggle_partner_active(
    partner_id: str,
    body: ToggleActiveRequest = ToggleActiveRequest(),
    db: Session = Depends(get_db),
    _: User = Depends(require_admin)
):
    return partner_service.toggle_partner_status(db, partner_id, body.active)


@router.delete("/partners/{partner_id}", status_code=204)
def admin_delete_partner(
    partner_id: str,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin)
):
    partner_service.delete_partner(db, partner_id)
