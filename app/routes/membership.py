from fastapi import APIRouter, Depends, File, UploadFile
from sqlalchemy.orm import Session

from app.database import get_db
from app.models import User
from app.schemas.membership import MembershipResponse
from app.dependencies import get_current_active_user
from app.services import membership_service

router = APIRouter()


@router.get("/me", response_model=MembershipResponse)
async def get_my_membership(
    current_user: User = Depends(get_current_active_user),
    db: Session = Depends(get_db)
):
    """Digital membership card, created on first visit"""
    return membership_service.get_or_create_membership(db, current_user.id)


@router.post("/me/profile-image", response_model=MembershipResponse)
async def upload_profile_image(
    file: UploadFile = File(...),
    current_user: User = Depends(get_current_active_user),
    db: Session = Depends(get_db)
):
    membership = membership_service.get_or_create_membership(db, current_user.id)
    data = await file.read()
    return membership_service.update_profile_image(db, membership, data, file.content_type)
