from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.limiter import limiter
from app.schemas.partner_application import PartnerApplicationCreate, PartnerApplicationResponse
from app.services import partner_service

router = APIRouter()


@router.post("/", response_model=PartnerApplicationResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit("5/minute")
async def submit_application(
    request: Request,
    data: PartnerApplicationCreate,
    db: Session = Depends(get_db)
):
    """Public partner registration form"""
    return partner_service.submit_partner_application(db, data)
