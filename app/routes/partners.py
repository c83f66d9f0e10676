from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List, Optional

from app.database import get_db
from app.schemas.partner import PartnerResponse
from app.services import partner_service

router = APIRouter()

DIRECTORY_FILTERS = {"all", "court", "shop", "brand", "other"}


@router.get("/", response_model=List[PartnerResponse])
async def list_partners(
    type: str = "all",
    search: Optional[str] = None,
    db: Session = Depends(get_db)
):
    """Public partner directory, active partners only"""
    if type not in DIRECTORY_FILTERS:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"Unknown partner type: {type}")

    partners = [p for p in partner_service.get_partners(db) if p.active]
    return partner_service.filter_partners(partners, type, search)


@router.get("/{partner_id}", response_model=PartnerResponse)
async def get_partner(partner_id: str, db: Session = Depends(get_db)):
    partner = partner_service.get_partner_by_id(db, partner_id)
    if not partner.active:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Partner not found")
    return partner
