from pydantic import BaseModel, Field, field_validator
from typing import Optional, List, Any
from datetime import datetime

from app.models import PartnerType


class Discount(BaseModel):
    id: str
    description: str
    percentage: Optional[float] = None
    details: Optional[str] = None


def normalize_discounts(raw: Optional[List[Any]]) -> List[Discount]:
    """
    Bring every discount entry to the canonical ``Discount`` shape.

    Entries may be bare strings (legacy rows, form input) or objects with an
    optional id. Missing ids become the entry's position as a string.
    """
    if not raw:
        return []
    result = []
    for index, entry in enumerate(raw):
        if isinstance(entry, Discount):
            result.append(entry)
        elif isinstance(entry, str):
            result.append(Discount(id=str(index), description=entry))
        elif isinstance(entry, dict):
            data = dict(entry)
            if data.get("id") in (None, ""):
                data["id"] = str(index)
            else:
                data["id"] = str(data["id"])
            result.append(Discount(**data))
        else:
            raise ValueError(f"Unsupported discount entry: {entry!r}")
    return result


class PartnerBase(BaseModel):
    location: Optional[str] = None
    phone: Optional[str] = None
    website: Optional[str] = None
    social_media_link: Optional[str] = None
    member_benefit: Optional[str] = None
    email: Optional[str] = None
    contact_person: Optional[str] = None
    image: Optional[str] = None
    image_url: Optional[str] = None


class PartnerCreate(PartnerBase):
    name: str = Field(min_length=2)
    type: PartnerType
    discounts: List[Discount] = []
    active: bool = True

    @field_validator("discounts", mode="before")
    @classmethod
    def _normalize(cls, v):
        return normalize_discounts(v)


class PartnerUpdate(PartnerBase):
    name: Optional[str] = Field(default=None, min_length=2)
    type: Optional[PartnerType] = None
    discounts: Optional[List[Discount]] = None
    active: Optional[bool] = None

    @field_validator("name", "type", "active", mode="before")
    @classmethod
    def _not_null(cls, v, info):
        # Omit the field to leave it unchanged; these columns cannot be cleared
        if v is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return v

    @field_validator("discounts", mode="before")
    @classmethod
    def _normalize(cls, v):
        if v is None:
            return None
        return normalize_discounts(v)


class ToggleActiveRequest(BaseModel):
    active: Optional[bool] = None   # absent → flip the current value


class PartnerResponse(PartnerBase):
    id: str
    name: str
    type: PartnerType
    discounts: List[Discount] = []
    active: bool
    application_id: Optional[str] = None
    approved_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_validator("discounts", mode="before")
    @classmethod
    def _normalize(cls, v):
        return normalize_discounts(v)

    class Config:
        from_attributes = True
