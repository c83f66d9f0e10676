from pydantic import BaseModel, EmailStr, Field, AnyHttpUrl, TypeAdapter, ValidationError, field_validator
from typing import Optional, List
from datetime import datetime

from app.models import PartnerType, ApplicationStatus

_http_url = TypeAdapter(AnyHttpUrl)


def split_discounts(text: str) -> List[str]:
    """One proposed discount per non-blank line."""
    return [line.strip() for line in text.splitlines() if line.strip()]


class PartnerApplicationCreate(BaseModel):
    name: str = Field(min_length=2)
    type: PartnerType
    location: Optional[str] = None
    phone: Optional[str] = None
    website: Optional[str] = None
    social_media_link: Optional[str] = None
    member_benefit: Optional[str] = None
    image_url: Optional[str] = None
    email: EmailStr
    contact_person: str = Field(min_length=2)
    proposed_discounts: str = Field(min_length=10)   # free text, one discount per line

    @field_validator("location", "phone", "website", "social_media_link", "member_benefit", "image_url", mode="before")
    @classmethod
    def _blank_to_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("website", "image_url")
    @classmethod
    def _is_url(cls, v):
        if v is None:
            return v
        try:
            _http_url.validate_python(v)
        except ValidationError:
            raise ValueError("Please enter a valid URL")
        return v

    @field_validator("proposed_discounts")
    @classmethod
    def _has_discounts(cls, v):
        if not split_discounts(v):
            raise ValueError("Please describe your proposed discounts")
        return v


class ReviewRequest(BaseModel):
    message: Optional[str] = None


class PartnerApplicationResponse(BaseModel):
    id: str
    name: str
    type: PartnerType
    location: Optional[str] = None
    phone: Optional[str] = None
    website: Optional[str] = None
    social_media_link: Optional[str] = None
    member_benefit: Optional[str] = None
    image_url: Optional[str] = None
    email: Optional[str] = None
    contact_person: Optional[str] = None
    proposed_discounts: List[str] = []
    application_date: datetime
    status: ApplicationStatus
    message: Optional[str] = None
    partner_created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
