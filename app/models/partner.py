from sqlalchemy import Column, String, DateTime, Boolean, Enum, JSON, ForeignKey
from datetime import datetime
import enum
from app.database import Base

class PartnerType(str, enum.Enum):
    COURT = "court"
    SHOP  = "shop"
    BRAND = "brand"
    OTHER = "other"

class Partner(Base):
    __tablename__ = "partners"

    id   = Column(String, primary_key=True, index=True)
    name = Column(String, nullable=False)
    type = Column(Enum(PartnerType), nullable=False)

    # Contact / listing
    location          = Column(String, nullable=True)
    phone             = Column(String, nullable=True)
    website           = Column(String, nullable=True)
    social_media_link = Column(String, nullable=True)
    member_benefit    = Column(String, nullable=True)
    email             = Column(String, nullable=True)
    contact_person    = Column(String, nullable=True)
    image             = Column(String, nullable=True)
    image_url         = Column(String, nullable=True)

    # [{"id": "0", "description": "...", "percentage": 10, "details": "..."}]
    discounts = Column(JSON, nullable=False, default=list)

    # Hidden from the public directory when False
    active = Column(Boolean, default=True, nullable=False)

    # Set when the partner was derived from an approved application
    application_id = Column(String, ForeignKey("partner_applications.id"), nullable=True, index=True)
    approved_at    = Column(DateTime, nullable=True)

    # Metadata
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
