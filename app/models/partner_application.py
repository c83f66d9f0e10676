from sqlalchemy import Column, String, DateTime, Enum, JSON, Text
from datetime import datetime
import enum
from app.database import Base
from app.models.partner import PartnerType

class ApplicationStatus(str, enum.Enum):
    PENDING  = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"

class PartnerApplication(Base):
    __tablename__ = "partner_applications"

    id   = Column(String, primary_key=True, index=True)
    name = Column(String, nullable=False)
    type = Column(Enum(PartnerType), nullable=False)

    location          = Column(String, nullable=True)
    phone             = Column(String, nullable=True)
    website           = Column(String, nullable=True)
    social_media_link = Column(String, nullable=True)
    member_benefit    = Column(String, nullable=True)
    image_url         = Column(String, nullable=True)
    email             = Column(String, nullable=True)
    contact_person    = Column(String, nullable=True)

    # One free-text entry per line of the submitted form
    proposed_discounts = Column(JSON, nullable=False, default=list)

    # Review. Records are kept after a decision
    application_date = Column(DateTime, default=datetime.utcnow, nullable=False, index=True)
    status           = Column(Enum(ApplicationStatus), default=ApplicationStatus.PENDING, nullable=False)
    message          = Column(Text, nullable=True)   # reviewer feedback

    # Set once the approved application has produced its partner record
    partner_created_at = Column(DateTime, nullable=True)
