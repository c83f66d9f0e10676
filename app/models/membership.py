from sqlalchemy import Column, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from datetime import datetime
from app.database import Base

class Membership(Base):
    __tablename__ = "memberships"

    id                = Column(String, primary_key=True, index=True)
    user_id           = Column(String, ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False)
    membership_number = Column(String, nullable=False, index=True)   # not unique, see generate_membership_number
    profile_image_url = Column(String, nullable=True)
    created_at        = Column(DateTime, default=datetime.utcnow)

    user = relationship("User", back_populates="membership")
