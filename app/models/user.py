from sqlalchemy import Column, String, DateTime, Boolean, Integer
from sqlalchemy.orm import relationship
from datetime import datetime
from app.database import Base

class User(Base):
    __tablename__ = "users"

    id = Column(String, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    full_name = Column(String, nullable=False)

    # Admin panel access
    is_admin = Column(Boolean, default=False)

    # Metadata
    is_active = Column(Boolean, default=True)
    last_login = Column(DateTime, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Bumped on sign-out; tokens carry the version they were issued with
    token_version = Column(Integer, default=0, nullable=False)

    # Relationships
    membership = relationship("Membership", back_populates="user", uselist=False, cascade="all, delete-orphan")
