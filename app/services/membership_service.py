"""
app/services/membership_service.py
Digital membership cards, one per user, created on first access
"""
import logging
import time
import uuid

from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError, NoResultFound, SQLAlchemyError
from sqlalchemy.orm import Session

from app.config import settings
from app.models import Membership
from app.services import storage
from app.utils.membership import generate_membership_number

logger = logging.getLogger(__name__)


def get_or_create_membership(db: Session, user_id: str) -> Membership:
    """Return the user's membership, creating it with a derived number if it does not exist yet."""
    try:
        return db.query(Membership).filter(Membership.user_id == user_id).one()
    except NoResultFound:
        pass
    except SQLAlchemyError as e:
        logger.error("Error fetching membership for %s: %s", user_id, e)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Membership data is currently unavailable"
        )

    membership = Membership(
        id=str(uuid.uuid4()),
        user_id=user_id,
        membership_number=generate_membership_number(user_id, settings.MEMBERSHIP_PREFIX),
    )
    db.add(membership)
    try:
        db.commit()
    except IntegrityError as e:
        # Another request created it first, unless the user itself is gone
        db.rollback()
        try:
            return db.query(Membership).filter(Membership.user_id == user_id).one()
        except SQLAlchemyError:
            logger.error("Error creating membership for %s: %s", user_id, e)
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail="Membership data is currently unavailable"
            )
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Error creating membership for %s: %s", user_id, e)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Membership data is currently unavailable"
        )
    db.refresh(membership)
    logger.info("Membership %s created for user %s", membership.membership_number, user_id)
    return membership


def update_profile_image(db: Session, membership: Membership, data: bytes, content_type: str) -> Membership:
    ext = storage.image_extension(content_type)
    file_key = f"profile-images/{membership.id}-{int(time.time() * 1000)}.{ext}"
    membership.profile_image_url = storage.upload(file_key, data, content_type)
    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Error updating membership %s: %s", membership.id, e)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Error updating membership"
        )
    db.refresh(membership)
    return membership
