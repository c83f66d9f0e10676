from app.models.user import User
from app.models.partner import Partner, PartnerType
from app.models.partner_application import PartnerApplication, ApplicationStatus
from app.models.membership import Membership

__all__ = [
    "User",
    "Partner",
    "PartnerType",
    "PartnerApplication",
    "ApplicationStatus",
    "Membership",
]
