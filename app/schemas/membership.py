from pydantic import BaseModel, computed_field
from typing import Optional
from datetime import datetime
from urllib.parse import quote
import json

QR_CODE_API = "https://api.qrserver.com/v1/create-qr-code/?size=150x150&data="


class MembershipResponse(BaseModel):
    id: str
    user_id: str
    membership_number: str
    profile_image_url: Optional[str] = None
    created_at: Optional[datetime] = None

    @computed_field
    @property
    def qr_code_url(self) -> str:
        data = json.dumps({"membershipNumber": self.membership_number, "userId": self.user_id})
        return QR_CODE_API + quote(data, safe="")

    class Config:
        from_attributes = True
