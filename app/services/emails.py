import logging
from html import escape
from typing import Optional

import resend

from app.config import settings
from app.models import ApplicationStatus

logger = logging.getLogger(__name__)


def send_application_decision_email(
    to_email: Optional[str],
    business_name: str,
    decision: ApplicationStatus,
    message: Optional[str] = None,
):
    """Tell the applicant the outcome of the review. Never raises."""
    if not to_email:
        return
    if not settings.RESEND_API_KEY:
        logger.warning("RESEND_API_KEY missing, decision email not sent to %s", to_email)
        return

    safe_name = escape(business_name)
    if decision == ApplicationStatus.APPROVED:
        subject = f"Welcome to the Badger Padel partner network, {business_name}"
        intro = (
            f"Good news! <strong>{safe_name}</strong> has been approved as a Badger Padel partner "
            "and is now listed in our member directory."
        )
    else:
        subject = f"Your Badger Padel partner application: {business_name}"
        intro = (
            f"Thank you for applying to partner with Badger Padel. Unfortunately we are unable "
            f"to approve <strong>{safe_name}</strong> at this time."
        )
    feedback = f'<p style="color:#555;line-height:1.6;">{escape(message)}</p>' if message else ""

    try:
        resend.api_key = settings.RESEND_API_KEY
        resend.Emails.send({
            "from": settings.MAIL_FROM,
            "to": to_email,
            "subject": subject,
            "html": f"""
            <div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto; padding: 32px;">
                <h2 style="font-size: 20px; margin-bottom: 16px;">Badger Padel Partners</h2>
                <p style="color:#333;line-height:1.6;">{intro}</p>
                {feedback}
                <p style="color:#999;font-size:11px;margin-top:32px;">
                    Questions? Reply to this email and our team will get back to you.
                </p>
            </div>
            """
        })
        logger.info("Decision email (%s) sent to %s", decision.value, to_email)
    except Exception as e:
        logger.warning("Decision email not sent to %s: %s", to_email, e)
