import resend

from app.config import settings
from app.models import ApplicationStatus
from app.services import emails


def test_decision_email_skipped_without_api_key(monkeypatch):
    sent = []
    monkeypatch.setattr(settings, "RESEND_API_KEY", "")
    monkeypatch.setattr(resend.Emails, "send", lambda params: sent.append(params))
    emails.send_application_decision_email("owner@example.com", "SportZone", ApplicationStatus.APPROVED)
    assert sent == []


def test_rejection_email_includes_escaped_feedback(monkeypatch):
    sent = []
    monkeypatch.setattr(settings, "RESEND_API_KEY", "re_test")
    monkeypatch.setattr(resend.Emails, "send", lambda params: sent.append(params))
    emails.send_application_decision_email(
        "owner@example.com", "Bats & Balls", ApplicationStatus.REJECTED, "<b>not enough info</b>"
    )
    assert len(sent) == 1
    assert sent[0]["to"] == "owner@example.com"
    assert "Bats & Balls" in sent[0]["subject"]
    assert "Bats &amp; Balls" in sent[0]["html"]
    assert "&lt;b&gt;not enough info&lt;/b&gt;" in sent[0]["html"]


def test_send_failure_is_swallowed(monkeypatch):
    def boom(params):
        raise RuntimeError("resend down")

    monkeypatch.setattr(settings, "RESEND_API_KEY", "re_test")
    monkeypatch.setattr(resend.Emails, "send", boom)
    emails.send_application_decision_email("owner@example.com", "SportZone", ApplicationStatus.APPROVED)
