import logging

from app.models import ApplicationStatus
from app.schemas.partner_application import PartnerApplicationCreate
from app.services import partner_service
from app.tasks import reconcile


def _submit(db, name):
    return partner_service.submit_partner_application(db, PartnerApplicationCreate(
        name=name,
        type="court",
        email="owner@example.com",
        contact_person="Owner",
        proposed_discounts="Free court hire on Mondays",
    ))


def test_reports_orphaned_approvals_without_fixing_them(db, session_factory, monkeypatch, caplog):
    complete = _submit(db, "Centre Court")
    partner_service.approve_application(db, complete)

    orphan = _submit(db, "Half Done")
    partner_service.update_application_status(db, orphan.id, ApplicationStatus.APPROVED)

    _submit(db, "Still Pending")

    monkeypatch.setattr(reconcile, "SessionLocal", session_factory)
    with caplog.at_level(logging.WARNING, logger="app.tasks.reconcile"):
        assert reconcile.report_orphaned_approvals() == 1
    assert orphan.id in caplog.text

    assert [a.id for a in partner_service.find_orphaned_approvals(db)] == [orphan.id]
