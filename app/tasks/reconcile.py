"""
app/tasks/reconcile.py
Reports approved applications whose partner record was never created.
Run by APScheduler from main.py, or by hand: python -m app.tasks.reconcile
Nothing is repaired automatically; admins retry from the admin panel.
"""
import logging
from sqlalchemy.orm import Session
from app.database import SessionLocal
from app.services.partner_service import find_orphaned_approvals

logger = logging.getLogger(__name__)


def report_orphaned_approvals():
    db: Session = SessionLocal()
    try:
        orphans = find_orphaned_approvals(db)
        for application in orphans:
            logger.warning(
                "Application %s (%s) approved on review but has no partner record",
                application.id, application.name
            )
        if orphans:
            logger.warning("Reconcile: %d approved application(s) without a partner", len(orphans))
        else:
            logger.info("Reconcile: all approved applications have a partner")
        return len(orphans)
    finally:
        db.close()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    report_orphaned_approvals()
