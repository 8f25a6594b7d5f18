"""Maintenance tasks: opportunity lifecycle housekeeping."""

import logging

from shadowing.tasks.celery_app import celery_app
from shadowing.models.base import get_sync_sessionmaker, utcnow

# Import ALL models to ensure relationships resolve
from shadowing.models.user import User  # noqa: F401
from shadowing.models.student_profile import StudentProfile  # noqa: F401
from shadowing.models.business_profile import BusinessProfile  # noqa: F401
from shadowing.models.application import Application  # noqa: F401
from shadowing.models.message import Message  # noqa: F401
from shadowing.models.opportunity import Opportunity

logger = logging.getLogger(__name__)


@celery_app.task(name="shadowing.tasks.maintenance_tasks.close_expired_opportunities")
def close_expired_opportunities():
    """Close active opportunities whose end date has passed."""
    db = get_sync_sessionmaker()()
    try:
        result = db.query(Opportunity).filter(
            Opportunity.status == "active",
            Opportunity.end_date.isnot(None),
            Opportunity.end_date < utcnow(),
        ).update({"status": "closed", "updated_at": utcnow()}, synchronize_session=False)
        db.commit()
        logger.info(f"Closed {result} expired opportunities")
        return {"closed": result}
    finally:
        db.close()
