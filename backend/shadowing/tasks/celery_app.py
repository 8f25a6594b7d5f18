"""Celery application configuration and beat schedule."""

from celery import Celery
from celery.schedules import crontab

from shadowing.config import get_settings

settings = get_settings()

celery_app = Celery(
    "shadowing",
    broker=settings.redis_url,
    backend=settings.redis_url,
    include=[
        "shadowing.tasks.maintenance_tasks",
    ],
)

celery_app.conf.update(
    task_serializer="json",
    accept_content=["json"],
    result_serializer="json",
    timezone="UTC",
    task_track_started=True,
    task_time_limit=300,
    task_soft_time_limit=240,
    worker_prefetch_multiplier=1,
    task_acks_late=True,
    task_reject_on_worker_lost=True,
)

celery_app.conf.beat_schedule = {
    "close-expired-opportunities": {
        "task": "shadowing.tasks.maintenance_tasks.close_expired_opportunities",
        "schedule": crontab(minute=0, hour=4),
    },
}
