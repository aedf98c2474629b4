# Celery application for background delivery of notification mails.
# Author: NEA HR Engineering
# Date: 2025-07-04
# Version: 0.2.0

from celery import Celery
from hr_assistant.core.config import get_settings

settings = get_settings()

celery_app = Celery(
    'hr_assistant_tasks',
    broker=settings.REDIS_URL,
    backend=settings.REDIS_URL,
    include=['hr_assistant.tasks']
)

celery_app.conf.update(
    task_track_started=True,
    result_expires=3600,  # Expire results after 1 hour
    task_serializer='json',
    result_serializer='json',
    accept_content=['json'],
    timezone=settings.TIMEZONE,
    enable_utc=True,
)
