# Background tasks executed by the Celery worker.
# Author: NEA HR Engineering
# Date: 2025-07-04
# Version: 0.2.0

import asyncio
from hr_assistant.worker import celery_app
from hr_assistant.services.gmail_notifier import gmail_notifier
from hr_assistant.services.redis_client import close_redis
from hr_assistant.utils.logger import console

async def _deliver(subject: str, body: str) -> None:
    # The pool is bound to this asyncio.run() loop and must not outlive it
    try:
        await gmail_notifier.send(subject, body)
    finally:
        await close_redis()

@celery_app.task(name="hr_assistant.tasks.deliver_notification_email")
def deliver_notification_email(subject: str, body: str) -> bool:
    """
    Sends one notification mail. Failures are already written to the mail log
    by the notifier and are re-raised so Celery marks the task as failed.
    """
    console.info(f"[Celery Task {deliver_notification_email.request.id}] Delivering '{subject}'.")

    try:
        asyncio.run(_deliver(subject, body))
        console.success(f"[Celery Task {deliver_notification_email.request.id}] Completed successfully.")
        return True
    except Exception:
        console.exception(f"[Celery Task {deliver_notification_email.request.id}] Failed.")
        raise
