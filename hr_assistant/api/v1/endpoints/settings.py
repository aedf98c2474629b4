# API endpoints for operator settings and notification mails.
# Author: NEA HR Engineering
# Date: 2025-07-05
# Version: 0.1.0

import httpx
from fastapi import APIRouter, HTTPException

from hr_assistant.core.prompts import build_front_desk_instructions
from hr_assistant.models.api_models import NotificationSettingsUpdate, PromptUpdate, TestEmailRequest
from hr_assistant.models.hr import NotificationSettings
from hr_assistant.services.gmail_notifier import EmailDeliveryError, gmail_notifier
from hr_assistant.services.settings_store import settings_store

router = APIRouter()

@router.get("/settings/notifications", response_model=NotificationSettings)
async def get_notification_settings():
    return await settings_store.get_notification_settings()

@router.put("/settings/notifications", response_model=NotificationSettings)
async def update_notification_settings(update: NotificationSettingsUpdate):
    return await settings_store.update_notification_email(update.notification_email)

@router.get("/settings/prompt")
async def get_prompt():
    prompts = await settings_store.load_prompt_config()
    return {"custom": prompts.front_desk_prompt is not None, "instructions": build_front_desk_instructions(prompts)}

@router.put("/settings/prompt")
async def update_prompt(update: PromptUpdate):
    prompts = await settings_store.update_front_desk_prompt(update.front_desk_prompt)
    return {"custom": prompts.front_desk_prompt is not None, "instructions": build_front_desk_instructions(prompts)}

@router.post("/notifications/test-email")
async def send_test_email(request: TestEmailRequest):
    """Sends a mail synchronously; the outcome is also visible in the mail log."""
    try:
        await gmail_notifier.send(request.subject, request.body)
    except (EmailDeliveryError, httpx.HTTPError):
        raise HTTPException(status_code=500, detail="Failed to send email")
    return {"success": True}
