# Operator settings: notification recipient and the front-desk prompt.
# Author: NEA HR Engineering
# Date: 2025-07-03
# Version: 0.1.0

from hr_assistant.core.config import get_settings
from hr_assistant.models.hr import NotificationSettings, PromptConfig
from hr_assistant.services.redis_client import get_redis
from hr_assistant.utils.logger import console

NOTIFICATIONS_KEY = "settings:notifications"
BOT_KEY = "settings:bot"


class SettingsStore:
    """
    Reads and writes operator settings. A PromptConfig is loaded per request
    and handed to the agents explicitly.
    """

    async def get_notification_settings(self) -> NotificationSettings:
        email = await get_redis().hget(NOTIFICATIONS_KEY, "notificationEmail")
        return NotificationSettings(notification_email=email or get_settings().DEFAULT_NOTIFICATION_EMAIL or "")

    async def update_notification_email(self, email: str) -> NotificationSettings:
        await get_redis().hset(NOTIFICATIONS_KEY, "notificationEmail", email)
        console.info(f"Notification email set to {email}")
        return NotificationSettings(notification_email=email)

    async def load_prompt_config(self) -> PromptConfig:
        prompt = await get_redis().hget(BOT_KEY, "systemPrompt")
        return PromptConfig(front_desk_prompt=prompt or None)

    async def update_front_desk_prompt(self, prompt: str) -> PromptConfig:
        await get_redis().hset(BOT_KEY, "systemPrompt", prompt)
        console.info("Front-desk prompt updated.")
        return PromptConfig(front_desk_prompt=prompt or None)

settings_store = SettingsStore()
