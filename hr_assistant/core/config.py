# Configuration settings for the HR assistant backend.
# Author: NEA HR Engineering
# Date: 2025-07-02
# Version: 0.2.0

from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import Optional

class Settings(BaseSettings):
    """
    Application settings, loaded from the environment and an optional .env file.
    Attributes:
        OPENAI_API_KEY (str): API key for the hosted Responses API.
        OPENAI_BASE_URL (str): Optional alternative base URL for the API.
        SUPERVISOR_MODEL (str): Model used by the supervisor agent.
        FRONT_DESK_VOICE (str): Voice of the realtime front-desk agent.
        MAX_TOOL_ROUNDS (int): Upper bound of tool-call rounds per supervisor turn.
        REDIS_URL (str): Redis instance for HR data, transcripts and the Celery broker.
        SESSION_TTL_SECONDS (int): Retention of conversation transcripts.
        GOOGLE_CLIENT_ID (str): OAuth client ID for the Gmail API.
        GOOGLE_CLIENT_SECRET (str): OAuth client secret for the Gmail API.
        GOOGLE_REFRESH_TOKEN (str): Long-lived refresh token for the sender account.
        GOOGLE_EMAIL (str): Sender address.
        MAIL_SENDER_NAME (str): Display name used in the From header.
        MAIL_LOGO_PATH (str): PNG embedded into notification mails as cid:s2-logo.
        DEFAULT_NOTIFICATION_EMAIL (str): Recipient used until one is configured.
        TIMEZONE (str): Timezone for the Celery worker.
    """
    # Hosted LLM
    OPENAI_API_KEY: str
    OPENAI_BASE_URL: Optional[str] = None
    SUPERVISOR_MODEL: str = "gpt-4o-mini"
    FRONT_DESK_VOICE: str = "sage"
    MAX_TOOL_ROUNDS: int = 10

    # REDIS
    REDIS_URL: str = "redis://localhost:6379/0"
    SESSION_TTL_SECONDS: int = 86400

    # GMAIL
    GOOGLE_CLIENT_ID: Optional[str] = None
    GOOGLE_CLIENT_SECRET: Optional[str] = None
    GOOGLE_REFRESH_TOKEN: Optional[str] = None
    GOOGLE_EMAIL: Optional[str] = None
    MAIL_SENDER_NAME: str = "NEA GmbH"
    MAIL_LOGO_PATH: Optional[str] = None
    DEFAULT_NOTIFICATION_EMAIL: Optional[str] = None

    TIMEZONE: str = "Europe/Berlin"

    class Config:
        env_file = ".env"
        env_file_encoding = 'utf-8'

# lru_cache to cache the settings instance.
@lru_cache
def get_settings() -> Settings:
    return Settings()
