# Shared async Redis client used by the session manager and the HR stores.
# Author: NEA HR Engineering
# Date: 2025-07-02
# Version: 0.1.0

from typing import Optional
from redis.asyncio import Redis, from_url

from hr_assistant.core.config import get_settings
from hr_assistant.utils.logger import console

_redis_client: Optional[Redis] = None


def get_redis() -> Redis:
    """Returns the process-wide client, creating it lazily from REDIS_URL."""
    global _redis_client
    if _redis_client is None:
        settings = get_settings()
        _redis_client = from_url(settings.REDIS_URL, decode_responses=True)
        console.info("Async Redis client initialized.")
    return _redis_client


def set_redis(client: Optional[Redis]) -> None:
    """Replaces the shared client; passing None makes the next call reconnect."""
    global _redis_client
    _redis_client = client


async def close_redis() -> None:
    """Closes the shared client's connection pool and forgets the client."""
    global _redis_client
    client, _redis_client = _redis_client, None
    if client is not None:
        await client.aclose()
