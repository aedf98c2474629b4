# Persistence of front-desk session transcripts in Redis.
# Author: NEA HR Engineering
# Date: 2025-07-02
# Version: 0.2.0

from typing import List
from redis.exceptions import ConnectionError as RedisConnectionError

from hr_assistant.core.config import get_settings
from hr_assistant.models.common import Conversation, Message
from hr_assistant.services.redis_client import get_redis
from hr_assistant.utils.logger import console

class SessionManager:
    """
    Manages the transcript of a front-desk session by persisting it in Redis asynchronously.
    The supervisor reads it to get the conversation history of a turn.
    """
    _key_prefix: str = "session:"

    def _key(self, session_id: str) -> str:
        return f"{self._key_prefix}{session_id}"

    async def save_conversation(self, session_id: str, conversation: Conversation):
        """
        Asynchronously saves a Conversation object to Redis.
        """
        try:
            ttl = get_settings().SESSION_TTL_SECONDS
            await get_redis().set(self._key(session_id), conversation.model_dump_json(), ex=ttl)
            console.info(f"Session '{session_id}' saved to Redis.")
        except Exception:
            console.exception(f"Failed to save session '{session_id}' to Redis.")

    async def get_conversation(self, session_id: str) -> Conversation:
        """
        Asynchronously retrieves a Conversation; unknown or unreadable sessions start empty.
        """
        try:
            conversation_json = await get_redis().get(self._key(session_id))
            if conversation_json:
                return Conversation.model_validate_json(conversation_json)
            console.info(f"Session '{session_id}' not found in Redis. Creating a new one.")
        except RedisConnectionError:
            console.exception(f"Could not connect to Redis when getting session '{session_id}'.")
        except Exception:
            console.exception(f"Failed to retrieve session '{session_id}' from Redis. Returning a new conversation.")
        return Conversation(session_id=session_id)

    async def append_messages(self, session_id: str, messages: List[Message]) -> Conversation:
        conversation = await self.get_conversation(session_id)
        conversation.session_id = session_id
        conversation.messages.extend(messages)
        await self.save_conversation(session_id, conversation)
        return conversation

session_manager = SessionManager()
