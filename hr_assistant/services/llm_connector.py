# Connection to the hosted Responses API used by the supervisor agent.
# Author: NEA HR Engineering
# Date: 2025-07-04
# Version: 0.2.0

from typing import Any, Dict, Optional
from openai import AsyncOpenAI, OpenAIError

from hr_assistant.core.config import get_settings
from hr_assistant.utils.logger import console

TRANSPORT_ERROR = "Something went wrong."

_client: Optional[AsyncOpenAI] = None


def get_llm_client() -> AsyncOpenAI:
    global _client
    if _client is None:
        settings = get_settings()
        _client = AsyncOpenAI(api_key=settings.OPENAI_API_KEY, base_url=settings.OPENAI_BASE_URL)
    return _client


async def fetch_responses_message(body: Dict[str, Any]) -> Dict[str, Any]:
    """
    Sends one request to the Responses API and returns the response as a plain
    mapping with an ``output`` list.

    Tool calls are always forced to run sequentially. Any API or transport
    failure is logged and reported as ``{"error": "Something went wrong."}``.
    """
    try:
        response = await get_llm_client().responses.create(**{**body, "parallel_tool_calls": False})
        return response.model_dump()
    except OpenAIError as e:
        message = getattr(e, "message", None) or str(e)
        console.error(f"An API error occurred: {message}")
        return {"error": TRANSPORT_ERROR}
