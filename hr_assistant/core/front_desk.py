# Front-desk agent: realtime session configuration and tool execution.
# Author: NEA HR Engineering
# Date: 2025-07-05
# Version: 0.1.0

from typing import Any, Dict

from hr_assistant.core.config import get_settings
from hr_assistant.core.prompts import build_front_desk_instructions
from hr_assistant.core.tool_registry import ToolRegistry
from hr_assistant.models.hr import PromptConfig
from hr_assistant.tools import front_desk as front_desk_package

front_desk_registry = ToolRegistry(front_desk_package)


def build_session_config(prompts: PromptConfig) -> Dict[str, Any]:
    """The agent definition a realtime client opens its session with."""
    return {
        "name": "chat",
        "voice": get_settings().FRONT_DESK_VOICE,
        "instructions": build_front_desk_instructions(prompts),
        "tools": front_desk_registry.get_definitions(),
    }
