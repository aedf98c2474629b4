# Tool to hang up once the conversation is over.
# Author: NEA HR Engineering
# Date: 2025-07-05
# Version: 0.1.0

from pydantic import BaseModel
from typing import Type

from hr_assistant.core.context import ToolContext
from hr_assistant.models.common import ToolResult
from hr_assistant.tools.base_tool import BaseTool

# Leaves time to speak the goodbye before disconnecting
HANG_UP_DELAY_SECONDS = 4


class EndCallInput(BaseModel):
    pass


class EndCallTool(BaseTool):
    name: str = "endCall"
    description: str = "Beendet das aktuelle Gespräch mit dem Mitarbeiter."
    args_schema: Type[BaseModel] = EndCallInput

    async def execute(self, context: ToolContext) -> ToolResult:
        if context.call_control is None:
            return ToolResult.failure("Konnte das Gespräch nicht beenden.")
        context.call_control.end_call(HANG_UP_DELAY_SECONDS)
        return ToolResult.ok("Bis bald! Ich beende jetzt das Gespräch.")
