# The front desk's single escalation tool.
# Author: NEA HR Engineering
# Date: 2025-07-05
# Version: 0.1.0

from pydantic import BaseModel, Field
from typing import Type

from hr_assistant.core.context import ToolContext
from hr_assistant.core.orchestrator import supervisor_dispatcher
from hr_assistant.models.common import ToolResult
from hr_assistant.tools.base_tool import BaseTool


class SupervisorInput(BaseModel):
    relevant_context: str = Field(
        ...,
        alias="relevantContextFromLastUserMessage",
        description="Key information from the user described in their most recent message. This is critical to provide "
                    "as the supervisor agent with full context as the last message might not be available. Okay to omit "
                    "if the user message didn't add any new information.",
    )


class GetNextResponseFromSupervisorTool(BaseTool):
    name: str = "getNextResponseFromSupervisor"
    description: str = ("Determines the next response whenever the agent faces a non-trivial decision, produced by a "
                        "highly intelligent supervisor agent. Returns a message describing what to do next.")
    args_schema: Type[BaseModel] = SupervisorInput

    async def execute(self, context: ToolContext, relevant_context: str) -> ToolResult:
        answer = await supervisor_dispatcher.get_next_response(relevant_context, context)
        if answer.failed:
            return ToolResult.failure(answer.error)
        return ToolResult.ok(answer.text, stats=answer.stats)
