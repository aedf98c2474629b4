# hr_assistant/core/orchestrator.py
# Supervisor agent: builds the request and drives the tool-call loop until the model answers in text.
# Author: NEA HR Engineering
# Date: 2025-07-05
# Version: 0.3.0

import json
from typing import Any, Awaitable, Callable, Dict, List, Optional

from hr_assistant.core.config import get_settings
from hr_assistant.core.context import ToolContext
from hr_assistant.core.prompts import build_supervisor_instructions
from hr_assistant.core.tool_registry import ToolRegistry, supervisor_registry
from hr_assistant.models.common import StatPoint, SupervisorAnswer, ToolResult
from hr_assistant.services.llm_connector import TRANSPORT_ERROR, fetch_responses_message
from hr_assistant.utils.logger import console

CompletionFn = Callable[[Dict[str, Any]], Awaitable[Dict[str, Any]]]

MAX_ROUNDS_ERROR = "Maximum number of tool rounds exceeded."
UNREADABLE_ARGUMENTS_MESSAGE = "Die Angaben für diesen Tool-Aufruf konnten nicht gelesen werden."


def extract_final_text(output_items: List[Dict[str, Any]]) -> str:
    """Joins the output_text parts of every message item; messages are separated by newlines."""
    texts = []
    for item in output_items:
        if item.get("type") != "message":
            continue
        parts = item.get("content") or []
        texts.append("".join(part.get("text", "") for part in parts if part.get("type") == "output_text"))
    return "\n".join(texts)


def extract_stats(input_items: List[Dict[str, Any]]) -> Optional[List[StatPoint]]:
    """The stats payload of the first function_call_output that carries one."""
    for item in input_items:
        if item.get("type") != "function_call_output":
            continue
        try:
            output = json.loads(item.get("output") or "null")
        except ValueError:
            continue
        if isinstance(output, dict) and output.get("stats") is not None:
            return [StatPoint.model_validate(point) for point in output["stats"]]
    return None


class SupervisorDispatcher:
    """
    Runs supervisor turns against the Responses API.

    A turn alternates between awaiting the model and executing the tool calls
    it requested, strictly one at a time, until the model returns plain text
    (success), the transport fails, or the round limit is reached.
    """
    def __init__(self, registry: ToolRegistry, fetch: CompletionFn = fetch_responses_message,
                 max_rounds: Optional[int] = None, model: Optional[str] = None):
        self.registry = registry
        self.fetch = fetch
        self._max_rounds = max_rounds
        self._model = model

    @property
    def max_rounds(self) -> int:
        return self._max_rounds if self._max_rounds is not None else get_settings().MAX_TOOL_ROUNDS

    @property
    def model(self) -> str:
        return self._model or get_settings().SUPERVISOR_MODEL

    def build_request(self, relevant_context: str, context: ToolContext) -> Dict[str, Any]:
        history = [message.model_dump() for message in context.history if message.type == "message"]
        user_content = (
            "==== Conversation History ====\n"
            f"{json.dumps(history, indent=2, ensure_ascii=False)}\n\n"
            "==== Last User Message Context ====\n"
            f"{relevant_context}"
        )
        return {
            "model": self.model,
            "input": [
                {"type": "message", "role": "system", "content": build_supervisor_instructions()},
                {"type": "message", "role": "user", "content": user_content},
            ],
            "tools": self.registry.get_definitions(),
            "parallel_tool_calls": False,
        }

    async def get_next_response(self, relevant_context: str, context: ToolContext) -> SupervisorAnswer:
        """Entry point of the ask-supervisor tool: one complete supervisor turn."""
        body = self.build_request(relevant_context, context)
        console.info(f"Calling supervisor model for session_id: {context.session_id}...")
        response = await self.fetch(body)
        return await self.handle_tool_calls(body, response, context)

    async def _run_call(self, call: Dict[str, Any], context: ToolContext) -> Dict[str, Any]:
        name = call.get("name", "")
        try:
            args = json.loads(call.get("arguments") or "{}")
        except ValueError as e:
            console.error(f"Unreadable arguments for '{name}': {call.get('arguments')!r}")
            return ToolResult.failure(UNREADABLE_ARGUMENTS_MESSAGE, error=str(e)).to_payload()

        context.add_breadcrumb(f"[supervisorAgent] function call: {name}", args)
        if isinstance(args, dict):
            console.display_tool_call(name, args)
        result = await self.registry.execute(name, context, args)
        context.add_breadcrumb(f"[supervisorAgent] function call result: {name}", result)
        return result

    async def handle_tool_calls(self, body: Dict[str, Any], response: Dict[str, Any],
                                context: ToolContext) -> SupervisorAnswer:
        """
        Executes requested function calls until the model produces a final text.

        ``body`` is extended in place: for every executed call a function_call
        item and its function_call_output (same call_id) are appended before
        the next request is sent.
        """
        current = response
        rounds = 0

        while True:
            if current.get("error"):
                console.display_turn_failure("Supervisor turn failed", str(current["error"]))
                return SupervisorAnswer(error=TRANSPORT_ERROR)

            output_items = current.get("output") or []
            function_calls = [item for item in output_items if item.get("type") == "function_call"]

            if not function_calls:
                answer = SupervisorAnswer(text=extract_final_text(output_items), stats=extract_stats(body["input"]))
                console.success(f"Supervisor answered after {rounds} tool round(s).")
                return answer

            if rounds >= self.max_rounds:
                console.display_turn_failure("Supervisor turn aborted", f"Model still requests tools after {rounds} rounds.")
                return SupervisorAnswer(error=MAX_ROUNDS_ERROR)

            rounds += 1
            console.rule(f"Supervisor Tool Round {rounds}")

            for call in function_calls:
                result = await self._run_call(call, context)
                body["input"].append({
                    "type": "function_call",
                    "call_id": call.get("call_id"),
                    "name": call.get("name"),
                    "arguments": call.get("arguments"),
                })
                body["input"].append({
                    "type": "function_call_output",
                    "call_id": call.get("call_id"),
                    "output": json.dumps(result, ensure_ascii=False),
                })

            current = await self.fetch(body)

supervisor_dispatcher = SupervisorDispatcher(supervisor_registry)
