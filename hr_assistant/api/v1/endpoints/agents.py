# API endpoints for the front-desk and the supervisor agent.
# Author: NEA HR Engineering
# Date: 2025-07-05
# Version: 0.1.0

from fastapi import APIRouter, HTTPException

from hr_assistant.core.context import ToolContext, UiCommandRecorder
from hr_assistant.core.front_desk import build_session_config, front_desk_registry
from hr_assistant.core.orchestrator import supervisor_dispatcher
from hr_assistant.models.api_models import (
    SupervisorRequest,
    SupervisorResponse,
    ToolExecutionRequest,
    ToolExecutionResponse,
)
from hr_assistant.services.session_manager import session_manager
from hr_assistant.services.settings_store import settings_store
from hr_assistant.utils.logger import console

router = APIRouter()

@router.get("/frontdesk/config")
async def get_front_desk_config():
    """Session configuration (instructions, voice, tools) for the realtime client."""
    prompts = await settings_store.load_prompt_config()
    return build_session_config(prompts)

@router.post("/frontdesk/tools/{tool_name}",
          response_model=ToolExecutionResponse)
async def execute_front_desk_tool(tool_name: str, request: ToolExecutionRequest):
    """
    Executes a tool call of the realtime front-desk agent. UI effects are
    returned as commands for the browser to apply.
    """
    if tool_name not in front_desk_registry.tools:
        raise HTTPException(status_code=404, detail=f"Unknown front-desk tool '{tool_name}'.")

    console.info(f"Front-desk tool '{tool_name}' requested for session_id: {request.session_id}")
    recorder = UiCommandRecorder()
    context = ToolContext(
        session_id=request.session_id,
        prompts=await settings_store.load_prompt_config(),
        navigator=recorder,
        call_control=recorder,
    )
    if request.session_id:
        context.history = (await session_manager.get_conversation(request.session_id)).messages

    output = await front_desk_registry.execute(tool_name, context, request.arguments)
    return ToolExecutionResponse(output=output, ui_commands=recorder.commands, breadcrumbs=context.breadcrumbs)

@router.post("/supervisor/respond",
          response_model=SupervisorResponse)
async def supervisor_respond(request: SupervisorRequest):
    """Runs one supervisor turn directly, e.g. from the text chat."""
    context = ToolContext(session_id=request.session_id, prompts=await settings_store.load_prompt_config())
    if request.history is not None:
        context.history = request.history
    elif request.session_id:
        context.history = (await session_manager.get_conversation(request.session_id)).messages

    answer = await supervisor_dispatcher.get_next_response(request.relevant_context, context)
    return SupervisorResponse(**answer.model_dump(), breadcrumbs=context.breadcrumbs)
