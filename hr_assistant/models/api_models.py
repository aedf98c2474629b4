# Request and response bodies of the HTTP API.
# Author: NEA HR Engineering
# Date: 2025-07-05
# Version: 0.2.0

from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional

from hr_assistant.models.common import Breadcrumb, Message, StatPoint


class NewSessionResponse(BaseModel):
    session_id: str
    message: str


class TranscriptRequest(BaseModel):
    """Transcript items reported by the realtime client."""
    messages: List[Message] = Field(..., description="New transcript turns, oldest first.")


class TranscriptResponse(BaseModel):
    session_id: str
    messages: List[Message]


class SupervisorRequest(BaseModel):
    """
    Body of /v1/supervisor/respond.
    Attributes:
        session_id (str): Session whose stored transcript is used when no history is given.
        relevant_context (str): Key information from the user's latest message.
        history (list): Optional explicit transcript, overrides the stored one.
    """
    session_id: Optional[str] = None
    relevant_context: str = Field(..., description="Key information from the user's latest message.")
    history: Optional[List[Message]] = None


class SupervisorResponse(BaseModel):
    text: Optional[str] = None
    stats: Optional[List[StatPoint]] = None
    error: Optional[str] = None
    breadcrumbs: List[Breadcrumb] = Field(default_factory=list)


class ToolExecutionRequest(BaseModel):
    session_id: Optional[str] = None
    arguments: Dict[str, Any] = Field(default_factory=dict)


class ToolExecutionResponse(BaseModel):
    """
    Result of a front-desk tool call.
    Attributes:
        output (dict): The payload to hand back to the realtime model.
        ui_commands (list): Navigation commands the browser should apply in order.
        breadcrumbs (list): Supervisor breadcrumbs for the transcript view.
    """
    output: Dict[str, Any]
    ui_commands: List[Dict[str, Any]] = Field(default_factory=list)
    breadcrumbs: List[Breadcrumb] = Field(default_factory=list)


class NotificationSettingsUpdate(BaseModel):
    notification_email: str


class PromptUpdate(BaseModel):
    front_desk_prompt: str


class TestEmailRequest(BaseModel):
    subject: str
    body: str
