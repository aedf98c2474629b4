# Common models shared by the agents, the tool layer and the API.
# Author: NEA HR Engineering
# Date: 2025-07-02
# Version: 0.2.0

from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional, Literal

Role = Literal["system", "user", "assistant"]


class Message(BaseModel):
    """
    One turn of the front-desk transcript.
    Attributes:
        type (str): Item kind, always 'message' for transcript turns.
        role (Role): The speaker (system, user or assistant).
        content (str): The spoken or typed text.
    """
    type: Literal["message"] = "message"
    role: Role = Field(..., description="The role of the message sender.")
    content: str = Field(default="", description="The content of the message.")


class Conversation(BaseModel):
    """A front-desk session transcript as persisted in Redis."""
    session_id: Optional[str] = None
    messages: List[Message] = Field(default_factory=list, description="The history of messages in the conversation.")


class StatPoint(BaseModel):
    """One bucket of the sick-leave statistic, e.g. ('August 2025', 3)."""
    name: str
    value: int


class ToolResult(BaseModel):
    """
    Tagged result returned by every tool.

    Failures are ordinary results with ``success=False`` and a German message
    for the caller, so a failing tool never aborts the supervisor turn.
    """
    success: bool = True
    message: Optional[str] = None
    data: Optional[Dict[str, Any]] = None
    stats: Optional[List[StatPoint]] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, message: Optional[str] = None, **fields: Any) -> "ToolResult":
        return cls(success=True, message=message, **fields)

    @classmethod
    def failure(cls, message: str, error: Optional[str] = None, **fields: Any) -> "ToolResult":
        return cls(success=False, message=message, error=error, **fields)

    def to_payload(self) -> Dict[str, Any]:
        """The JSON-ready mapping that is sent back to the model."""
        return self.model_dump(exclude_none=True)


class Breadcrumb(BaseModel):
    """A transcript breadcrumb describing a supervisor tool call or its result."""
    title: str
    data: Optional[Any] = None


class SupervisorAnswer(BaseModel):
    """
    Outcome of one supervisor turn.
    Attributes:
        text (str): The final assistant text, absent on failure.
        stats (list): The first stats payload produced by a tool during the turn.
        error (str): Set when the turn failed.
    """
    text: Optional[str] = None
    stats: Optional[List[StatPoint]] = None
    error: Optional[str] = None

    @property
    def failed(self) -> bool:
        return self.error is not None
