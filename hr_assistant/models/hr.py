# HR records persisted by the store services.
# Author: NEA HR Engineering
# Date: 2025-07-02
# Version: 0.1.0

from datetime import datetime
from uuid import uuid4
from pydantic import BaseModel, Field
from typing import Literal, Optional


def _new_id() -> str:
    return uuid4().hex


class Employee(BaseModel):
    """An employee, including the current absence flag shown on the dashboard."""
    id: str = Field(default_factory=_new_id)
    name: str
    position: str = "Mitarbeiter"
    department: Optional[str] = None
    email: Optional[str] = None
    phone_number: Optional[str] = None
    start_date: Optional[str] = None
    is_active: bool = True
    krank: bool = False
    absence_reason: str = ""
    reported_at: str = ""


class SickLog(BaseModel):
    """A single sick-leave report."""
    id: str = Field(default_factory=_new_id)
    name: str
    reason: str = "Keine Angabe"
    reported_at: datetime
    status: Literal["active", "resolved"] = "active"


class Vacation(BaseModel):
    """A vacation request."""
    id: str = Field(default_factory=_new_id)
    name: str
    reason: str = "Keine Angabe"
    start_date: str
    end_date: str
    additional_notes: Optional[str] = None
    requested_at: datetime = Field(default_factory=datetime.now)
    status: Literal["requested", "approved", "rejected"] = "requested"


class MailLog(BaseModel):
    """Every attempt to deliver a notification mail, successful or not."""
    id: str = Field(default_factory=_new_id)
    to: str
    subject: str
    body: str
    sent_at: datetime = Field(default_factory=datetime.now)
    status: Literal["success", "failed"]


class NotificationSettings(BaseModel):
    notification_email: str = ""


class PromptConfig(BaseModel):
    """
    Prompt configuration for one request.

    Loaded from the settings store; ``front_desk_prompt`` is None until an
    operator stores a custom prompt, in which case the built-in one is used.
    """
    front_desk_prompt: Optional[str] = None
