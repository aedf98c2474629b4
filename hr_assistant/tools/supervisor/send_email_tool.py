# Tool to notify HR about a sick-leave report or a vacation request.
# Author: NEA HR Engineering
# Date: 2025-07-04
# Version: 0.1.0

from pydantic import BaseModel, Field
from typing import Literal, Optional, Type

from hr_assistant.core.context import ToolContext
from hr_assistant.models.common import ToolResult
from hr_assistant.services.email_templates import render_sick_email, render_vacation_email
from hr_assistant.tasks import deliver_notification_email
from hr_assistant.tools.base_tool import BaseTool
from hr_assistant.utils.logger import console


class SendEmailInput(BaseModel):
    type: Literal["sick", "vacation"] = Field(..., description="Art der Meldung (Krankheit oder Urlaub)")
    name: str = Field(..., description="Name des Mitarbeiters")
    reason: Optional[str] = Field(default=None, description="Grund der Abwesenheit (Krankheit oder Urlaub)")
    expected_duration: Optional[str] = Field(default=None, alias="expectedDuration", description="Voraussichtliche Dauer (nur für Krankheit)")
    start_date: Optional[str] = Field(default=None, alias="startDate", description="Startdatum (nur für Urlaub)")
    end_date: Optional[str] = Field(default=None, alias="endDate", description="Enddatum (nur für Urlaub)")
    additional_notes: Optional[str] = Field(default=None, alias="additionalNotes", description="Weitere Informationen")


class SendEmailTool(BaseTool):
    """
    Renders the notification and hands it to the Celery worker. The mail log
    records whether delivery eventually succeeded.
    """
    name: str = "sendEmail"
    description: str = "Sendet eine Benachrichtigung an HR über Krankheit oder Urlaub."
    args_schema: Type[BaseModel] = SendEmailInput

    async def execute(self, context: ToolContext, type: str, name: str,
                      reason: Optional[str] = None, expected_duration: Optional[str] = None,
                      start_date: Optional[str] = None, end_date: Optional[str] = None,
                      additional_notes: Optional[str] = None) -> ToolResult:
        if type == "sick":
            subject, body = render_sick_email(name, reason, expected_duration, additional_notes)
        else:
            subject, body = render_vacation_email(name, reason, start_date, end_date, additional_notes)

        task = deliver_notification_email.delay(subject, body)
        console.info(f"Dispatched notification '{subject}' to Celery worker (task {task.id}).")
        return ToolResult.ok("Die Benachrichtigung an HR wurde versendet.", data={"taskId": task.id})
