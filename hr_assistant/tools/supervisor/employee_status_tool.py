# Tool to set or clear the sick flag shown on the dashboard.
# Author: NEA HR Engineering
# Date: 2025-07-04
# Version: 0.1.0

from pydantic import BaseModel, Field
from typing import Optional, Type

from hr_assistant.core.context import ToolContext
from hr_assistant.models.common import ToolResult
from hr_assistant.services.employee_store import employee_store
from hr_assistant.tools.base_tool import BaseTool


class UpdateKrankStatusInput(BaseModel):
    name: str = Field(..., description="Der vollständige Name des Mitarbeiters (z.B. 'Julia Schäfer').")
    is_krank: bool = Field(..., alias="isKrank", description="Der neue Krankheitsstatus (true = krank, false = nicht krank).")
    reason: Optional[str] = Field(default=None, description="Der Grund für die Abwesenheit (z.B. 'Grippe', 'Arzttermin').")
    reported_at: Optional[str] = Field(default=None, alias="reportedAt", description="Der Zeitpunkt der Krankmeldung (ISO-String). Wenn nicht angegeben, wird der aktuelle Zeitpunkt verwendet.")


class UpdateEmployeeKrankStatusTool(BaseTool):
    name: str = "updateEmployeeKrankStatus"
    description: str = "Tool zum Aktualisieren des Krankheitsstatus eines Mitarbeiters mit Grund und Zeitpunkt."
    args_schema: Type[BaseModel] = UpdateKrankStatusInput

    async def execute(self, context: ToolContext, name: str, is_krank: bool,
                      reason: Optional[str] = None, reported_at: Optional[str] = None) -> ToolResult:
        updated = await employee_store.update_absence(name, is_krank, reason=reason, reported_at=reported_at)
        if not updated:
            return ToolResult.failure(f"Mitarbeiter {name} wurde nicht gefunden.")
        status = "krank gemeldet" if is_krank else "wieder als anwesend eingetragen"
        return ToolResult.ok(f"{name} wurde {status}.")
