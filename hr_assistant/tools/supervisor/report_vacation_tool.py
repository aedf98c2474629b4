# Tool to file a vacation request.
# Author: NEA HR Engineering
# Date: 2025-07-04
# Version: 0.1.0

from pydantic import BaseModel, Field
from typing import Optional, Type

from hr_assistant.core.context import ToolContext
from hr_assistant.models.common import ToolResult
from hr_assistant.services.vacation_store import vacation_store
from hr_assistant.tools.base_tool import BaseTool


class ReportVacationInput(BaseModel):
    name: str = Field(..., description="Der vollständige Name des Mitarbeiters (z.B. 'Julia Schäfer').")
    reason: Optional[str] = Field(default=None, description="Der Grund für den Urlaub (z.B. 'Erholung', 'Familienfeier').")
    start_date: str = Field(..., alias="startDate", description="Startdatum des Urlaubs (YYYY-MM-DD).")
    end_date: str = Field(..., alias="endDate", description="Enddatum des Urlaubs (YYYY-MM-DD).")
    additional_notes: Optional[str] = Field(default=None, alias="additionalNotes", description="Weitere Informationen zum Urlaub (optional).")


class ReportEmployeeVacationTool(BaseTool):
    name: str = "reportEmployeeVacation"
    description: str = "Tool zum Melden eines Urlaubs eines Mitarbeiters. Dies erstellt einen neuen Eintrag in der Urlaubs-Sammlung."
    args_schema: Type[BaseModel] = ReportVacationInput

    async def execute(self, context: ToolContext, name: str, start_date: str, end_date: str,
                      reason: Optional[str] = None, additional_notes: Optional[str] = None) -> ToolResult:
        success, message = await vacation_store.report_vacation(
            name, start_date, end_date, reason=reason, additional_notes=additional_notes
        )
        return ToolResult(success=success, message=message)
