# Tool to file a sick-leave report.
# Author: NEA HR Engineering
# Date: 2025-07-04
# Version: 0.1.0

from pydantic import BaseModel, Field
from typing import Optional, Type

from hr_assistant.core.context import ToolContext
from hr_assistant.models.common import ToolResult
from hr_assistant.services.sick_log_store import sick_log_store
from hr_assistant.tools.base_tool import BaseTool
from hr_assistant.utils.logger import console


class ReportSickInput(BaseModel):
    name: str = Field(..., description="Der vollständige Name des Mitarbeiters (z.B. 'Julia Schäfer').")
    reason: Optional[str] = Field(default=None, description="Der Grund für die Abwesenheit (z.B. 'Grippe', 'Arzttermin').")


class ReportEmployeeSickTool(BaseTool):
    """Creates a new entry in the sick-log collection."""
    name: str = "reportEmployeeSick"
    description: str = "Tool zum Melden einer Krankmeldung eines Mitarbeiters. Dies erstellt einen neuen Eintrag in der Krankmeldungen-Sammlung."
    args_schema: Type[BaseModel] = ReportSickInput

    async def execute(self, context: ToolContext, name: str, reason: Optional[str] = None) -> ToolResult:
        console.info(f"Executing tool '{self.name}' for {name}")
        success, message = await sick_log_store.report_sick(name, reason)
        return ToolResult(success=success, message=message)
