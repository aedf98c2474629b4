# Front-desk tools operating the dashboard UI.
# Author: NEA HR Engineering
# Date: 2025-07-05
# Version: 0.1.0

from datetime import datetime
from pydantic import BaseModel, Field
from typing import Literal, Optional, Type

from hr_assistant.core.context import ToolContext
from hr_assistant.models.common import ToolResult
from hr_assistant.services.employee_store import employee_store
from hr_assistant.services.mail_log_store import mail_log_store
from hr_assistant.services.sick_log_store import sick_log_store
from hr_assistant.tools.base_tool import BaseTool
from hr_assistant.utils.logger import console

HIGHLIGHT_SECONDS = 8

Kpi = Literal["totalEmployees", "activeSickLeave", "totalSickLeaveThisMonth",
              "sicknessRate", "pendingMailLogs", "totalSickLeaveDays"]


async def collect_dashboard_kpis(now: Optional[datetime] = None) -> dict:
    """KPIs of the dashboard header."""
    now = now or datetime.now()
    total_employees = len(await employee_store.all())
    active_logs = await sick_log_store.active()
    this_month = [log for log in active_logs
                  if log.reported_at.month == now.month and log.reported_at.year == now.year]
    sickness_rate = len(active_logs) / total_employees * 100 if total_employees else 0
    failed_mails = [log for log in await mail_log_store.recent(limit=5) if log.status == "failed"]

    return {
        "totalEmployees": total_employees,
        "activeSickLeave": len(active_logs),
        "totalSickLeaveThisMonth": len(this_month),
        "pendingMailLogs": len(failed_mails),
        "sicknessRate": round(sickness_rate, 1),
        "totalSickLeaveDays": len(active_logs),
    }


class ShowDashboardInput(BaseModel):
    highlight_kpi: Optional[Kpi] = Field(default=None, alias="highlightKpi", description="Welche KPI soll hervorgehoben werden")


class ShowDashboardTool(BaseTool):
    name: str = "showDashboard"
    description: str = "Zeigt das Dashboard an und navigiert den Benutzer dorthin."
    args_schema: Type[BaseModel] = ShowDashboardInput

    async def execute(self, context: ToolContext, highlight_kpi: Optional[str] = None) -> ToolResult:
        navigator = context.navigator
        if navigator is None:
            console.error("showDashboard called without a navigator attached.")
            return ToolResult.failure("Konnte das Dashboard nicht anzeigen.")

        navigator.set_site("nea")
        navigator.set_tab("dashboard")
        navigator.highlight_kpi(None)
        if highlight_kpi:
            navigator.highlight_kpi(highlight_kpi, clear_after_seconds=HIGHLIGHT_SECONDS)

        suffix = " und hebe die gewünschte Information hervor" if highlight_kpi else ""
        return ToolResult.ok(f"Ich zeige Ihnen das Dashboard{suffix}.")


class NoArguments(BaseModel):
    pass


class GetDashboardKpisTool(BaseTool):
    name: str = "getDashboardKPIs"
    description: str = "Ruft die aktuellen KPI-Daten vom Dashboard ab."
    args_schema: Type[BaseModel] = NoArguments

    async def execute(self, context: ToolContext) -> ToolResult:
        try:
            kpis = await collect_dashboard_kpis()
        except Exception as e:
            console.exception("Could not collect dashboard KPIs")
            return ToolResult.failure("Konnte die KPI-Daten nicht abrufen.", error=str(e))
        return ToolResult.ok(data=kpis)


class ToggleDarkModeTool(BaseTool):
    name: str = "toggleDarkMode"
    description: str = "Schaltet den Dark Mode der Benutzeroberfläche um (zwischen hell und dunkel)."
    args_schema: Type[BaseModel] = NoArguments

    async def execute(self, context: ToolContext) -> ToolResult:
        if context.navigator is None:
            return ToolResult.failure("Es gab ein Problem beim Umschalten des Dark Mode.")
        context.navigator.toggle_dark_mode()
        return ToolResult.ok("Ich habe den Dark Mode für Sie umgeschaltet. Ist die Ansicht jetzt besser für Sie?")
