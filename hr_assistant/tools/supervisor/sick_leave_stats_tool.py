# Tool to report sick-leave statistics for a period.
# Author: NEA HR Engineering
# Date: 2025-07-04
# Version: 0.1.0

from pydantic import BaseModel, Field
from typing import Literal, Type

from hr_assistant.core.context import ToolContext
from hr_assistant.models.common import ToolResult
from hr_assistant.services.sick_log_store import sick_log_store
from hr_assistant.tools.base_tool import BaseTool
from hr_assistant.utils.date_parser import DateRangeError, parse_date_range
from hr_assistant.utils.logger import console

STATS_ERROR_PREFIX = "Es ist ein Fehler bei der Abfrage der Krankmeldungen aufgetreten. "


class SickLeaveStatsInput(BaseModel):
    period: str = Field(..., description="Der Zeitraum für die Statistik (z.B. 'August 2025', '28.06.2025 - 30.06.2025')")
    group_by: Literal["day", "week", "month"] = Field(..., alias="groupBy", description="Wie die Daten gruppiert werden sollen")


class GetSickLeaveStatsTool(BaseTool):
    """
    Counts sick-leave reports per day, week or month. The stats payload is
    handed to the dashboard along with the supervisor's answer.
    """
    name: str = "getSickLeaveStats"
    description: str = "Tool zum Abrufen von Krankmeldungsstatistiken für einen bestimmten Zeitraum. Zeigt die Anzahl der Krankmeldungen pro Tag/Woche/Monat an."
    args_schema: Type[BaseModel] = SickLeaveStatsInput

    async def execute(self, context: ToolContext, period: str, group_by: str) -> ToolResult:
        console.info(f"Executing tool '{self.name}' for period '{period}' grouped by {group_by}")
        try:
            start, end = parse_date_range(period)
        except DateRangeError as e:
            return ToolResult.failure(STATS_ERROR_PREFIX + str(e), stats=[])

        stats = await sick_log_store.calculate_stats(start, end, group_by)
        if not stats:
            return ToolResult.ok(
                f"Für den Zeitraum {period} liegen keine Krankmeldungen vor. Bitte wählen Sie einen anderen "
                "Zeitraum oder prüfen Sie, ob die Daten korrekt erfasst wurden.",
                stats=[],
            )

        details = "\n".join(f"{stat.name}: {stat.value} Krankmeldungen" for stat in stats)
        console.success(f"Tool '{self.name}' found {len(stats)} buckets.")
        return ToolResult.ok(
            f"Ich habe die Krankmeldungsstatistik für {period} im Statistik-Panel angezeigt.\n\n"
            f"Hier sind die Details:\n{details}",
            stats=stats,
        )
