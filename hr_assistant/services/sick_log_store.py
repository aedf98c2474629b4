# Sick-leave reports and the statistics built from them.
# Author: NEA HR Engineering
# Date: 2025-07-03
# Version: 0.1.0

from collections import Counter
from datetime import datetime, timedelta
from typing import List, Literal, Optional, Tuple

from hr_assistant.models.common import StatPoint
from hr_assistant.models.hr import SickLog
from hr_assistant.services.base_store import RedisHashStore
from hr_assistant.utils.date_parser import MONTH_NAMES
from hr_assistant.utils.logger import console

GroupBy = Literal["day", "week", "month"]

# Sample data is anchored to this moment
SAMPLE_BASE_DATE = datetime(2025, 6, 29, 10, 0)
SAMPLE_SICK_LOGS = [
    ("Thomas Müller", "Grippe", SAMPLE_BASE_DATE - timedelta(days=2)),
    ("Maria Weber", "Arzttermin", SAMPLE_BASE_DATE - timedelta(days=1)),
    ("Sophie Wagner", "COVID-19 Verdacht", SAMPLE_BASE_DATE),
]


def group_label(moment: datetime, group_by: GroupBy) -> str:
    """German bucket label: '29.06.2025', 'KW 26, 2025' or 'Juni 2025'."""
    if group_by == "month":
        return f"{MONTH_NAMES[moment.month]} {moment.year}"
    if group_by == "week":
        return f"KW {moment.isocalendar()[1]}, {moment.year}"
    return moment.strftime("%d.%m.%Y")


class SickLogStore(RedisHashStore[SickLog]):
    hash_name = "sicklogs"
    record_type = SickLog

    async def has_reported_sick_today(self, name: str, now: Optional[datetime] = None) -> bool:
        today = (now or datetime.now()).date()
        return any(
            log.name == name and log.status == "active" and log.reported_at.date() == today
            for log in await self.all()
        )

    async def report_sick(self, name: str, reason: Optional[str] = None) -> Tuple[bool, str]:
        """
        Files a sick-leave report unless the employee already has an active one today.
        Returns (success, German message); storage errors are reported, not raised.
        """
        try:
            if await self.has_reported_sick_today(name):
                return False, f"{name} hat sich heute bereits krank gemeldet."

            await self.put(SickLog(name=name, reason=reason or "Keine Angabe", reported_at=datetime.now()))
            console.success(f"Sick leave stored for {name}.")
            return True, f"Krankmeldung für {name} wurde erfolgreich gespeichert."
        except Exception:
            console.exception(f"Error reporting sick leave for {name}")
            return False, "Ein Fehler ist aufgetreten bei der Krankmeldung."

    async def active(self) -> List[SickLog]:
        logs = [log for log in await self.all() if log.status == "active"]
        return sorted(logs, key=lambda log: log.reported_at, reverse=True)

    async def resolve(self, log_id: str) -> Optional[SickLog]:
        log = await self.get(log_id)
        if log is None:
            return None
        log.status = "resolved"
        return await self.put(log)

    async def calculate_stats(self, start: datetime, end: datetime, group_by: GroupBy = "day") -> List[StatPoint]:
        """Counts reports with start <= reported_at <= end per bucket, ordered by label."""
        counts = Counter(
            group_label(log.reported_at, group_by)
            for log in await self.all()
            if start <= log.reported_at <= end
        )
        return [StatPoint(name=label, value=value) for label, value in sorted(counts.items())]

    async def seed(self) -> List[SickLog]:
        await self.clear()
        return [
            await self.put(SickLog(name=name, reason=reason, reported_at=reported_at))
            for name, reason, reported_at in SAMPLE_SICK_LOGS
        ]

sick_log_store = SickLogStore()
