# Vacation requests.
# Author: NEA HR Engineering
# Date: 2025-07-03
# Version: 0.1.0

from typing import List, Optional, Tuple

from hr_assistant.models.hr import Vacation
from hr_assistant.services.base_store import RedisHashStore
from hr_assistant.utils.date_parser import DateRangeError, parse_german_date
from hr_assistant.utils.logger import console


class VacationStore(RedisHashStore[Vacation]):
    hash_name = "vacations"
    record_type = Vacation

    async def report_vacation(self, name: str, start_date: str, end_date: str,
                              reason: Optional[str] = None,
                              additional_notes: Optional[str] = None) -> Tuple[bool, str]:
        try:
            start = parse_german_date(start_date)
            end = parse_german_date(end_date)
        except DateRangeError as e:
            return False, str(e)
        if end < start:
            return False, "Das Enddatum des Urlaubs liegt vor dem Startdatum."

        await self.put(Vacation(
            name=name,
            reason=reason or "Keine Angabe",
            start_date=start.date().isoformat(),
            end_date=end.date().isoformat(),
            additional_notes=additional_notes,
        ))
        console.success(f"Vacation stored for {name} ({start:%d.%m.%Y} - {end:%d.%m.%Y}).")
        return True, f"Urlaub für {name} vom {start:%d.%m.%Y} bis {end:%d.%m.%Y} wurde eingetragen."

    async def list_requests(self) -> List[Vacation]:
        return sorted(await self.all(), key=lambda vacation: vacation.start_date)

vacation_store = VacationStore()
