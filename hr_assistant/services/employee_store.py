# Employee records and their absence status.
# Author: NEA HR Engineering
# Date: 2025-07-02
# Version: 0.1.0

from datetime import datetime
from typing import Any, Dict, List, Optional

from hr_assistant.models.hr import Employee
from hr_assistant.services.base_store import RedisHashStore
from hr_assistant.utils.logger import console

SAMPLE_EMPLOYEES = [
    Employee(name="Anna Schmidt", position="HR Manager", department="Human Resources",
             email="a.schmidt@nea-gmbh.de", phone_number="+49 176 1234 5671", start_date="2020-01-15"),
    Employee(name="Thomas Müller", position="Senior Developer", department="IT",
             email="t.mueller@nea-gmbh.de", phone_number="+49 176 1234 5672", start_date="2019-03-20"),
    Employee(name="Maria Weber", position="Marketing Specialist", department="Marketing",
             email="m.weber@nea-gmbh.de", phone_number="+49 176 1234 5673", start_date="2021-06-10"),
    Employee(name="Lars Fischer", position="Sales Manager", department="Sales",
             email="l.fischer@nea-gmbh.de", phone_number="+49 176 1234 5674", start_date="2018-09-01"),
    Employee(name="Sophie Wagner", position="Product Manager", department="Product",
             email="s.wagner@nea-gmbh.de", phone_number="+49 176 1234 5675", start_date="2020-11-15"),
]


class EmployeeStore(RedisHashStore[Employee]):
    hash_name = "employees"
    record_type = Employee

    async def add(self, employee: Employee) -> Employee:
        employee.is_active = True
        return await self.put(employee)

    async def update(self, employee_id: str, updates: Dict[str, Any]) -> Optional[Employee]:
        employee = await self.get(employee_id)
        if employee is None:
            return None
        return await self.put(employee.model_copy(update=updates))

    async def find_by_name(self, name: str) -> Optional[Employee]:
        for employee in await self.all():
            if employee.name == name:
                return employee
        return None

    async def update_absence(self, name: str, is_krank: bool, reason: Optional[str] = None,
                             reported_at: Optional[str] = None) -> bool:
        """
        Sets or clears the sick flag of an employee.
        Returns False when no employee with that exact name exists.
        """
        employee = await self.find_by_name(name)
        if employee is None:
            console.error(f"Employee not found: {name}")
            return False

        if is_krank:
            employee.krank = True
            employee.absence_reason = reason or ""
            employee.reported_at = reported_at or datetime.now().isoformat()
        else:
            employee.krank = False
            employee.absence_reason = ""
            employee.reported_at = ""
        await self.put(employee)
        return True

    async def absent(self) -> List[Employee]:
        return [employee for employee in await self.all() if employee.krank]

    async def seed(self) -> List[Employee]:
        """Replaces all employees with the sample staff."""
        await self.clear()
        return [await self.put(employee.model_copy()) for employee in SAMPLE_EMPLOYEES]

employee_store = EmployeeStore()
