# API endpoints backing the HR dashboard.
# Author: NEA HR Engineering
# Date: 2025-07-05
# Version: 0.1.0

from typing import List, Literal, Optional
from fastapi import APIRouter, HTTPException, Query

from hr_assistant.models.common import StatPoint
from hr_assistant.models.hr import Employee, MailLog, SickLog, Vacation
from hr_assistant.services.employee_store import employee_store
from hr_assistant.services.mail_log_store import mail_log_store
from hr_assistant.services.sick_log_store import sick_log_store
from hr_assistant.services.vacation_store import vacation_store
from hr_assistant.tools.front_desk.dashboard_tools import collect_dashboard_kpis
from hr_assistant.utils.date_parser import DateRangeError, parse_date_range
from hr_assistant.utils.logger import console

router = APIRouter()

@router.get("/kpis")
async def get_kpis():
    return await collect_dashboard_kpis()

@router.get("/sick-logs", response_model=List[SickLog])
async def list_sick_logs():
    """Active sick-leave reports, newest first."""
    return await sick_log_store.active()

@router.post("/sick-logs/{log_id}/resolve", response_model=SickLog)
async def resolve_sick_log(log_id: str):
    log = await sick_log_store.resolve(log_id)
    if log is None:
        raise HTTPException(status_code=404, detail=f"Sick log '{log_id}' not found.")
    console.info(f"Sick log {log_id} resolved.")
    return log

@router.get("/stats", response_model=List[StatPoint])
async def get_sick_leave_stats(period: str, group_by: Literal["day", "week", "month"] = Query("day")):
    try:
        start, end = parse_date_range(period)
    except DateRangeError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return await sick_log_store.calculate_stats(start, end, group_by)

@router.get("/vacations", response_model=List[Vacation])
async def list_vacations():
    return await vacation_store.list_requests()

@router.get("/mail-logs", response_model=List[MailLog])
async def list_mail_logs(limit: Optional[int] = Query(default=None, ge=1)):
    return await mail_log_store.recent(limit=limit)

@router.get("/employees", response_model=List[Employee])
async def list_employees():
    return sorted(await employee_store.all(), key=lambda employee: employee.name)

@router.post("/employees", response_model=Employee)
async def add_employee(employee: Employee):
    return await employee_store.add(employee)

@router.delete("/employees/{employee_id}")
async def delete_employee(employee_id: str):
    if not await employee_store.delete(employee_id):
        raise HTTPException(status_code=404, detail=f"Employee '{employee_id}' not found.")
    return {"deleted": employee_id}

@router.post("/seed")
async def seed_sample_data():
    """Replaces employees and sick logs with the sample data set."""
    employees = await employee_store.seed()
    sick_logs = await sick_log_store.seed()
    console.success(f"Seeded {len(employees)} employees and {len(sick_logs)} sick logs.")
    return {"employees": len(employees), "sickLogs": len(sick_logs)}
