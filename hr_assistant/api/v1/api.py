# API router of version 1.
# Author: NEA HR Engineering
# Date: 2025-07-05
# Version: 0.2.0

from fastapi import APIRouter
from hr_assistant.api.v1.endpoints import agents, dashboard, session, settings

api_router = APIRouter()

api_router.include_router(session.router, prefix="/session", tags=["Session Management"])

# Front-desk tool execution and supervisor turns
api_router.include_router(agents.router, tags=["Agents"])

api_router.include_router(dashboard.router, prefix="/dashboard", tags=["Dashboard"])

api_router.include_router(settings.router, tags=["Settings"])
