# FastAPI application serving the HR assistant backend.
# Author: NEA HR Engineering
# Date: 2025-07-05
# Version: 0.2.0

from fastapi import FastAPI
from hr_assistant.api.v1.api import api_router
from hr_assistant.utils.logger import console

app = FastAPI(
    title="NEA HR Assistant",
    version="0.2.0",
    description="Backend of the NEA HR voice assistant: front-desk tools, supervisor agent and dashboard data.",
)

@app.get("/", summary="Health Check", tags=["Status"])
def read_root():
    """Root endpoint to check if the service is alive."""
    console.info("Health check endpoint was hit.")
    return {"message": "NEA HR Assistant is alive and running!"}

app.include_router(api_router, prefix="/v1")
