"""
Entry point for running the HR assistant API.

Usage:
    python -m hr_assistant
"""
import uvicorn

if __name__ == "__main__":
    uvicorn.run(
        "hr_assistant.main:app",
        host="0.0.0.0",
        port=8000,
        log_level="info"
    )
