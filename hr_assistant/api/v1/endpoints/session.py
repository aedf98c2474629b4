# API endpoints for front-desk sessions and their transcripts.
# Author: NEA HR Engineering
# Date: 2025-07-05
# Version: 0.2.0

from uuid import uuid4
from fastapi import APIRouter

from hr_assistant.services.session_manager import session_manager
from hr_assistant.utils.logger import console
from hr_assistant.models.api_models import NewSessionResponse, TranscriptRequest, TranscriptResponse

router = APIRouter()

@router.post("/new",
          response_model=NewSessionResponse)
def create_new_session():
    """
    Initializes a new session and returns a unique session ID.
    """
    session_id = str(uuid4())
    console.info(f"New session created: {session_id}")
    return NewSessionResponse(
        session_id=session_id,
        message="New session created successfully."
    )

@router.post("/{session_id}/transcript",
          response_model=TranscriptResponse)
async def append_transcript(session_id: str, request: TranscriptRequest):
    """Appends transcript turns reported by the realtime client."""
    conversation = await session_manager.append_messages(session_id, request.messages)
    return TranscriptResponse(session_id=session_id, messages=conversation.messages)

@router.get("/{session_id}/transcript",
         response_model=TranscriptResponse)
async def get_transcript(session_id: str):
    conversation = await session_manager.get_conversation(session_id)
    return TranscriptResponse(session_id=session_id, messages=conversation.messages)
