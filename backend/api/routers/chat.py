"""Chat API endpoints.

Routes:
- POST /api/chat - Answer a question about the portfolio

Dependencies: backend.application.services.chat_service
System role: Chat messaging HTTP API
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from backend.api.deps import get_chat_service
from backend.application.services.chat_service import ChatService
from backend.core.exceptions import ValidationError
from backend.models.chat import ChatRequest, ChatResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["chat"])


@router.post("/chat", response_model=ChatResponse)
async def chat(
    request: ChatRequest,
    chat_service: ChatService = Depends(get_chat_service),
) -> ChatResponse:
    """Answer a chat message from the portfolio.

    Flow:
    1. Validate the message through ChatService
    2. Retrieve relevant chunks and compose the answer

    Args:
        request: ChatRequest with message
        chat_service: Injected ChatService

    Returns:
        ChatResponse: Answer text

    Raises:
        HTTPException(400): Message missing or blank
        HTTPException(500): Processing error
    """
    try:
        return await chat_service.process_chat(request.message)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except Exception as e:
        logger.error(f"{__name__}:chat - {type(e).__name__}: {e}")
        raise HTTPException(
            status_code=500,
            detail="Failed to process chat message",
        )
