"""Interview conversation endpoint."""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from config import CHAT_MAX_TOKENS
from interview.builder import build_chat_messages
from interview.prompts import INTERVIEW_SYSTEM_PROMPT
from llm.client import ModelClient, get_client
from schemas.chat import ChatRequest, ChatResponse
from schemas.errors import ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["interview"])


def _error(status: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status, content={"error": message})


@router.post("/chat", response_model=ChatResponse, responses={500: {"model": ErrorResponse}})
async def chat(body: ChatRequest, model: ModelClient = Depends(get_client)):
    """Send the conversation so far and return the interviewer's next turn.

    The model text is passed back unmodified, including the completion marker.
    """
    try:
        text = await model.complete(
            system=INTERVIEW_SYSTEM_PROMPT,
            messages=build_chat_messages(body.messages),
            max_tokens=CHAT_MAX_TOKENS,
        )
    except Exception:
        logger.exception("Chat error")
        return _error(500, "Failed to get response.")

    return ChatResponse(response=text)
