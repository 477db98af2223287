"""
API handlers: validate the chat request, call the pipeline, map faults to HTTP.

Responsibility: Bridge HTTP types and services. Lives in the API layer so the
pipeline stays free of FastAPI/HTTP types.
"""

import logging

from fastapi import status
from fastapi.responses import JSONResponse

from answerbot.schemas.chat import ChatRequest, ChatResponse
from answerbot.services.pipeline import ResolutionPipeline

logger = logging.getLogger(__name__)

NO_MESSAGE_REPLY = "No message received."
INTERNAL_ERROR_REPLY = "Internal server error."


def _error(status_code: int, reply: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ChatResponse(reply=reply).model_dump())


def handle_chat(body: ChatRequest | None, pipeline: ResolutionPipeline) -> ChatResponse | JSONResponse:
    """Resolve one message. 400 when it is missing, 500 when resolution blows up."""
    message = body.message if body is not None else None
    if not message:
        return _error(status.HTTP_400_BAD_REQUEST, NO_MESSAGE_REPLY)
    logger.info("[api:chat] IN  message=%r", message)
    try:
        reply = pipeline.resolve(message)
    except Exception:
        logger.exception("Resolution failed")
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_REPLY)
    return ChatResponse(reply=reply)
