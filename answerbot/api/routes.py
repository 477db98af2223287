"""
API route aggregator: register endpoints; no logic, only delegate to handlers.
"""

import logging

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse, PlainTextResponse

from answerbot.api.dependencies import get_pipeline
from answerbot.api.handlers import handle_chat
from answerbot.schemas.chat import ChatRequest, ChatResponse
from answerbot.services.pipeline import ResolutionPipeline

logger = logging.getLogger(__name__)
router = APIRouter()


# --- System ---

@router.get("/", tags=["system"], response_class=PlainTextResponse)
def root() -> str:
    return "Backend is live and working!"


@router.get("/health", tags=["system"])
def health():
    return {"ok": True}


# --- Chat ---

@router.post(
    "/chat",
    response_model=ChatResponse,
    tags=["chat"],
    summary="Answer a question",
    description="Personality replies, then the local Q&A corpus, then the LLM, then web search. 400 when message is missing, 500 on unexpected failure.",
)
def post_chat(
    body: ChatRequest | None = Body(None),
    pipeline: ResolutionPipeline = Depends(get_pipeline),
) -> ChatResponse | JSONResponse:
    return handle_chat(body, pipeline)
