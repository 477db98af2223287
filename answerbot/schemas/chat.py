"""Schemas for the chat endpoint."""

from typing import Any

from pydantic import BaseModel, Field, field_validator


class ChatRequest(BaseModel):
    """Request body for POST /chat. A missing, empty or non-string message is answered with 400, not 422."""

    message: str | None = Field(None, description="User question.")

    @field_validator("message", mode="before")
    @classmethod
    def _non_string_is_missing(cls, value: Any) -> Any:
        return value if isinstance(value, str) else None


class ChatResponse(BaseModel):
    """Response for POST /chat (also used for the 400/500 bodies)."""

    reply: str = Field(..., description="Resolved answer, or a fixed error message.")
