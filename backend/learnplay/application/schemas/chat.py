"""Pydantic v2 schemas (DTOs) for chat relay and grounded teaching requests."""

from typing import Literal

from pydantic import BaseModel, Field, field_validator


class ChatMessageSchema(BaseModel):
    """A single text chat message."""

    role: str = Field(..., pattern=r"^(system|user|assistant)$")
    content: str


class ChatRelayRequest(BaseModel):
    """Request schema for the /chat relay."""

    messages: list[ChatMessageSchema] = Field(..., description="Conversation messages")
    stream: bool = Field(default=True, description="Accepted for client compatibility; output is always streamed")


class TeachRequest(BaseModel):
    """Request schema for document-grounded lessons and quizzes."""

    query: str = Field(..., min_length=1, description="Topic or question to ground on the document")
    mode: Literal["lesson", "quiz"] = Field(default="lesson")

    @field_validator("query")
    @classmethod
    def validate_query(cls, v: str) -> str:
        """Strip surrounding whitespace; a blank query is rejected."""
        v = v.strip()
        if not v:
            raise ValueError("query must not be blank")
        return v


class HealthResponse(BaseModel):
    ok: bool = True
    model: str
