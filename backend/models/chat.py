"""
Chat domain models and schemas.

Request/response schemas for the portfolio chat endpoint.

Dependencies: pydantic
System role: Chat API contracts
"""

from pydantic import BaseModel, Field


class ChatRequest(BaseModel):
    """Request schema for chat messages."""

    message: str | None = Field(default=None, description="User question about the portfolio owner")


class ChatResponse(BaseModel):
    """Response schema for chat messages."""

    response: str = Field(description="Generated or templated answer")
