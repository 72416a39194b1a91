"""Shared Pydantic schemas for common API elements."""
from __future__ import annotations

from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    """Successful response carrying a human readable message."""

    success: bool = True
    message: str


class ErrorResponse(BaseModel):
    """Body of every failed API call."""

    success: bool = False
    message: str = Field(..., description="Generic failure description.")
