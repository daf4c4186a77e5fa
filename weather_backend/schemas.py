"""
Pydantic schemas for the weather backend.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel


class SubscribeRequest(BaseModel):
    # Left loose so a missing or non-string email is answered with the
    # invalid-email 400 rather than a schema error.
    email: Optional[Any] = None


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    message: str
    error: Optional[str] = None
