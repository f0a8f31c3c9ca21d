"""
Error payload models.

``ErrorResponse`` is the body of every non-2xx response. ``ClientErrorReport``
is what the web frontend posts to ``/api/errors`` when it crashes.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class FieldError(BaseModel):
    field: str
    message: str


class ErrorResponse(BaseModel):
    error: str
    message: str
    details: Optional[List[FieldError]] = None
    error_id: Optional[str] = None


class ClientErrorReport(BaseModel):
    name: str = Field(min_length=1)
    message: str = Field(min_length=1)
    stack: Optional[str] = None
    component_stack: Optional[str] = None
    timestamp: str
    user_agent: str = Field(default="unknown")
    url: str = Field(default="unknown")


class ClientErrorAck(BaseModel):
    success: bool
    message: str
