"""Request descriptor and response envelope schemas."""

from __future__ import annotations

from datetime import UTC, datetime
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field


class HttpMethod(StrEnum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


class RequestDescriptor(BaseModel):
    """A fully resolved call, ready to hand to the transport."""

    method: HttpMethod
    path: str = Field(min_length=1)
    body: dict[str, Any] | list[Any] | None = None
    query: dict[str, Any] | None = None


class ResponseMeta(BaseModel):
    """Transport-side details about a completed call."""

    endpoint: str
    status_code: int
    request_id: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))


class ApiResponse(BaseModel):
    """Envelope wrapping every successful response body."""

    success: bool = True
    data: Any = None
    message: str = "Request successful"
    errors: list[Any] = Field(default_factory=list)
    meta: ResponseMeta
