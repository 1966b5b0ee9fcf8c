"""Envelope wrapping every JSON payload served by the portfolio API."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class ErrorDetail(BaseModel):
    """Failure description; ``code`` matches the loader's error codes."""

    code: str = Field(..., description="Machine readable error code")
    message: str = Field(..., description="Human readable error message")
    details: dict[str, Any] | None = Field(
        default=None, description="Offending source, field or slug when known"
    )


class ResponseEnvelope(BaseModel, Generic[T]):
    """Uniform ``{success, data | error, timestamp}`` response body."""

    success: bool = Field(True, description="False when the content could not be served")
    data: T | None = Field(default=None, description="Requested projects or status")
    error: ErrorDetail | None = Field(default=None, description="Set when success is False")
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Time the response was rendered",
    )

    @classmethod
    def success_payload(cls, data: T | None = None) -> "ResponseEnvelope[T]":
        return cls(success=True, data=data)

    @classmethod
    def error_payload(
        cls, code: str, message: str, details: dict[str, Any] | None = None
    ) -> "ResponseEnvelope[Any]":
        return cls(
            success=False,
            error=ErrorDetail(code=code, message=message, details=details),
        )
