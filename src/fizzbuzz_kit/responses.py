"""JSON response envelope.

Every ``--json`` CLI output and every todo handler result is wrapped in the
same envelope, so consumers parse success and failure identically.

Envelope shape: {data, error, meta}
"""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel, Field


class MetaInfo(BaseModel):
    """Metadata attached to every response."""

    timestamp: str = Field(..., description="ISO-8601 timestamp")

    @classmethod
    def now(cls) -> MetaInfo:
        return cls(timestamp=datetime.now(UTC).isoformat())


class ErrorDetails(BaseModel):
    """Extra context for an error."""

    field: str | None = Field(None, description="Offending field, if any")
    provided: str | None = Field(None, description="Value that was provided")
    valid_options: list[str] | None = Field(
        None, description="Accepted values if applicable"
    )


class ErrorResponse(BaseModel):
    """Error information in a response."""

    code: str = Field(..., description="Error code (e.g., VAL_001, DB_001)")
    message: str = Field(..., description="Human-readable error message")
    details: ErrorDetails | None = Field(None, description="Additional error context")


class APIResponse[T](BaseModel):
    """Generic response envelope.

    Exactly one of ``data`` and ``error`` is set.

    Success example:
        {
            "data": {"message": "2 item(s) returned", "data": [...], "status": true},
            "error": null,
            "meta": {"timestamp": "2026-01-23T12:00:00Z"}
        }

    Error example:
        {
            "data": null,
            "error": {
                "code": "VAL_001",
                "message": "Invalid number: abc",
                "details": {"field": "numbers", "provided": "abc"}
            },
            "meta": {"timestamp": "2026-01-23T12:00:00Z"}
        }
    """

    data: T | None = Field(None, description="Success payload, null on error")
    error: ErrorResponse | None = Field(
        None, description="Error information, null on success"
    )
    meta: MetaInfo = Field(..., description="Response metadata")

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, data: T) -> APIResponse[T]:
        return cls(data=data, error=None, meta=MetaInfo.now())

    @classmethod
    def failure(
        cls,
        code: str,
        message: str,
        *,
        field: str | None = None,
        provided: str | None = None,
        valid_options: list[str] | None = None,
    ) -> APIResponse[T]:
        details = None
        if field or provided or valid_options:
            details = ErrorDetails(
                field=field, provided=provided, valid_options=valid_options
            )
        return cls(
            data=None,
            error=ErrorResponse(code=code, message=message, details=details),
            meta=MetaInfo.now(),
        )


class ErrorCodes:
    """Standard error codes for responses."""

    # Validation errors (VAL_xxx)
    VAL_001 = "VAL_001"  # Invalid number or range
    VAL_002 = "VAL_002"  # Missing required input

    # IO errors (IO_xxx)
    IO_001 = "IO_001"  # File not found
    IO_002 = "IO_002"  # Invalid JSON

    # Database errors (DB_xxx)
    DB_001 = "DB_001"  # Query failed
