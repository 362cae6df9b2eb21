"""
Noteboard Backend: Pydantic Request/Response Schemas
=====================================================

What:  Pydantic models defining the API contract between client and service.
How:   FastAPI uses these models to parse request bodies, serialize responses
       and generate OpenAPI documentation. The client package validates
       server responses with the same models.

Wire format:
    Notes travel as {id, title, content, color, createdAt, updatedAt}.
    Timestamp fields use camelCase aliases on the wire and snake_case in
    Python; both names are accepted when validating.

Required-field rules for creation live in NoteService rather than in the
request schema, so a missing title is reported as a 400 validation_error
with the offending field instead of FastAPI's generic 422.
"""

import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class NoteCreate(BaseModel):
    """
    Body of POST /notes.

    title and content are declared optional so NoteService can reject a
    missing or empty value with a field-specific ValidationError.
    """
    title: Optional[str] = Field(default=None, description="Note title (required, non-empty)")
    content: Optional[str] = Field(default=None, description="Note body (required, non-empty)")
    color: Optional[str] = Field(
        default=None,
        description="Hex color code; the configured default is used when omitted",
    )


class NoteUpdate(BaseModel):
    """
    Body of PATCH /notes/{id}: any subset of title, content and color.

    No field-level validation: empty strings overwrite the stored value.
    Fields sent as null are treated as not supplied.
    """
    title: Optional[str] = Field(default=None, description="New title")
    content: Optional[str] = Field(default=None, description="New body")
    color: Optional[str] = Field(default=None, description="New hex color code")

    def changes(self) -> Dict[str, str]:
        """Only the fields the client actually supplied with a non-null value."""
        return self.model_dump(exclude_unset=True, exclude_none=True)


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class NoteResponse(BaseModel):
    """
    Full representation of a persisted note.

    Returned by every note endpoint except DELETE, and built by repositories
    from their own storage objects (ORM rows or in-memory records).
    """
    id: str = Field(description="Store-assigned note identifier")
    title: str = Field(description="Note title")
    content: str = Field(description="Note body")
    color: str = Field(description="Hex color code")
    created_at: datetime = Field(alias="createdAt", description="Creation time (UTC ISO 8601)")
    updated_at: datetime = Field(alias="updatedAt", description="Last modification time (UTC ISO 8601)")

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    @field_validator("id", mode="before")
    @classmethod
    def stringify_id(cls, v: Any) -> Any:
        """ORM rows carry uuid.UUID ids; the wire format is a plain string."""
        if isinstance(v, uuid.UUID):
            return str(v)
        return v

    @field_validator("created_at", "updated_at")
    @classmethod
    def assume_utc(cls, v: datetime) -> datetime:
        """SQLite hands back naive datetimes; every stored timestamp is UTC."""
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v


# ══════════════════════════════════════════════════════════════════════════
# Error / Health Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    Standardized error response format for all API errors.

    Example:
        {
            "error": "not_found",
            "message": "note with ID '000' was not found",
            "request_id": "a1b2c3d4"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Health check response showing service and store status."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Store connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
