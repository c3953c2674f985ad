"""
Notebox - Pydantic Schemas
==========================

What:  The Note record plus the response envelopes used by the API.
Why:   The store file is untyped JSON on disk; validating it against an
       explicit two-field schema on every read turns a hand-edited or
       truncated file into a clean StoreCorruptedError instead of a
       KeyError deep inside a handler.
Who:   Note is shared by the store, the service layer and GET /notes.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class Note(BaseModel):
    """
    What:  A single name/text pair, the only persisted entity.

    name is compared by exact string equality; no trimming or case-folding.
    """
    name: str = Field(description="Unique note name, chosen by the client")
    text: str = Field(description="Note content")

    model_config = ConfigDict(extra="forbid")


# What: Validator/serializer for the whole store file
# Why TypeAdapter: the file's root is a bare JSON array, not an object
NoteList = TypeAdapter(List[Note])


# ══════════════════════════════════════════════════════════════════════════
# Error & Health Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    What:  Body of every 500 response.

    Example:
        {
            "error": "server_error",
            "message": "An internal error occurred. Please try again later.",
            "request_id": "1f3a9c2e"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """
    What:  Health check response showing service and store status.
    Who:   Returned by GET /health.
    """
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    store: str = Field(description="Store file status: ok, missing, unreadable")
    notes: Optional[int] = Field(default=None, description="Number of stored notes when readable")
    uptime_seconds: float = Field(description="Seconds since service started")
