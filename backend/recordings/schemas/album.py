"""
Recordings API: Pydantic Request/Response Schemas
==================================================

What:  Pydantic models defining the HTTP contract.
How:   FastAPI validates request bodies against AlbumCreate, serializes
       responses through AlbumResponse, and documents both in OpenAPI.
Who:   Route handlers and the album store (which returns AlbumResponse).

Album JSON shape:
    {"id": 1, "title": "Blue Train", "artist": "John Coltrane", "price": 56.99}
"""

from typing import Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class AlbumCreate(BaseModel):
    """
    What:  Body of POST /albums.
    How:   Every field falls back to its zero value when absent and unknown
           keys are ignored, so only malformed JSON or a wrongly typed value
           is rejected. A client-supplied `id` is accepted and discarded;
           the database assigns the real one.

    Strict mode: "9.99" or true for `price`, or "5" for `id`, is a type
    error, not a conversion. JSON integers are still valid prices.
    """
    id: int = Field(default=0, description="Ignored on create; assigned by the store")
    title: str = Field(default="", description="Album title")
    artist: str = Field(default="", description="Artist name")
    price: float = Field(default=0.0, description="Album price")

    model_config = {"extra": "ignore", "strict": True}


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class AlbumResponse(BaseModel):
    """Full representation of a stored album."""
    id: int = Field(description="Store-assigned album identifier")
    title: str = Field(description="Album title")
    artist: str = Field(description="Artist name")
    price: float = Field(description="Album price")

    model_config = {"from_attributes": True}


class ErrorResponse(BaseModel):
    """
    What:  Standardized error response format for all API errors.

    Fields:
        error: Machine-readable error code (e.g., "validation_error", "not_found")
        message: Human-readable description
        details: Optional extra context (e.g., which parameter failed parsing)
        request_id: Correlation ID for tracing this error in server logs
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Health check response showing service and database status."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
