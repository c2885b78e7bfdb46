"""
Pydantic schemas for the REST surface.

This module contains:
- Request models for incoming data validation
- Response models for API responses
"""

from typing import Any, Optional

from pydantic import BaseModel, Field


# =============================================================================
# Pydantic Request Models
# =============================================================================

class AddMessageRequest(BaseModel):
    """
    Body of POST /messages.

    Only presence is checked here; blank content is rejected by the store
    so REST and GraphQL callers get the same rule.
    """
    content: str = Field(..., description="Message text")

    model_config = {
        "json_schema_extra": {
            "examples": [{"content": "hello"}]
        }
    }


# =============================================================================
# Pydantic Response Models
# =============================================================================

class MessageResponse(BaseModel):
    """A single stored message."""
    id: str = Field(..., description="Store-assigned identifier")
    content: str = Field(..., description="Message text")

    model_config = {"from_attributes": True}


class MessagesListResponse(BaseModel):
    """
    Response model for GET /messages.

    Contains:
    - data: every stored message in insertion order
    - total: number of stored messages
    """
    data: list[MessageResponse] = Field(
        default_factory=list,
        description="List of messages"
    )
    total: int = Field(..., ge=0, description="Total messages stored")


class ErrorResponse(BaseModel):
    """Response model for error responses."""
    detail: str = Field(..., description="Error description")
    error: Optional[str] = Field(None, description="Machine-readable error code")
    context: dict[str, Any] = Field(default_factory=dict, description="Details about the rejected input")


class HealthResponse(BaseModel):
    """Response model for health check endpoints."""
    status: str = Field(..., description="Health status")
    reason: Optional[str] = Field(None, description="Reason if not ready")
