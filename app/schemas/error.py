"""Standardized error response schema."""

from datetime import datetime

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Error body shared by every failed request."""

    timestamp: datetime = Field(..., description="When the error was produced")
    status: int = Field(..., description="HTTP status code")
    error: str = Field(..., description="Short category label, e.g. 'Not Found'")
    message: str = Field(..., description="Human-readable error message")
