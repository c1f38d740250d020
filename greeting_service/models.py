"""Request and response models for the greeting API."""

from pydantic import BaseModel, Field


class RootQueryParams(BaseModel):
    """Query parameters accepted at the service root."""

    name: str = Field(..., description="Name appended to the configured greeting.")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(default="healthy")
    service: str = Field(..., description="Service name")
    version: str = Field(..., description="Service version")


class ErrorResponse(BaseModel):
    """Error response envelope for client errors."""

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "error": "Missing parameter",
                    "detail": "Required request parameter 'name' is not present",
                }
            ]
        }
    }

    error: str = Field(..., description="High-level error message")
    detail: str | None = Field(None, description="What was wrong with the request")
