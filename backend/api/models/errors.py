"""
Error response models.

Standardized error responses for the API.
"""

from typing import Any

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Body produced for every BoothdeskError (see BoothdeskError.to_dict)."""

    error: str = Field(..., description="Stable error code, e.g. EVENT_NOT_FOUND")
    message: str
    details: dict[str, Any] = Field(default_factory=dict)


# OpenAPI documentation for routers that raise module exceptions
ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorResponse},
    401: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    502: {"model": ErrorResponse},
}
