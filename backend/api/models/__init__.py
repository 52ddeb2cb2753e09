"""API models package."""

from .errors import ERROR_RESPONSES, ErrorResponse

__all__ = ["ERROR_RESPONSES", "ErrorResponse"]
