"""API models package."""

from .errors import DetailResponse, ErrorResponse

__all__ = [
    "DetailResponse",
    "ErrorResponse",
]
