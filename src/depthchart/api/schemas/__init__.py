"""Pydantic models for API I/O."""

from .messages import MessageResponse
from .sports import ChartEntryResponse, ChartResponse, SportResponse

__all__ = [
    "ChartEntryResponse",
    "ChartResponse",
    "MessageResponse",
    "SportResponse",
]
