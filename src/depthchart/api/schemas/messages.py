from __future__ import annotations

from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    sport: str
    channel: str
    output: list[str] = Field(default_factory=list)
