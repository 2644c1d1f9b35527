from __future__ import annotations

from pydantic import BaseModel, Field


class SportResponse(BaseModel):
    sport: str
    channel: str
    positions: list[str]


class ChartEntryResponse(BaseModel):
    player_id: int
    name: str | None = None
    depth: int | None = None


class ChartResponse(BaseModel):
    sport: str
    chart: dict[str, list[ChartEntryResponse]] = Field(default_factory=dict)
