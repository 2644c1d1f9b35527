"""Canonical player and depth chart entry models."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class Player(BaseModel):
    """A registered player; the id is assigned by the registry and never changes."""

    player_id: int = Field(..., ge=1)
    name: str

    model_config = ConfigDict(frozen=True)


class Entry(BaseModel):
    """A player's placement in one position slot."""

    player_id: int = Field(..., ge=1)
    position: str
    depth: Optional[int] = None

    model_config = ConfigDict(frozen=True)
