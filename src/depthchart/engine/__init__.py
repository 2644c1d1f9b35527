"""Depth chart engine and player registry."""

from .registry import PlayerRegistry
from .service import DepthChartEngine

__all__ = ["DepthChartEngine", "PlayerRegistry"]
