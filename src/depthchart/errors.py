"""Exception hierarchy shared by the engine, taxonomy and command layers."""

from __future__ import annotations


class DepthChartError(Exception):
    """Base class for depth chart failures reported back to the sender."""


class UnknownPlayer(DepthChartError, LookupError):
    def __init__(self, player_id: int):
        super().__init__(f"Player '{player_id}' does not exist. Add the player first.")
        self.player_id = player_id


class UnknownPosition(DepthChartError, ValueError):
    def __init__(self, position: object, sport: str | None = None):
        where = f" for {sport}" if sport else ""
        super().__init__(f"Unknown position {position!r}{where}")
        self.position = position
        self.sport = sport


class MalformedPayload(DepthChartError, ValueError):
    """Payload could not be decoded into a command structure."""
