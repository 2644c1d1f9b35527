"""Player and depth chart entry models."""

from .player import Entry, Player

__all__ = ["Entry", "Player"]
