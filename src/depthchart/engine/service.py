"""Ordered per-position depth chart for a single sport."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from depthchart.config import PositionTaxonomy
from depthchart.errors import UnknownPlayer, UnknownPosition
from depthchart.models import Entry

from .registry import PlayerRegistry


logger = logging.getLogger(__name__)


class DepthChartEngine:
    """Owns one slot per taxonomy tag plus the sport's player registry.

    Not thread-safe: callers serialize access per sport (see ``SportChannel``).
    """

    def __init__(self, taxonomy: PositionTaxonomy, registry: Optional[PlayerRegistry] = None):
        self.taxonomy = taxonomy
        self.registry = registry if registry is not None else PlayerRegistry()
        self._slots: Dict[str, List[Entry]] = {tag: [] for tag in taxonomy}

    def _slot(self, tag: str) -> List[Entry]:
        try:
            return self._slots[tag]
        except (KeyError, TypeError):
            raise UnknownPosition(tag, self.taxonomy.sport) from None

    def add_position(self, player_id: int, tag: str, depth: Optional[int] = None) -> None:
        slot = self._slot(tag)
        if not self.registry.exists(player_id):
            raise UnknownPlayer(player_id)

        slot[:] = [entry for entry in slot if entry.player_id != player_id]

        entry = Entry(player_id=player_id, position=tag, depth=depth)
        if depth is not None and 0 <= depth <= len(slot):
            slot.insert(depth, entry)
        else:
            slot.append(entry)
        logger.debug("%s %s slot now %s", self.taxonomy.sport, tag, [e.player_id for e in slot])

    def remove_position(self, name: str, tag: str) -> None:
        slot = self._slot(tag)
        player = self.registry.find(name)
        if player is None:
            return
        slot[:] = [entry for entry in slot if entry.player_id != player.player_id]

    def get_full_chart(self) -> Dict[str, List[Entry]]:
        return {tag: list(slot) for tag, slot in self._slots.items()}

    def get_players_under(self, name: str, tag: str) -> List[Entry]:
        slot = self._slot(tag)
        player = self.registry.find(name)
        if player is None:
            return []
        for index, entry in enumerate(slot):
            if entry.player_id == player.player_id:
                return slot[index + 1:]
        return []
