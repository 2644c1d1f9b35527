"""Name to id resolution for players within one sport."""

from __future__ import annotations

import logging
from typing import Dict, Iterator, List, Optional

from depthchart.models import Player


logger = logging.getLogger(__name__)


def _name_key(name: str) -> str:
    return name.casefold()


class PlayerRegistry:
    """Append-only player list with case-insensitive name lookup."""

    def __init__(self) -> None:
        self._players: List[Player] = []
        self._by_name: Dict[str, Player] = {}
        self._by_id: Dict[int, Player] = {}

    def add_or_get(self, name: str) -> Player:
        existing = self.find(name)
        if existing is not None:
            return existing

        next_id = max(self._by_id, default=0) + 1
        player = Player(player_id=next_id, name=name)
        self._players.append(player)
        self._by_name[_name_key(name)] = player
        self._by_id[next_id] = player
        logger.debug("Registered player %s with id %d", name, next_id)
        return player

    def find(self, name: str) -> Optional[Player]:
        return self._by_name.get(_name_key(name))

    def get(self, player_id: int) -> Optional[Player]:
        return self._by_id.get(player_id)

    def exists(self, player_id: int) -> bool:
        return player_id in self._by_id

    def __len__(self) -> int:
        return len(self._players)

    def __iter__(self) -> Iterator[Player]:
        return iter(list(self._players))
