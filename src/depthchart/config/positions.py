"""Closed position taxonomies for supported sports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, Tuple

from depthchart.errors import UnknownPosition


@dataclass(frozen=True)
class PositionTaxonomy:
    sport: str
    tags: Tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.tags:
            raise ValueError(f"Taxonomy for {self.sport!r} declares no positions")
        if len(set(self.tags)) != len(self.tags):
            raise ValueError(f"Taxonomy for {self.sport!r} declares duplicate positions")

    def parse(self, text: object) -> str:
        """Return the declared tag matching ``text`` exactly (case-sensitive)."""

        if isinstance(text, str) and text in self.tags:
            return text
        raise UnknownPosition(text, self.sport)

    def __contains__(self, tag: object) -> bool:
        return tag in self.tags

    def __iter__(self) -> Iterator[str]:
        return iter(self.tags)

    def __len__(self) -> int:
        return len(self.tags)


_TAXONOMIES: Dict[str, PositionTaxonomy] = {
    "NFL": PositionTaxonomy(
        sport="NFL",
        tags=("QB", "WR", "RB", "TE", "K", "P", "KR", "PR"),
    ),
    "MLB": PositionTaxonomy(
        sport="MLB",
        tags=("SP", "RP", "C", "1B", "2B", "3B", "SS", "LF", "CF", "RF", "DH"),
    ),
    "NBA": PositionTaxonomy(
        sport="NBA",
        tags=("PG", "SG", "SF", "PF", "C"),
    ),
}


def iter_taxonomies() -> Iterable[PositionTaxonomy]:
    """Return an iterator of all declared taxonomies."""

    return _TAXONOMIES.values()


def get_taxonomy(sport: str) -> PositionTaxonomy:
    """Fetch the taxonomy for a sport key, raising KeyError if missing."""

    key = sport.upper()
    if key not in _TAXONOMIES:
        raise KeyError(f"No position taxonomy configured for sport={sport!r}")
    return _TAXONOMIES[key]


def default_channel_name(sport: str) -> str:
    return f"{sport.lower()}_depth_chart_queue"

