"""Persist and load service settings (active sports and channel names)."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from depthchart.config import default_channel_name, get_taxonomy


logger = logging.getLogger(__name__)

SPORTS_ENV = "DEPTHCHART_SPORTS"
SETTINGS_ENV = "DEPTHCHART_SETTINGS"

_DEFAULT_SPORTS = ("NFL", "MLB")


def _env_list(name: str, default: List[str]) -> List[str]:
    raw = os.getenv(name)
    if raw is None:
        return default
    values = [item.strip().upper() for item in raw.split(",") if item.strip()]
    if not values:
        logger.warning("Empty list for %s; using default %s", name, ",".join(default))
        return default
    return values


@dataclass
class Settings:
    sports: List[str] = field(default_factory=lambda: list(_DEFAULT_SPORTS))
    channels: Dict[str, str] = field(default_factory=dict)
    default_sport: str = "NFL"

    def __post_init__(self) -> None:
        self.sports = [sport.upper() for sport in self.sports]
        self.channels = {sport.upper(): name for sport, name in self.channels.items()}
        self.default_sport = self.default_sport.upper()
        for sport in self.sports:
            get_taxonomy(sport)
        if self.default_sport not in self.sports:
            raise ValueError(
                f"default_sport {self.default_sport!r} is not one of the active sports {self.sports}"
            )

    def channel_for(self, sport: str) -> str:
        key = sport.upper()
        return self.channels.get(key) or default_channel_name(key)

    @classmethod
    def load(cls, path: Path) -> "Settings":
        data = json.loads(path.read_text(encoding="utf-8"))
        sports = data.get("sports") or list(_DEFAULT_SPORTS)
        return cls(
            sports=sports,
            channels=data.get("channels", {}),
            default_sport=data.get("default_sport") or sports[0],
        )

    def save(self, path: Path) -> None:
        payload = {
            "sports": self.sports,
            "channels": self.channels,
            "default_sport": self.default_sport,
        }
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")

    @classmethod
    def from_env(cls, path: Optional[Path] = None) -> "Settings":
        """Load from ``path`` (or ``$DEPTHCHART_SETTINGS``), then apply ``$DEPTHCHART_SPORTS``."""

        if path is None and os.getenv(SETTINGS_ENV):
            path = Path(os.environ[SETTINGS_ENV])
        settings = cls.load(path) if path is not None else cls()

        sports = _env_list(SPORTS_ENV, settings.sports)
        if sports == settings.sports:
            return settings
        try:
            default_sport = settings.default_sport if settings.default_sport in sports else sports[0]
            return cls(sports=sports, channels=settings.channels, default_sport=default_sport)
        except KeyError as exc:
            logger.warning("Invalid %s value: %s; using %s", SPORTS_ENV, exc, ",".join(settings.sports))
            return settings
