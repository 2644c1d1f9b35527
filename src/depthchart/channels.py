"""Static registry of per-sport channels, each owning one engine."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional

from depthchart.commands import CommandInterpreter, OutputSink, chart_summary
from depthchart.config import PositionTaxonomy, get_taxonomy
from depthchart.config_loader import Settings
from depthchart.engine import DepthChartEngine


logger = logging.getLogger(__name__)


@dataclass
class SportChannel:
    """One sport's taxonomy, engine and interpreter behind a lock.

    The engine reads then writes slots without locking, so commands for the
    same sport must go through :meth:`handle` one at a time.
    """

    name: str
    taxonomy: PositionTaxonomy
    engine: DepthChartEngine
    interpreter: CommandInterpreter
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    @property
    def sport(self) -> str:
        return self.taxonomy.sport

    @classmethod
    def create(cls, sport: str, name: str, sink: Optional[OutputSink] = None) -> "SportChannel":
        taxonomy = get_taxonomy(sport)
        engine = DepthChartEngine(taxonomy)
        interpreter = CommandInterpreter(engine, sink=sink)
        return cls(name=name, taxonomy=taxonomy, engine=engine, interpreter=interpreter)

    def handle(self, payload: str | bytes | Mapping[str, Any]) -> List[str]:
        with self._lock:
            return self.interpreter.process(payload)

    def summary(self) -> Dict[str, List[Dict[str, Any]]]:
        with self._lock:
            return chart_summary(self.engine)


class ChannelHub:
    """Maps sport keys to their channels. Sports never share state."""

    def __init__(self, channels: Iterable[SportChannel]):
        self._channels: Dict[str, SportChannel] = {}
        for channel in channels:
            if channel.sport in self._channels:
                raise ValueError(f"Duplicate channel for sport {channel.sport!r}")
            self._channels[channel.sport] = channel

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None, sink: Optional[OutputSink] = None) -> "ChannelHub":
        settings = settings or Settings()
        channels = [
            SportChannel.create(sport, settings.channel_for(sport), sink=sink)
            for sport in settings.sports
        ]
        for channel in channels:
            logger.info("Listening for %s messages on channel %s", channel.sport, channel.name)
        return cls(channels)

    def get(self, sport: str) -> SportChannel:
        key = sport.upper()
        if key not in self._channels:
            raise KeyError(f"Sport {sport!r} is not active")
        return self._channels[key]

    def by_channel_name(self, name: str) -> SportChannel:
        for channel in self._channels.values():
            if channel.name == name:
                return channel
        raise KeyError(f"No sport listens on channel {name!r}")

    def dispatch(self, sport: str, payload: str | bytes | Mapping[str, Any]) -> List[str]:
        return self.get(sport).handle(payload)

    def __contains__(self, sport: object) -> bool:
        return isinstance(sport, str) and sport.upper() in self._channels

    def __iter__(self) -> Iterator[SportChannel]:
        return iter(list(self._channels.values()))

    def __len__(self) -> int:
        return len(self._channels)
