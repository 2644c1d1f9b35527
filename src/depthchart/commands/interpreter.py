"""Map decoded payloads onto engine operations and format the responses."""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence

from depthchart.engine import DepthChartEngine
from depthchart.models import Entry

from .schemas import (
    COMMAND_TYPES,
    AddCommand,
    AddPlayerCommand,
    Command,
    GetFullCommand,
    GetUnderCommand,
    RemoveCommand,
    decode_payload,
    parse_command,
)


logger = logging.getLogger(__name__)

OutputSink = Callable[[str], None]

ERROR_PREFIX = "Error processing message: "


def format_full_chart(chart: Mapping[str, Sequence[Entry]]) -> str:
    lines = [
        f"{tag}: [{', '.join(str(entry.player_id) for entry in entries)}]"
        for tag, entries in chart.items()
        if entries
    ]
    return "Depth Chart:\n" + "\n".join(lines)


def format_players_under(name: str, tag: str, entries: Sequence[Entry]) -> str:
    ids = json.dumps([entry.player_id for entry in entries], separators=(",", ":"))
    return f"\nPlayers Under {name} with position '{tag}':\n{ids}"


class CommandInterpreter:
    """Process one payload at a time against a single sport's engine.

    Every line produced is written to ``sink`` (``print`` by default) and also
    returned from :meth:`process`.
    """

    def __init__(self, engine: DepthChartEngine, sink: Optional[OutputSink] = None):
        self.engine = engine
        self._sink: OutputSink = sink if sink is not None else print

    @property
    def sport(self) -> str:
        return self.engine.taxonomy.sport

    def process(self, payload: str | bytes | Mapping[str, Any]) -> List[str]:
        try:
            data = decode_payload(payload)
            kind = data.get("type")
            if not isinstance(kind, str) or kind not in COMMAND_TYPES:
                logger.debug("Ignoring %s payload without a known type: %r", self.sport, kind)
                return []
            lines = self._dispatch(parse_command(data))
        except Exception as exc:
            detail = str(exc).replace("\n", " ")
            logger.warning("Rejected %s payload: %s", self.sport, detail)
            lines = [f"{ERROR_PREFIX}{detail}"]

        for line in lines:
            try:
                self._sink(line)
            except Exception as exc:
                logger.warning("Output sink failed for %s: %s", self.sport, exc)
                break
        return lines

    def _dispatch(self, command: Command) -> List[str]:
        logger.debug("Dispatching %s command %s", self.sport, command.type)
        if isinstance(command, AddPlayerCommand):
            return [self._add_player(command)]
        if isinstance(command, AddCommand):
            return [self._add(command)]
        if isinstance(command, RemoveCommand):
            return [self._remove(command)]
        if isinstance(command, GetFullCommand):
            return [format_full_chart(self.engine.get_full_chart())]
        if isinstance(command, GetUnderCommand):
            return [self._get_under(command)]
        raise TypeError(f"Unhandled command type {type(command).__name__}")

    def _check_advisory_id(self, advisory: Optional[int], name: str, resolved: int) -> None:
        if advisory is not None and advisory != resolved:
            logger.warning(
                "Ignoring playerId %d for %s; registry assigned id %d", advisory, name, resolved
            )

    def _add_player(self, command: AddPlayerCommand) -> str:
        player = self.engine.registry.add_or_get(command.name)
        self._check_advisory_id(command.player_id, command.name, player.player_id)
        return f"Added Player {command.name} with Id: {player.player_id}"

    def _add(self, command: AddCommand) -> str:
        player = self.engine.registry.add_or_get(command.name)
        tag = self.engine.taxonomy.parse(command.position)
        self._check_advisory_id(command.player_id, command.name, player.player_id)
        self.engine.add_position(player.player_id, tag, command.depth)
        depth = "end" if command.depth is None else command.depth
        return f"Added Player {command.name} with position '{tag}' to depth: {depth}"

    def _remove(self, command: RemoveCommand) -> str:
        tag = self.engine.taxonomy.parse(command.position)
        self.engine.remove_position(command.name, tag)
        return f"Removed Player {command.name} with position '{tag}'"

    def _get_under(self, command: GetUnderCommand) -> str:
        tag = self.engine.taxonomy.parse(command.position)
        entries = self.engine.get_players_under(command.name, tag)
        return format_players_under(command.name, tag, entries)


def chart_summary(engine: DepthChartEngine) -> Dict[str, List[Dict[str, Any]]]:
    """Structured view of non-empty slots, resolving player names."""

    summary: Dict[str, List[Dict[str, Any]]] = {}
    for tag, entries in engine.get_full_chart().items():
        if not entries:
            continue
        rows = []
        for entry in entries:
            player = engine.registry.get(entry.player_id)
            rows.append(
                {
                    "player_id": entry.player_id,
                    "name": player.name if player else None,
                    "depth": entry.depth,
                }
            )
        summary[tag] = rows
    return summary
