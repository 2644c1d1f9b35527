"""Command payload parsing and interpretation."""

from .interpreter import (
    ERROR_PREFIX,
    CommandInterpreter,
    OutputSink,
    chart_summary,
    format_full_chart,
    format_players_under,
)
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

__all__ = [
    "ERROR_PREFIX",
    "COMMAND_TYPES",
    "AddCommand",
    "AddPlayerCommand",
    "Command",
    "CommandInterpreter",
    "GetFullCommand",
    "GetUnderCommand",
    "OutputSink",
    "RemoveCommand",
    "chart_summary",
    "decode_payload",
    "format_full_chart",
    "format_players_under",
    "parse_command",
]
