"""Pydantic models for inbound command payloads."""

from __future__ import annotations

import json
from typing import Annotated, Any, Literal, Mapping, Optional, Union

from pydantic import BaseModel, Field, StrictInt, TypeAdapter, ValidationError
from pydantic.config import ConfigDict

from depthchart.errors import MalformedPayload


class _CommandPayload(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class AddPlayerCommand(_CommandPayload):
    type: Literal["add_player"]
    name: str
    player_id: Optional[int] = Field(default=None, alias="playerId")


class AddCommand(_CommandPayload):
    type: Literal["add"]
    name: str
    position: str
    depth: Optional[StrictInt] = None
    player_id: Optional[int] = Field(default=None, alias="playerId")


class RemoveCommand(_CommandPayload):
    type: Literal["remove"]
    name: str
    position: str


class GetFullCommand(_CommandPayload):
    type: Literal["get_full"]


class GetUnderCommand(_CommandPayload):
    type: Literal["get_under"]
    name: str
    position: str


Command = Annotated[
    Union[AddPlayerCommand, AddCommand, RemoveCommand, GetFullCommand, GetUnderCommand],
    Field(discriminator="type"),
]

COMMAND_TYPES = frozenset({"add_player", "add", "remove", "get_full", "get_under"})

_COMMAND_ADAPTER: TypeAdapter[Any] = TypeAdapter(Command)


def decode_payload(payload: str | bytes | Mapping[str, Any]) -> dict[str, Any]:
    """Turn raw message text (or an already decoded mapping) into a flat dict."""

    if isinstance(payload, (bytes, bytearray)):
        try:
            payload = payload.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise MalformedPayload(f"Payload is not valid UTF-8: {exc}") from exc

    if isinstance(payload, str):
        try:
            data = json.loads(payload)
        except json.JSONDecodeError as exc:
            raise MalformedPayload(f"Invalid JSON: {exc}") from exc
    else:
        data = payload

    if not isinstance(data, Mapping):
        raise MalformedPayload(f"Expected a JSON object, got {type(data).__name__}")
    return dict(data)


def _describe_validation_error(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        # First element of loc is the union tag; skip it.
        loc = ".".join(str(item) for item in error.get("loc", ())[1:])
        parts.append(f"{loc}: {error['msg']}" if loc else error["msg"])
    return "; ".join(parts)


def parse_command(data: Mapping[str, Any]) -> Command:
    """Validate a decoded payload whose ``type`` is one of COMMAND_TYPES."""

    try:
        return _COMMAND_ADAPTER.validate_python(data)
    except ValidationError as exc:
        raise MalformedPayload(_describe_validation_error(exc)) from exc
