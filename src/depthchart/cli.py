"""Interactive command-line loop for sending depth chart messages."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Callable, List, Optional, Sequence

import httpx

from depthchart.channels import ChannelHub
from depthchart.config import PositionTaxonomy
from depthchart.config_loader import Settings


logger = logging.getLogger(__name__)

Sender = Callable[[str], List[str]]

_EXAMPLES = (
    ("Add Player: Registers a new player.", [("Example", '{"type":"add_player","name":"Bob"}')]),
    (
        "Add to Depth Chart: Adds/updates a player's position with depth.",
        [
            ("Example", '{"type":"add","name":"Bob","position":"%(pos)s","depth":0}'),
            ("Optional depth", '{"type":"add","name":"Bob","position":"%(pos)s"}'),
        ],
    ),
    (
        "Remove from Depth Chart: Removes a player from a position.",
        [("Example", '{"type":"remove","name":"Bob","position":"%(pos)s"}')],
    ),
    ("Get Full Depth Chart: Displays the entire chart.", [("Example", '{"type":"get_full"}')]),
    (
        "Get Players Under: Lists players below a specific player.",
        [("Example", '{"type":"get_under","name":"Alice","position":"%(pos)s"}')],
    ),
)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Send depth chart command messages to a sport channel")
    parser.add_argument("--sport", default=None, help="Sport key (e.g., NFL, MLB); defaults to settings")
    parser.add_argument("--settings", type=Path, default=None, help="Settings JSON (active sports, channels)")
    parser.add_argument(
        "--url",
        default=None,
        help="Base URL of a running depthchart API; messages are processed locally when omitted",
    )
    parser.add_argument("--log-level", default="WARNING", help="Logging level (e.g., INFO, DEBUG)")
    return parser.parse_args(argv)


def display_options(taxonomy: PositionTaxonomy) -> None:
    example_pos = taxonomy.tags[0]
    print("\nAvailable message types (JSON objects):")
    for number, (title, examples) in enumerate(_EXAMPLES, start=1):
        print(f"{number}. {title}")
        for label, example in examples:
            print(f"   {label}: {example % {'pos': example_pos}}")
    print(f"Use {taxonomy.sport} positions: {', '.join(taxonomy.tags)}\n")


def run_loop(send: Sender, channel_name: str) -> None:
    """Read JSON lines from stdin until ``exit`` or EOF, sending each one."""

    while True:
        print("> ", end="", flush=True)
        line = sys.stdin.readline()
        if not line:
            break
        text = line.strip()
        if not text:
            print("Please enter a valid JSON message.")
            continue
        if text.lower() == "exit":
            break

        try:
            json.loads(text)
            output = send(text)
        except (json.JSONDecodeError, httpx.HTTPError) as exc:
            print(f"Error sending message: {exc}")
            continue
        print(f"Sent to {channel_name}: {text}")
        for out in output:
            print(out)

    print("Exiting interactive mode...")


def _remote_sender(client: httpx.Client, sport: str) -> Sender:
    def send(text: str) -> List[str]:
        resp = client.post(f"/sports/{sport}/messages", content=text.encode("utf-8"))
        resp.raise_for_status()
        return list(resp.json().get("output", []))

    return send


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )

    settings = Settings.from_env(args.settings)
    sport = (args.sport or settings.default_sport).upper()
    if sport not in settings.sports:
        raise SystemExit(f"Sport {sport!r} is not active; choose from {', '.join(settings.sports)}")

    # Lines are printed by the loop, not by the interpreter sink.
    hub = ChannelHub.from_settings(settings, sink=lambda line: None)
    channel = hub.get(sport)

    if args.url:
        with httpx.Client(base_url=args.url) as client:
            print(f"Connected to {args.url}. Enter JSON messages to send to {channel.name} (or type 'exit' to quit):")
            display_options(channel.taxonomy)
            run_loop(_remote_sender(client, channel.sport), channel.name)
        return

    print(f"Enter JSON messages to send to {channel.name} (or type 'exit' to quit):")
    display_options(channel.taxonomy)
    run_loop(channel.handle, channel.name)


if __name__ == "__main__":
    main()
