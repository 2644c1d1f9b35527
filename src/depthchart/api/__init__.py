"""REST API that delivers command payloads to per-sport channels."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.concurrency import run_in_threadpool

from depthchart.api.schemas import ChartEntryResponse, ChartResponse, MessageResponse, SportResponse
from depthchart.channels import ChannelHub, SportChannel
from depthchart.config_loader import Settings


logger = logging.getLogger(__name__)


def _discard(line: str) -> None:
    return None


def create_app(settings: Optional[Settings] = None, hub: Optional[ChannelHub] = None) -> FastAPI:
    if hub is None:
        settings = settings or Settings.from_env()
        # Output goes back in the response body rather than to stdout.
        hub = ChannelHub.from_settings(settings, sink=_discard)

    app = FastAPI(title="depthchart")
    app.state.hub = hub

    def _channel(sport: str) -> SportChannel:
        try:
            return hub.get(sport)
        except KeyError:
            raise HTTPException(status_code=404, detail=f"Sport {sport!r} is not active") from None

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/sports", response_model=list[SportResponse])
    def list_sports() -> list[SportResponse]:
        return [
            SportResponse(sport=channel.sport, channel=channel.name, positions=list(channel.taxonomy))
            for channel in hub
        ]

    @app.post("/sports/{sport}/messages", response_model=MessageResponse)
    async def post_message(sport: str, request: Request) -> MessageResponse:
        channel = _channel(sport)
        body = await request.body()
        # The channel lock blocks, so keep it off the event loop.
        output = await run_in_threadpool(channel.handle, body)
        logger.debug("Processed %s message on %s: %d line(s)", channel.sport, channel.name, len(output))
        return MessageResponse(sport=channel.sport, channel=channel.name, output=output)

    @app.get("/sports/{sport}/chart", response_model=ChartResponse)
    def get_chart(sport: str) -> ChartResponse:
        channel = _channel(sport)
        summary = channel.summary()
        return ChartResponse(
            sport=channel.sport,
            chart={
                tag: [ChartEntryResponse(**row) for row in rows]
                for tag, rows in summary.items()
            },
        )

    return app
