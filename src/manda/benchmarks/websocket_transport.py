"""WebSocket transport for the live feed.

Requires the ``ws`` extra: ``pip install manda-advisor[ws]``.
"""

from __future__ import annotations

import json
import logging
from collections.abc import AsyncIterator
from typing import Any

from manda.benchmarks.transport import Transport, TransportError, endpoint_url

logger = logging.getLogger(__name__)


class WebSocketTransport(Transport):
    """Duplex JSON frames over a ``websockets`` client connection."""

    def __init__(
        self,
        url: str | None = None,
        host: str = "localhost:5000",
        secure: bool = False,
        path: str = "/ws",
    ):
        try:
            from websockets.asyncio.client import connect
            from websockets.exceptions import ConnectionClosedError, WebSocketException
        except ImportError as exc:
            raise ImportError(
                "websockets is required for the websocket transport: "
                "pip install manda-advisor[ws]"
            ) from exc

        self._connect = connect
        self._closed_error = ConnectionClosedError
        self._ws_error = WebSocketException
        self.url = url or endpoint_url(host, secure, path)
        self._ws = None

    async def connect(self) -> None:
        logger.info("Connecting to %s", self.url)
        try:
            self._ws = await self._connect(self.url)
        except (OSError, self._ws_error) as exc:
            raise TransportError(f"Failed to connect to {self.url}: {exc}") from exc

    async def send(self, message: dict[str, Any]) -> None:
        if self._ws is None:
            raise TransportError("Transport is not connected")
        try:
            await self._ws.send(json.dumps(message))
        except self._ws_error as exc:
            raise TransportError(str(exc)) from exc

    async def messages(self) -> AsyncIterator[str]:
        if self._ws is None:
            raise TransportError("Transport is not connected")
        try:
            async for frame in self._ws:
                yield frame.decode("utf-8") if isinstance(frame, bytes) else frame
        except self._closed_error as exc:
            raise TransportError(f"Connection closed abnormally: {exc}") from exc

    async def close(self) -> None:
        if self._ws is not None:
            await self._ws.close()
            self._ws = None
