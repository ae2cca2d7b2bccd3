"""Duplex transports for the live benchmark feed."""

from __future__ import annotations

import asyncio
import json
import logging
from abc import ABC, abstractmethod
from collections.abc import AsyncIterator
from typing import TYPE_CHECKING, Any

from manda.benchmarks.scheduling import RepeatingTask

if TYPE_CHECKING:
    from manda.benchmarks.server import SimulatedBenchmarkServer

logger = logging.getLogger(__name__)


class TransportError(Exception):
    """Connection could not be opened or broke while open."""


def endpoint_url(host: str, secure: bool = False, path: str = "/ws") -> str:
    """Build the feed endpoint URL, ``wss`` when ``secure``."""
    scheme = "wss" if secure else "ws"
    return f"{scheme}://{host}{path}"


class Transport(ABC):
    """One duplex connection. Instances are not reused after ``close``."""

    @abstractmethod
    async def connect(self) -> None:
        """Open the connection.

        Raises:
            TransportError: If the peer cannot be reached.
        """

    @abstractmethod
    async def send(self, message: dict[str, Any]) -> None:
        """Send one JSON message."""

    @abstractmethod
    def messages(self) -> AsyncIterator[str]:
        """Yield inbound text frames until the peer closes.

        Raises:
            TransportError: If the stream breaks.
        """

    @abstractmethod
    async def close(self) -> None:
        """Close the connection. Safe to call more than once."""

    @classmethod
    def transport_name(cls) -> str:
        return cls.__name__


# ---------------------------------------------------------------------------
# In-memory transport
# ---------------------------------------------------------------------------

_CLOSED = object()


class MockTransport(Transport):
    """In-memory transport, optionally wired to a simulated server.

    Args:
        server: Answers outbound messages; replies are queued as frames.
        fail_connect: Make ``connect`` raise ``TransportError``.
        connect_delay: Seconds ``connect`` waits before succeeding.
        broadcast_interval: When set with a server, queue the server's
            periodic broadcasts at this interval while connected.
    """

    def __init__(
        self,
        server: SimulatedBenchmarkServer | None = None,
        fail_connect: bool = False,
        connect_delay: float = 0.0,
        broadcast_interval: float | None = None,
    ):
        self.server = server
        self.fail_connect = fail_connect
        self.connect_delay = connect_delay
        self.broadcast_interval = broadcast_interval
        self.sent: list[dict[str, Any]] = []
        self.connected = False
        self.closed = False
        self._inbox: asyncio.Queue[Any] = asyncio.Queue()
        self._broadcaster: RepeatingTask | None = None

    async def connect(self) -> None:
        if self.connect_delay:
            await asyncio.sleep(self.connect_delay)
        if self.fail_connect:
            raise TransportError("Connection refused")
        self.connected = True
        if self.server is not None and self.broadcast_interval:
            self._broadcaster = RepeatingTask(
                self.broadcast_interval, self._broadcast, name="mock-broadcast"
            )
            self._broadcaster.start()

    async def send(self, message: dict[str, Any]) -> None:
        if not self.connected or self.closed:
            raise TransportError("Transport is not connected")
        self.sent.append(message)
        if self.server is not None:
            for reply in self.server.handle(message):
                self.deliver(reply)

    async def messages(self) -> AsyncIterator[str]:
        while True:
            frame = await self._inbox.get()
            if frame is _CLOSED:
                return
            if isinstance(frame, Exception):
                raise TransportError(str(frame)) from frame
            yield frame

    async def close(self) -> None:
        if self._broadcaster is not None:
            self._broadcaster.stop()
            self._broadcaster = None
        if self.server is not None and self.connected:
            self.server.subscriptions.clear()
        self.connected = False
        self.closed = True

    # -- test hooks ----------------------------------------------------

    def deliver(self, frame: dict[str, Any] | str) -> None:
        """Queue an inbound frame as if the peer had sent it."""
        self._inbox.put_nowait(frame if isinstance(frame, str) else json.dumps(frame))

    def disconnect(self) -> None:
        """Simulate the peer closing the connection."""
        self._inbox.put_nowait(_CLOSED)

    def fail(self, reason: str = "Connection reset") -> None:
        """Simulate the stream breaking."""
        self._inbox.put_nowait(ConnectionError(reason))

    def _broadcast(self) -> None:
        for message in self.server.broadcast():
            self.deliver(message)
