"""Cancellable fixed-interval task on the running event loop."""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Awaitable, Callable

logger = logging.getLogger(__name__)


class RepeatingTask:
    """Call ``callback`` every ``interval`` seconds until stopped.

    The first call happens one interval after ``start``. A failing tick is
    logged and the schedule continues.
    """

    def __init__(
        self,
        interval: float,
        callback: Callable[[], None | Awaitable[None]],
        name: str = "repeating-task",
    ):
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.interval = interval
        self.callback = callback
        self.name = name
        self.ticks = 0
        self._task: asyncio.Task | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        if self.running:
            return
        loop = asyncio.get_running_loop()
        self._task = loop.create_task(self._run(), name=self.name)
        logger.debug("Started %s every %.2fs", self.name, self.interval)

    def stop(self) -> None:
        if self._task is not None:
            self._task.cancel()
            self._task = None
            logger.debug("Stopped %s after %d ticks", self.name, self.ticks)

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self.interval)
            self.ticks += 1
            try:
                result = self.callback()
                if inspect.isawaitable(result):
                    await result
            except Exception:
                logger.exception("Tick %d of %s failed", self.ticks, self.name)
