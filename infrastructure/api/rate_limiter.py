"""Single-slot request gate shared by every outbound Riot API call."""
import asyncio
import time
import logging
from typing import Awaitable, Callable, Optional

logger = logging.getLogger(__name__)


class RequestGate:
    """
    Serialises outbound calls and spaces their starts ``min_interval`` apart.

    Used as ``async with gate: await session.get(...)``. The lock is held
    for the whole call, so requests from concurrent commands queue up behind
    each other instead of overlapping. With a personal key (100 req / 120s)
    a 1.2s interval keeps one process at ~83 req / 120s.
    """

    def __init__(
        self,
        min_interval: float = 1.2,
        *,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self.min_interval = max(0.0, min_interval)
        self._clock = clock
        self._sleep = sleep
        self._last_start: Optional[float] = None
        self._lock = asyncio.Lock()
        self.calls = 0

    async def __aenter__(self) -> "RequestGate":
        await self._lock.acquire()
        try:
            await self._wait_turn()
        except BaseException:
            self._lock.release()
            raise
        return self

    async def __aexit__(self, *_) -> None:
        self._lock.release()

    async def _wait_turn(self) -> None:
        if self._last_start is not None:
            wait = self.min_interval - (self._clock() - self._last_start)
            if wait > 0:
                logger.debug(f"Request gate: waiting {wait:.2f}s")
                await self._sleep(wait)
        self._last_start = self._clock()
        self.calls += 1
