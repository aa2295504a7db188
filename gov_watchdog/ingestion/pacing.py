"""
Request pacing.

A fixed cooldown awaited before provider calls so bursts of refreshes stay
under provider quotas. This is deliberately not a rate limiter: there is no
quota tracking and concurrent callers are not queued.
"""
import asyncio
import logging
from typing import Awaitable, Callable, Optional

logger = logging.getLogger(__name__)


class RatePacer:
    """
    Sleep for a minimum delay before each call.

    Usage:
        pacer = RatePacer(delay_ms=200)
        await pacer.pace()
    """

    def __init__(
        self,
        delay_ms: int = 0,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self.delay_ms = delay_ms
        self._sleep = sleep

    async def pace(self, delay_ms: Optional[int] = None) -> None:
        """
        Suspend the caller for at least `delay_ms` milliseconds.

        Args:
            delay_ms: Override for this call; defaults to the pacer's delay.
        """
        delay = self.delay_ms if delay_ms is None else delay_ms
        if delay <= 0:
            return
        logger.debug(f"Pacing request for {delay}ms")
        await self._sleep(delay / 1000)
