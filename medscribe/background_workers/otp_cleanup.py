import asyncio
from typing import Optional
from medscribe.common.utils import SystemClock
from medscribe.otp.constants import logger
from medscribe.otp.store import OtpStore


class OtpCleanupWorker:
    """Periodically drops expired codes from the OTP store."""

    def __init__(self, store: OtpStore, *, interval: float, clock: Optional[SystemClock] = None,
                 stop_timeout: float = 5.0):
        self.store = store
        self.interval = interval
        self.clock = clock or SystemClock()
        self.stop_timeout = stop_timeout
        self._task: Optional[asyncio.Task] = None

    def start(self):
        """Start the loop as a Task on the current event loop."""
        if self._task is None:
            self._task = asyncio.create_task(self._loop(), name="otp-cleanup")
            logger.info("otp.cleanup.started", extra={"interval": self.interval})

    async def run_once(self) -> int:
        purged = await self.store.purge_expired(self.clock.now_ms())
        if purged:
            logger.info("otp.cleanup.purged", extra={"count": purged})
        return purged

    async def _loop(self):
        while True:
            await asyncio.sleep(self.interval)
            try:
                await self.run_once()
            except Exception:
                # keep the loop alive, next tick retries
                logger.exception("otp.cleanup.failed")

    async def stop(self):
        if self._task is None:
            return
        self._task.cancel()
        try:
            await asyncio.wait_for(self._task, timeout=self.stop_timeout)
        except (asyncio.CancelledError, asyncio.TimeoutError):
            pass
        self._task = None
        logger.info("otp.cleanup.stopped")
