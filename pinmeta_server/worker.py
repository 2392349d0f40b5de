"""
Background trending worker.

Runs TrendingAggregator.run_cycle() on a fixed interval from the app's event
loop. Each cycle runs in a worker thread so file writes do not block requests.
Owned by the FastAPI lifespan: started on startup, cancelled on shutdown.
"""

import asyncio
import logging
from typing import Optional

from pinmeta.stages.trending import TrendingAggregator

logger = logging.getLogger(__name__)


class TrendingWorker:
    """Periodic task that refreshes the trending cache."""

    def __init__(self, aggregator: TrendingAggregator, interval_seconds: float):
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be positive")
        self.aggregator = aggregator
        self.interval_seconds = interval_seconds
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def _loop(self) -> None:
        while True:
            # run_cycle logs its own failures; this guards the loop itself
            try:
                await asyncio.to_thread(self.aggregator.run_cycle)
            except Exception:
                logger.exception("[trending] worker cycle raised")
            await asyncio.sleep(self.interval_seconds)

    def start(self) -> None:
        """Start the loop; the first cycle runs immediately."""
        if self.running:
            return
        self._task = asyncio.get_running_loop().create_task(self._loop())
        logger.info("[startup] Trending worker every %ss", self.interval_seconds)

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
        logger.info("Trending worker stopped")
