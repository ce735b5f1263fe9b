import asyncio
import math
from typing import Awaitable, Callable, Optional

from .logging import get_logger

logger = get_logger(__name__)


class TimerAlreadyRunning(RuntimeError):
    """Raised when a running timer is started again."""


class RepeatingTimer:
    """Fires an async callback every ``interval`` seconds on the running loop.

    Deadlines are anchored to the start time, so slow callbacks do not make
    the cadence drift; deadlines that were missed entirely are skipped.
    """

    def __init__(self, interval: float, callback: Callable[[], Awaitable[None]], name: str = "timer") -> None:
        if interval <= 0:
            raise ValueError(f"Timer interval must be positive, got {interval}")
        self.interval = interval
        self.name = name
        self._callback = callback
        self._task: Optional[asyncio.Task[None]] = None
        self.ticks = 0

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        if self.running:
            raise TimerAlreadyRunning(f"Timer {self.name} is already running")
        self._task = asyncio.create_task(self._run(), name=self.name)
        logger.debug("timer_started", timer=self.name, interval=self.interval)

    async def stop(self) -> None:
        task, self._task = self._task, None
        if task is None:
            return
        task.cancel()
        if task is asyncio.current_task():
            return
        try:
            await task
        except asyncio.CancelledError:
            pass
        logger.debug("timer_stopped", timer=self.name, ticks=self.ticks)

    async def _run(self) -> None:
        loop = asyncio.get_running_loop()
        started = loop.time()
        beat = 1
        while True:
            deadline = started + beat * self.interval
            now = loop.time()
            if deadline < now:
                beat = math.floor((now - started) / self.interval) + 1
                deadline = started + beat * self.interval
            await asyncio.sleep(deadline - now)
            beat += 1
            try:
                await self._callback()
            except Exception as exc:
                logger.error("timer_callback_failed", timer=self.name, error=str(exc))
            self.ticks += 1
