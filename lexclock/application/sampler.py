from typing import Optional

from ..domain.events import ElapsedTimeSampled
from ..infrastructure.calendar import LocalCalendar
from ..infrastructure.clock import Clock
from ..infrastructure.logging import get_logger
from ..infrastructure.timer import RepeatingTimer, TimerAlreadyRunning
from .bus import EventBus

logger = get_logger(__name__)

DEFAULT_SAMPLE_INTERVAL = 0.2


class TimeSampler:
    """Owns the seconds elapsed since local midnight and republishes it on a timer."""

    def __init__(self, clock: Clock, bus: EventBus, calendar: Optional[LocalCalendar] = None) -> None:
        self.clock = clock
        self.bus = bus
        self.calendar = calendar or LocalCalendar()
        self.elapsed = self.current_elapsed_seconds(clock.now())
        self._timer: Optional[RepeatingTimer] = None

    def current_elapsed_seconds(self, now: float) -> float:
        return self.calendar.current_elapsed_seconds(now)

    @property
    def running(self) -> bool:
        return self._timer is not None and self._timer.running

    async def sample(self) -> float:
        """Recompute the elapsed value from the clock and publish it."""

        now = self.clock.now()
        self.elapsed = self.current_elapsed_seconds(now)
        await self.bus.publish(ElapsedTimeSampled(elapsed=self.elapsed, timestamp=now))
        return self.elapsed

    def start(self, interval_seconds: float = DEFAULT_SAMPLE_INTERVAL) -> None:
        if self.running:
            raise TimerAlreadyRunning("Time sampler is already running")
        timer = RepeatingTimer(interval_seconds, self.sample, name="time-sampler")
        timer.start()
        self._timer = timer
        logger.info("sampler_started", interval=interval_seconds)

    async def stop(self) -> None:
        timer, self._timer = self._timer, None
        if timer is None:
            return
        await timer.stop()
        logger.info("sampler_stopped", ticks=timer.ticks)
