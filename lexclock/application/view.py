from typing import Optional

from ..domain.events import ElapsedTimeSampled
from ..domain.face import build_frame
from ..infrastructure.logging import get_logger
from ..ports.face_renderer import FaceRendererPort
from .bus import Subscription
from .sampler import DEFAULT_SAMPLE_INTERVAL, TimeSampler

logger = get_logger(__name__)


class ClockView:
    """Redraws the face every time the sampler publishes a new elapsed value."""

    def __init__(
        self,
        sampler: TimeSampler,
        renderer: FaceRendererPort,
        interval: float = DEFAULT_SAMPLE_INTERVAL,
    ) -> None:
        self.sampler = sampler
        self.renderer = renderer
        self.interval = interval
        self._subscription: Optional[Subscription] = None

    @property
    def visible(self) -> bool:
        return self._subscription is not None

    async def on_sample(self, event: ElapsedTimeSampled) -> None:
        await self.renderer.draw(build_frame(event.elapsed))

    async def appear(self) -> None:
        if self.visible:
            return
        self.sampler.start(self.interval)
        self._subscription = self.sampler.bus.subscribe(ElapsedTimeSampled, self.on_sample)
        await self.sampler.sample()
        logger.info("clock_view_appeared")

    async def disappear(self) -> None:
        if self._subscription is None:
            return
        await self.sampler.stop()
        self._subscription.cancel()
        self._subscription = None
        logger.info("clock_view_disappeared")
