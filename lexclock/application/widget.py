"""Host-facing side of the widget: timeline entries and periodic reloads."""

from datetime import tzinfo
from typing import Optional

from ..domain.models import Timeline, WidgetEntry
from ..infrastructure.calendar import LocalCalendar
from ..infrastructure.clock import Clock
from ..infrastructure.logging import get_logger
from ..infrastructure.timer import RepeatingTimer, TimerAlreadyRunning
from ..ports.widget_host import WidgetHostPort
from .view import ClockView

logger = get_logger(__name__)

DEFAULT_LABEL_FORMAT = "%H:%M:%S"
DEFAULT_REFRESH_INTERVAL = 1.0
DEFAULT_WIDGET_KIND = "LexClockWidget"


def format_label(entry: WidgetEntry, fmt: str = DEFAULT_LABEL_FORMAT) -> str:
    return entry.date.strftime(fmt)


class TimelineProvider:
    """Answers the host's "what should be shown now" requests.

    Each answer is a single entry dated at the current time; the host asks
    again once the timeline has been used up.
    """

    def __init__(self, clock: Clock, zone: Optional[tzinfo] = None) -> None:
        self.clock = clock
        self.calendar = LocalCalendar(zone)

    def _entry(self) -> WidgetEntry:
        return WidgetEntry(date=self.calendar.local_datetime(self.clock.now()))

    def placeholder(self) -> WidgetEntry:
        return self._entry()

    def snapshot(self) -> WidgetEntry:
        return self._entry()

    def timeline(self) -> Timeline:
        return Timeline(entries=(self._entry(),), policy="AT_END")


class WidgetRefresher:
    """Asks the host to reload every timeline on a fixed interval while visible."""

    def __init__(
        self,
        host: WidgetHostPort,
        kind: str = DEFAULT_WIDGET_KIND,
        interval: float = DEFAULT_REFRESH_INTERVAL,
    ) -> None:
        self.host = host
        self.kind = kind
        self.interval = interval
        self._timer: Optional[RepeatingTimer] = None

    @property
    def running(self) -> bool:
        return self._timer is not None and self._timer.running

    async def _reload(self) -> None:
        logger.debug("widget_reload_requested", kind=self.kind)
        await self.host.reload_all_timelines(self.kind)

    def start(self) -> None:
        if self.running:
            raise TimerAlreadyRunning(f"Widget refresher for {self.kind} is already running")
        self._timer = RepeatingTimer(self.interval, self._reload, name=f"widget-refresh-{self.kind}")
        self._timer.start()
        logger.info("widget_refresher_started", kind=self.kind, interval=self.interval)

    async def stop(self) -> None:
        timer, self._timer = self._timer, None
        if timer is None:
            return
        await timer.stop()
        logger.info("widget_refresher_stopped", kind=self.kind, reloads=timer.ticks)


class WidgetEntryView:
    """The widget as the host shows it: the analog face above the digital label.

    Showing the widget starts both the face redraws and the host reloads;
    tearing it down stops both.
    """

    def __init__(
        self,
        clock_view: ClockView,
        refresher: WidgetRefresher,
        provider: TimelineProvider,
        label_format: str = DEFAULT_LABEL_FORMAT,
    ) -> None:
        self.clock_view = clock_view
        self.refresher = refresher
        self.provider = provider
        self.label_format = label_format

    @property
    def visible(self) -> bool:
        return self.clock_view.visible

    @property
    def label(self) -> str:
        return format_label(self.provider.snapshot(), self.label_format)

    async def appear(self) -> None:
        if self.visible:
            return
        await self.clock_view.appear()
        try:
            self.refresher.start()
        except TimerAlreadyRunning:
            await self.clock_view.disappear()
            raise
        logger.info("widget_appeared", kind=self.refresher.kind, label=self.label)

    async def disappear(self) -> None:
        await self.refresher.stop()
        await self.clock_view.disappear()
        logger.info("widget_disappeared", kind=self.refresher.kind)
