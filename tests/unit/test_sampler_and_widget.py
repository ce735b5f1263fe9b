import asyncio
from datetime import datetime, timezone

import pytest

from lexclock.adapters.widget_host.memory import InMemoryWidgetHost
from lexclock.application.bus import EventBus
from lexclock.application.sampler import TimeSampler
from lexclock.application.widget import TimelineProvider, format_label
from lexclock.domain.events import ElapsedTimeSampled
from lexclock.domain.models import WidgetEntry
from lexclock.infrastructure.calendar import LocalCalendar
from lexclock.infrastructure.clock import FixedClock
from lexclock.infrastructure.timer import RepeatingTimer, TimerAlreadyRunning

MIDNIGHT = datetime(2024, 3, 5, tzinfo=timezone.utc).timestamp()


def test_bus_subscription_can_be_cancelled():
    async def _run() -> None:
        bus = EventBus()
        received = []

        async def handler(event: ElapsedTimeSampled) -> None:
            received.append(event.elapsed)

        subscription = bus.subscribe(ElapsedTimeSampled, handler)
        await bus.publish(ElapsedTimeSampled(elapsed=1.0, timestamp=MIDNIGHT + 1))
        subscription.cancel()
        subscription.cancel()
        await bus.publish(ElapsedTimeSampled(elapsed=2.0, timestamp=MIDNIGHT + 2))
        assert received == [1.0]
        assert bus.subscriber_count(ElapsedTimeSampled) == 0

    asyncio.run(_run())


def test_sampler_publishes_explicit_elapsed_value():
    async def _run() -> None:
        clock = FixedClock(MIDNIGHT + 5430)
        bus = EventBus()
        sampler = TimeSampler(clock=clock, bus=bus, calendar=LocalCalendar(timezone.utc))
        assert sampler.elapsed == 5430.0

        received = []

        async def reader_one(event: ElapsedTimeSampled) -> None:
            received.append(("one", event.elapsed))

        async def reader_two(event: ElapsedTimeSampled) -> None:
            received.append(("two", event.elapsed))

        bus.subscribe(ElapsedTimeSampled, reader_one)
        bus.subscribe(ElapsedTimeSampled, reader_two)
        clock.advance(0.2)
        elapsed = await sampler.sample()
        assert elapsed == pytest.approx(5430.2)
        assert received == [("one", elapsed), ("two", elapsed)]

    asyncio.run(_run())


def test_sampler_start_validates_and_refuses_double_start():
    async def _run() -> None:
        sampler = TimeSampler(clock=FixedClock(MIDNIGHT), bus=EventBus(), calendar=LocalCalendar(timezone.utc))
        with pytest.raises(ValueError):
            sampler.start(0)
        sampler.start(10.0)
        with pytest.raises(TimerAlreadyRunning):
            sampler.start(10.0)
        await sampler.stop()
        assert not sampler.running
        await sampler.stop()

    asyncio.run(_run())


def test_repeating_timer_survives_failing_callback():
    async def _run() -> None:
        calls = []

        async def flaky() -> None:
            calls.append(len(calls))
            if len(calls) == 1:
                raise RuntimeError("boom")

        timer = RepeatingTimer(0.01, flaky, name="flaky")
        timer.start()
        await asyncio.sleep(0.1)
        await timer.stop()
        assert len(calls) >= 2
        assert not timer.running

    asyncio.run(_run())


def test_format_label_uses_time_format():
    entry = WidgetEntry(date=datetime(2024, 3, 5, 1, 30, 30, tzinfo=timezone.utc))
    assert format_label(entry) == "01:30:30"
    assert format_label(entry, "%H:%M") == "01:30"


def test_timeline_provider_answers_with_current_entry():
    provider = TimelineProvider(FixedClock(MIDNIGHT + 5430), zone=timezone.utc)
    timeline = provider.timeline()
    assert timeline.policy == "AT_END"
    assert len(timeline.entries) == 1
    assert format_label(timeline.entries[0]) == "01:30:30"
    assert provider.snapshot() == provider.placeholder() == timeline.entries[0]


def test_in_memory_host_presents_fresh_timeline_on_reload():
    async def _run() -> None:
        clock = FixedClock(MIDNIGHT + 59)
        host = InMemoryWidgetHost(TimelineProvider(clock, zone=timezone.utc))
        await host.reload_all_timelines("LexClockWidget")
        clock.advance(1)
        await host.reload_all_timelines("LexClockWidget")
        assert host.reloads == ["LexClockWidget", "LexClockWidget"]
        assert [label for _, label in host.presented] == ["00:00:59", "00:01:00"]

    asyncio.run(_run())
