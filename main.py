import asyncio

from lexclock import config
from lexclock.adapters.renderer.strokes import StrokeRenderer
from lexclock.adapters.widget_host.memory import InMemoryWidgetHost
from lexclock.application.widget import WidgetEntryView
from lexclock.infrastructure.logging import configure_logging, get_logger

logger = get_logger(__name__)


async def run(duration: float = 3.0) -> None:
    components = config.build_components()
    configure_logging(components["settings"].logging.level)
    widget: WidgetEntryView = components["widget"]
    renderer: StrokeRenderer = components["renderer"]
    host: InMemoryWidgetHost = components["host"]

    await widget.appear()
    try:
        await asyncio.sleep(duration)
    finally:
        await widget.disappear()

    for entry, label in host.presented:
        logger.info("widget_presented", label=label, date=entry.date.isoformat())
    hands = [segment for segment in renderer.latest or [] if not segment.tag.startswith("tick")]
    for segment in hands:
        logger.info("hand_drawn", hand=segment.tag, tip=[round(value, 2) for value in segment.end])
    logger.info("run_finished", frames=renderer.frames_drawn, reloads=len(host.reloads))


if __name__ == "__main__":
    asyncio.run(run())
