from typing import List, Tuple

from ...application.widget import DEFAULT_LABEL_FORMAT, TimelineProvider, format_label
from ...domain.models import WidgetEntry
from ...ports.widget_host import WidgetHostPort


class InMemoryWidgetHost(WidgetHostPort):
    """Simulated widget host that pulls timelines and records what it shows."""

    def __init__(self, provider: TimelineProvider, label_format: str = DEFAULT_LABEL_FORMAT) -> None:
        self.provider = provider
        self.label_format = label_format
        self.reloads: List[str] = []
        self.presented: List[Tuple[WidgetEntry, str]] = []

    async def reload_all_timelines(self, kind: str) -> None:
        self.reloads.append(kind)
        timeline = self.provider.timeline()
        if timeline.entries:
            entry = timeline.entries[0]
            await self.present(entry, format_label(entry, self.label_format))

    async def present(self, entry: WidgetEntry, label: str) -> None:
        self.presented.append((entry, label))
