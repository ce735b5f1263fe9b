from abc import ABC, abstractmethod

from ..domain.models import WidgetEntry


class WidgetHostPort(ABC):
    """Abstract home-screen widget host."""

    @abstractmethod
    async def reload_all_timelines(self, kind: str) -> None:
        raise NotImplementedError

    @abstractmethod
    async def present(self, entry: WidgetEntry, label: str) -> None:
        raise NotImplementedError
