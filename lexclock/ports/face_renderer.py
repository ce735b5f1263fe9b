from abc import ABC, abstractmethod

from ..domain.models import FaceFrame


class FaceRendererPort(ABC):
    """Abstract drawing layer for the clock face."""

    @abstractmethod
    async def draw(self, frame: FaceFrame) -> None:
        raise NotImplementedError
