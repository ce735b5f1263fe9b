from typing import List, Optional

from ...domain.face import Rect, hand_segment, tick_segment
from ...domain.hands import HAND_STYLES
from ...domain.models import FaceFrame, Segment
from ...ports.face_renderer import FaceRendererPort


class StrokeRenderer(FaceRendererPort):
    """Turns face frames into line segments instead of pixels."""

    def __init__(self, rect: Rect) -> None:
        self.rect = rect
        self.latest: Optional[List[Segment]] = None
        self.frames_drawn = 0

    def strokes(self, frame: FaceFrame) -> List[Segment]:
        segments = []
        for tick in frame.ticks:
            start, end = tick_segment(tick, self.rect)
            segments.append(
                Segment(start=start, end=end, width=tick.width, color="primary", opacity=tick.opacity, tag=f"tick-{tick.index}")
            )
        for hand in frame.hands:
            style = HAND_STYLES[hand.kind]
            start, end = hand_segment(hand, self.rect)
            segments.append(Segment(start=start, end=end, width=style.width, color=style.color, tag=hand.kind.value))
        return segments

    async def draw(self, frame: FaceFrame) -> None:
        self.latest = self.strokes(frame)
        self.frames_drawn += 1
