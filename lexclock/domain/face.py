import math
from dataclasses import dataclass
from typing import Tuple

from .hands import hand_specs, screen_angle
from .models import FaceFrame, HandSpec, TickMark

TICK_COUNT = 60
MAJOR_EVERY = 5
MAJOR_TICK_LENGTH = 15.0
MINOR_TICK_LENGTH = 7.0
MINOR_TICK_OPACITY = 0.4

Point = Tuple[float, float]


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float

    @property
    def mid_x(self) -> float:
        return self.x + self.width / 2

    @property
    def mid_y(self) -> float:
        return self.y + self.height / 2


def _tick(index: int) -> TickMark:
    major = index % MAJOR_EVERY == 0
    return TickMark(
        index=index,
        angle_degrees=index / TICK_COUNT * 360,
        major=major,
        length=MAJOR_TICK_LENGTH if major else MINOR_TICK_LENGTH,
        opacity=1.0 if major else MINOR_TICK_OPACITY,
    )


TICK_MARKS: Tuple[TickMark, ...] = tuple(_tick(index) for index in range(TICK_COUNT))


def hand_endpoint(spec: HandSpec, rect: Rect) -> Point:
    """Return the tip of a hand drawn from the centre of ``rect``.

    Screen y grows downwards, so the sine term is subtracted.
    """

    length = rect.width / 2 * spec.length_scale
    angle = spec.screen_angle
    return rect.mid_x + math.cos(angle) * length, rect.mid_y - math.sin(angle) * length


def hand_segment(spec: HandSpec, rect: Rect) -> Tuple[Point, Point]:
    return (rect.mid_x, rect.mid_y), hand_endpoint(spec, rect)


def tick_segment(tick: TickMark, rect: Rect) -> Tuple[Point, Point]:
    """Return the stroke of a tick mark hanging inward from the face edge."""

    radius = rect.width / 2
    angle = screen_angle(tick.angle_degrees / 360)
    outer = (rect.mid_x + math.cos(angle) * radius, rect.mid_y - math.sin(angle) * radius)
    inner_radius = radius - tick.length
    inner = (rect.mid_x + math.cos(angle) * inner_radius, rect.mid_y - math.sin(angle) * inner_radius)
    return outer, inner


def build_frame(elapsed: float) -> FaceFrame:
    return FaceFrame(elapsed=elapsed, ticks=TICK_MARKS, hands=hand_specs(elapsed))
