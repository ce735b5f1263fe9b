from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Literal, Tuple


class HandKind(Enum):
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"


ReloadPolicy = Literal["AT_END"]


@dataclass(frozen=True)
class HandSpec:
    """Position and length of one clock hand for a single render pass."""

    kind: HandKind
    angle_fraction: float
    length_scale: float

    @property
    def screen_angle(self) -> float:
        from .hands import screen_angle

        return screen_angle(self.angle_fraction)


@dataclass(frozen=True)
class HandStyle:
    width: float
    color: str
    line_cap: str = "round"
    line_join: str = "round"


@dataclass(frozen=True)
class TickMark:
    """One of the 60 fixed marks around the face."""

    index: int
    angle_degrees: float
    major: bool
    length: float
    opacity: float
    width: float = 2.0


@dataclass(frozen=True)
class FaceFrame:
    """Everything the drawing layer needs for one render pass."""

    elapsed: float
    ticks: Tuple[TickMark, ...]
    hands: Tuple[HandSpec, HandSpec, HandSpec]


@dataclass(frozen=True)
class WidgetEntry:
    """A timeline entry handed to the widget host."""

    date: datetime


@dataclass(frozen=True)
class Timeline:
    entries: Tuple[WidgetEntry, ...]
    policy: ReloadPolicy = "AT_END"


@dataclass(frozen=True)
class Segment:
    start: Tuple[float, float]
    end: Tuple[float, float]
    width: float
    color: str
    opacity: float = 1.0
    tag: str = ""
