"""Hand angle calculation for the analog face.

Every function here is pure: the same elapsed value always yields the same
hand positions.
"""

import math
from typing import Dict, Tuple

from .models import HandKind, HandSpec, HandStyle

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3600
HOURS_PER_REVOLUTION = 12

LENGTH_SCALES: Dict[HandKind, float] = {
    HandKind.HOUR: 0.4,
    HandKind.MINUTE: 0.6,
    HandKind.SECOND: 0.8,
}

HAND_STYLES: Dict[HandKind, HandStyle] = {
    HandKind.HOUR: HandStyle(width=4, color="primary"),
    HandKind.MINUTE: HandStyle(width=3, color="blue"),
    HandKind.SECOND: HandStyle(width=2, color="red"),
}

HAND_ORDER: Tuple[HandKind, HandKind, HandKind] = (HandKind.HOUR, HandKind.MINUTE, HandKind.SECOND)


class InvalidElapsedTime(ValueError):
    """Raised when elapsed seconds are negative or not a finite number."""


def _check_elapsed(elapsed: float) -> float:
    if not math.isfinite(elapsed) or elapsed < 0:
        raise InvalidElapsedTime(f"Elapsed seconds must be finite and non-negative, got {elapsed!r}")
    return float(elapsed)


def _fold(fraction: float) -> float:
    # keep results inside [0, 1) when float rounding lands on a full turn
    fraction = fraction % 1.0
    return 0.0 if fraction >= 1.0 else fraction


def angle_fraction(elapsed: float, kind: HandKind) -> float:
    """Return the hand position as a fraction of one revolution."""

    elapsed = _check_elapsed(elapsed)
    if kind is HandKind.SECOND:
        return _fold((elapsed % SECONDS_PER_MINUTE) / SECONDS_PER_MINUTE)
    if kind is HandKind.HOUR:
        return _fold((elapsed / SECONDS_PER_HOUR) / HOURS_PER_REVOLUTION)
    if kind is HandKind.MINUTE:
        within_hour = elapsed - SECONDS_PER_HOUR * math.floor(elapsed / SECONDS_PER_HOUR)
        return _fold(within_hour / SECONDS_PER_MINUTE / SECONDS_PER_MINUTE)
    raise ValueError(f"Unknown hand kind {kind!r}")


def screen_angle(fraction: float) -> float:
    """Map a fraction to radians, 0 pointing right and counter-clockwise positive.

    The hand sweeps clockwise starting at 12 o'clock.
    """

    return math.pi / 2 - 2 * math.pi * fraction


def length_scale(kind: HandKind) -> float:
    return LENGTH_SCALES[kind]


def hand_spec(elapsed: float, kind: HandKind) -> HandSpec:
    return HandSpec(kind=kind, angle_fraction=angle_fraction(elapsed, kind), length_scale=length_scale(kind))


def hand_specs(elapsed: float) -> Tuple[HandSpec, HandSpec, HandSpec]:
    """Return the hour, minute and second hands for one render pass."""

    hour, minute, second = (hand_spec(elapsed, kind) for kind in HAND_ORDER)
    return hour, minute, second
