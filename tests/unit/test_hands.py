import math

import pytest

from lexclock.domain.hands import (
    InvalidElapsedTime,
    angle_fraction,
    hand_spec,
    hand_specs,
    length_scale,
    screen_angle,
)
from lexclock.domain.models import HandKind


def test_midnight_all_hands_at_zero():
    for kind in HandKind:
        assert angle_fraction(0.0, kind) == 0.0


def test_one_oclock():
    assert angle_fraction(3600, HandKind.HOUR) == pytest.approx(1 / 12)
    assert angle_fraction(3600, HandKind.MINUTE) == 0.0
    assert angle_fraction(3600, HandKind.SECOND) == 0.0


def test_half_past_one_and_thirty_seconds():
    elapsed = 5430
    assert angle_fraction(elapsed, HandKind.SECOND) == pytest.approx(0.5)
    assert angle_fraction(elapsed, HandKind.MINUTE) == pytest.approx(1830 / 3600)
    assert angle_fraction(elapsed, HandKind.HOUR) == pytest.approx(elapsed / 3600 / 12)


@pytest.mark.parametrize("elapsed", [0.0, 0.2, 59.9, 60.0, 61.5, 3599.999, 43199.8, 86399.99])
def test_second_fraction_matches_modulo(elapsed):
    fraction = angle_fraction(elapsed, HandKind.SECOND)
    assert fraction == pytest.approx((elapsed % 60) / 60)
    assert 0.0 <= fraction < 1.0


@pytest.mark.parametrize("hours", range(0, 25))
def test_exact_hours_never_land_on_a_full_turn(hours):
    elapsed = hours * 3600.0
    assert angle_fraction(elapsed, HandKind.MINUTE) == 0.0
    assert angle_fraction(elapsed, HandKind.SECOND) == 0.0
    assert 0.0 <= angle_fraction(elapsed, HandKind.HOUR) < 1.0


def test_afternoon_hour_wraps_to_morning_position():
    assert angle_fraction(13 * 3600, HandKind.HOUR) == pytest.approx(angle_fraction(3600, HandKind.HOUR))


def test_minute_hand_sweeps_once_per_hour():
    assert angle_fraction(15 * 60, HandKind.MINUTE) == pytest.approx(0.25)
    assert angle_fraction(2 * 3600 + 45 * 60, HandKind.MINUTE) == pytest.approx(0.75)


def test_fraction_just_below_a_turn_stays_in_range():
    elapsed = math.nextafter(3600.0, 0.0)
    assert 0.0 <= angle_fraction(elapsed, HandKind.MINUTE) < 1.0
    assert 0.0 <= angle_fraction(math.nextafter(60.0, 0.0), HandKind.SECOND) < 1.0


def test_angle_fraction_is_idempotent():
    for kind in HandKind:
        assert angle_fraction(5430.25, kind) == angle_fraction(5430.25, kind)


@pytest.mark.parametrize("elapsed", [-1.0, -0.001, math.inf, math.nan])
def test_invalid_elapsed_rejected(elapsed):
    with pytest.raises(InvalidElapsedTime):
        angle_fraction(elapsed, HandKind.SECOND)


def test_screen_angle_starts_at_twelve_and_turns_clockwise():
    assert screen_angle(0.0) == pytest.approx(math.pi / 2)
    assert screen_angle(0.25) == pytest.approx(0.0)
    assert screen_angle(0.5) == pytest.approx(-math.pi / 2)


@pytest.mark.parametrize("fraction", [0.0, 0.1, 0.5, 0.999])
def test_screen_angle_has_period_one(fraction):
    difference = (screen_angle(fraction) - screen_angle(fraction + 1)) % (2 * math.pi)
    assert min(difference, 2 * math.pi - difference) == pytest.approx(0.0, abs=1e-9)


def test_length_scales():
    assert length_scale(HandKind.HOUR) == 0.4
    assert length_scale(HandKind.MINUTE) == 0.6
    assert length_scale(HandKind.SECOND) == 0.8


def test_hand_specs_order_and_values():
    hour, minute, second = hand_specs(5430)
    assert [hour.kind, minute.kind, second.kind] == [HandKind.HOUR, HandKind.MINUTE, HandKind.SECOND]
    assert second == hand_spec(5430, HandKind.SECOND)
    assert second.length_scale == 0.8


@pytest.mark.parametrize("elapsed,expected", [(0, math.pi / 2), (15, 0.0), (30, -math.pi / 2)])
def test_hand_spec_carries_its_screen_angle(elapsed, expected):
    spec = hand_spec(elapsed, HandKind.SECOND)
    assert spec.screen_angle == pytest.approx(expected)
    assert spec.screen_angle == screen_angle(spec.angle_fraction)
