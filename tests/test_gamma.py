"""Tests for sRGB linearization and re-encoding."""

import pytest

from vtcolor.core.gamma import linear_to_srgb_float, to_linear, to_srgb


def test_endpoints():
    assert to_linear(0) == 0.0
    assert to_linear(255) == pytest.approx(1.0)
    assert to_srgb(0.0) == 0
    assert to_srgb(1.0) == 255


def test_out_of_range_linear_values_clamp():
    assert to_srgb(-0.25) == 0
    assert to_srgb(1.5) == 255
    assert linear_to_srgb_float(-1.0) == 0.0
    assert linear_to_srgb_float(2.0) == pytest.approx(1.0)


def test_linear_toe_segment():
    # 10/255 falls below the 0.04045 knee
    assert to_linear(10) == pytest.approx(10 / 255 / 12.92)


def test_known_midtone():
    assert to_linear(135) == pytest.approx(0.242281, abs=1e-6)


def test_round_trip_stays_within_one_step():
    for channel in range(256):
        assert abs(to_srgb(to_linear(channel)) - channel) <= 1, channel


def test_linearization_is_monotonic():
    values = [to_linear(channel) for channel in range(256)]
    assert values == sorted(values)
