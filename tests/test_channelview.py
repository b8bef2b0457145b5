import pytest

from scopeplot.channelview import (
    channel_axis_range,
    data_time_span,
    expand_vertical_range,
    logic_bits_used,
)
from scopeplot.viewport import Range


def test_axis_range_identity():
    view = Range(-5.0, 5.0)
    assert channel_axis_range(view, 0.0, 1.0, False) == view


def test_axis_range_offset_shifts_center():
    view = Range(-5.0, 5.0)
    result = channel_axis_range(view, 2.0, 1.0, False)
    assert result.center() == pytest.approx(-2.0)
    assert result.size() == pytest.approx(view.size())


def test_axis_range_scale_shrinks_size():
    view = Range(0.0, 8.0)
    result = channel_axis_range(view, 0.0, 2.0, False)
    assert result.size() == pytest.approx(view.size() / 2)
    assert result.center() == pytest.approx(view.center() / 2)


def test_axis_range_inverted_mirrors_center():
    view = Range(1.0, 9.0)
    normal = channel_axis_range(view, 0.0, 1.0, False)
    mirrored = channel_axis_range(view, 0.0, 1.0, True)
    assert mirrored.center() == pytest.approx(-normal.center())
    assert mirrored.size() == pytest.approx(normal.size())


def test_axis_range_negative_scale_is_normalized():
    result = channel_axis_range(Range(0.0, 4.0), 0.0, -2.0, False)
    assert result.lower <= result.upper
    assert result.size() == pytest.approx(2.0)


def test_expand_keeps_limits_when_value_inside():
    limits = Range(-1.0, 5.0)
    assert expand_vertical_range(limits, 3.0) == limits


def test_expand_upper_to_nice_value():
    result = expand_vertical_range(Range(0.0, 5.0), 7.0)
    assert result == Range(0.0, 10)


def test_time_span_over_channels():
    assert data_time_span([[1.0, 2.0, 3.0], [0.5, 2.0]]) == (0.5, 3.0)


def test_time_span_ignores_empty_channels():
    assert data_time_span([[], [4.0, 6.0], []]) == (4.0, 6.0)


def test_time_span_without_data_is_none():
    assert data_time_span([[], []]) is None


def test_logic_bits_used_counts_leading_bits():
    assert logic_bits_used([True, True, False, True]) == 2


def test_logic_bits_used_all_and_none():
    assert logic_bits_used([True] * 8) == 8
    assert logic_bits_used([False, True]) == 0
    assert logic_bits_used([]) == 0