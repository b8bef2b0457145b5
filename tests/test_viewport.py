import math

import pytest

from scopeplot.viewport import (
    AxisView,
    Range,
    TracerTextPosition,
    choose_tracer_text_position,
    clip_range,
    key_to_nearest_sample,
)


def _is_nice(value):
    exponent = math.floor(math.log10(value))
    mantissa = value / 10**exponent
    return any(math.isclose(mantissa, m) for m in (1, 2, 5, 10))


def test_range_size_and_center():
    r = Range(2.0, 6.0)
    assert r.size() == 4.0
    assert r.center() == 4.0


def test_clip_inside_is_unchanged():
    limits = Range(0.0, 100.0)
    r = Range(10.0, 20.0)
    assert clip_range(r, limits) == r


def test_clip_too_large_becomes_limits():
    limits = Range(0.0, 100.0)
    assert clip_range(Range(-50.0, 200.0), limits) == limits


@pytest.mark.parametrize("r", [Range(-5.0, 5.0), Range(95.0, 105.0), Range(-30.0, -20.0)])
def test_clip_shifts_keeping_size(r):
    limits = Range(0.0, 100.0)
    clipped = clip_range(r, limits)
    assert math.isclose(clipped.size(), r.size())
    assert clipped.lower >= limits.lower
    assert clipped.upper <= limits.upper


def test_clip_below_aligns_with_lower_limit():
    limits = Range(0.0, 100.0)
    clipped = clip_range(Range(-5.0, 5.0), limits)
    assert clipped.lower == limits.lower


def test_axis_view_set_range_is_clipped():
    axis = AxisView(Range(0.0, 10.0), Range(0.0, 100.0))
    shown = axis.set_range(Range(95.0, 110.0))
    assert shown.upper == 100.0
    assert math.isclose(shown.size(), 15.0)
    assert axis.view == shown


def test_axis_view_same_range_keeps_view():
    axis = AxisView(Range(0.0, 10.0), Range(0.0, 100.0))
    assert axis.set_range(Range(0.0, 10.0)) == Range(0.0, 10.0)


def test_grid_step_is_nice_and_covers_hint():
    axis = AxisView(Range(0.0, 10.0), Range(-1000.0, 1000.0), grid_hint=-3)
    step = axis.grid_step()
    assert _is_nice(step)
    assert step >= 10.0 * 2**-3
    assert axis.ticker.tick_step == step


def test_grid_follows_zoom():
    axis = AxisView(Range(0.0, 10.0), Range(-1000.0, 1000.0))
    small = axis.grid_step()
    axis.set_range(Range(0.0, 500.0))
    assert axis.grid_step() > small
    assert axis.ticker.tick_step == axis.grid_step()


def test_grid_hint_changes_step():
    axis = AxisView(Range(0.0, 100.0), Range(-1000.0, 1000.0), grid_hint=-3)
    fine = axis.grid_step()
    axis.set_grid_hint(0)
    assert axis.grid_step() >= 100.0
    assert axis.grid_step() > fine


def test_set_max_zoom_reset_shows_all():
    axis = AxisView(Range(0.0, 10.0), Range(-1000.0, 1000.0))
    limits = Range(-20.0, 40.0)
    assert axis.set_max_zoom(limits, reset=True) == limits
    assert axis.max_zoom == limits


def test_set_max_zoom_clips_current_view():
    axis = AxisView(Range(50.0, 60.0), Range(-1000.0, 1000.0))
    view = axis.set_max_zoom(Range(0.0, 20.0))
    assert view.upper == 20.0
    assert math.isclose(view.size(), 10.0)


def test_tracer_text_prefers_top_right():
    pos = choose_tracer_text_position(TracerTextPosition.BOTTOM_LEFT, 100, 100, 400, 300, 50, 30)
    assert pos is TracerTextPosition.TOP_RIGHT


def test_tracer_text_near_top_right_corner_goes_bottom_left():
    pos = choose_tracer_text_position(TracerTextPosition.TOP_RIGHT, 390, 5, 400, 300, 50, 30)
    assert pos is TracerTextPosition.BOTTOM_LEFT


def test_tracer_text_near_top_left_corner_goes_bottom_right():
    pos = choose_tracer_text_position(TracerTextPosition.TOP_RIGHT, 5, 5, 400, 300, 50, 30)
    assert pos is TracerTextPosition.BOTTOM_RIGHT


def test_tracer_text_near_bottom_right_corner_goes_top_left():
    pos = choose_tracer_text_position(TracerTextPosition.TOP_RIGHT, 390, 295, 400, 300, 50, 30)
    assert pos is TracerTextPosition.TOP_LEFT


def test_tracer_text_fitting_nowhere_keeps_current():
    pos = choose_tracer_text_position(TracerTextPosition.BOTTOM_RIGHT, 10, 10, 20, 20, 50, 30)
    assert pos is TracerTextPosition.BOTTOM_RIGHT


@pytest.mark.parametrize(
    "key, expected",
    [(-5.0, 0), (0.0, 0), (0.4, 0), (0.6, 1), (1.0, 1), (2.0, 2), (2.9, 3), (3.0, 3), (99.0, 3)],
)
def test_key_to_nearest_sample(key, expected):
    assert key_to_nearest_sample([0.0, 1.0, 2.0, 3.0], key) == expected


def test_key_to_nearest_sample_single():
    assert key_to_nearest_sample([5.0], -1.0) == 0


def test_key_to_nearest_sample_empty():
    with pytest.raises(ValueError):
        key_to_nearest_sample([], 1.0)