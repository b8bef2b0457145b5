"""Visible axis ranges, zoom limits, grid steps and tracer label placement."""

from __future__ import annotations

import math
from bisect import bisect_left
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from scopeplot.formatting import ceil_to_nice_value
from scopeplot.ticker import UnitTicker


def _fuzzy_compare(a: float, b: float) -> bool:
    return abs(a - b) * 1e12 <= min(abs(a), abs(b))


@dataclass(frozen=True)
class Range:
    """A closed interval on an axis."""

    lower: float
    upper: float

    def size(self) -> float:
        """Length of the interval."""
        return self.upper - self.lower

    def center(self) -> float:
        """Middle of the interval."""
        return (self.lower + self.upper) * 0.5


def clip_range(new_range: Range, limits: Range) -> Range:
    """Fit ``new_range`` inside ``limits``.

    A range larger than the limits becomes the limits; otherwise it is shifted
    so that it no longer sticks out. A range already inside is returned as is.
    """
    if new_range.size() > limits.size():
        return limits
    if new_range.lower < limits.lower:
        diff = new_range.lower - limits.lower
        return Range(new_range.lower - diff, new_range.upper - diff)
    if new_range.upper > limits.upper:
        diff = new_range.upper - limits.upper
        return Range(new_range.lower - diff, new_range.upper - diff)
    return new_range


class AxisView:
    """The visible range of one axis, kept within a maximal zoom-out range.

    The grid step follows the visible size: the nice value (1, 2 or 5 times a
    power of ten) at or above ``size * 2 ** grid_hint``. The ticker that labels
    the axis is kept on that step.
    """

    def __init__(self, view: Range, max_zoom: Range, grid_hint: int = -3) -> None:
        self.max_zoom = max_zoom
        self.view = view
        self.grid_hint = grid_hint
        self.ticker = UnitTicker()
        self._grid = 0.0
        self._update_grid()

    def set_range(self, new_range: Range) -> Range:
        """Request a new visible range; returns the range actually shown."""
        old = self.view
        if _fuzzy_compare(new_range.upper, old.upper) and _fuzzy_compare(new_range.lower, old.lower):
            return self.view
        self.view = clip_range(new_range, self.max_zoom)
        self._update_grid()
        return self.view

    def set_max_zoom(self, max_zoom: Range, reset: bool = False) -> Range:
        """Change the zoom-out limits; with ``reset`` show the whole of them."""
        self.max_zoom = max_zoom
        target = max_zoom if reset else clip_range(self.view, max_zoom)
        if target != self.view:
            self.set_range(target)
        return self.view

    def set_grid_hint(self, hint: int) -> None:
        """Set how many grid steps (as a power of two) fit into the view."""
        self.grid_hint = hint
        self._update_grid()

    def grid_step(self) -> float:
        """Current distance between grid lines."""
        return self._grid

    def _update_grid(self) -> None:
        new_grid = ceil_to_nice_value(self.view.size() * math.pow(2, self.grid_hint))
        if new_grid != self._grid:
            self._grid = new_grid
            self.ticker.set_tick_step(new_grid)


class TracerTextPosition(Enum):
    """Corner of the tracer at which its label is drawn."""

    TOP_RIGHT = "top_right"
    TOP_LEFT = "top_left"
    BOTTOM_RIGHT = "bottom_right"
    BOTTOM_LEFT = "bottom_left"


def choose_tracer_text_position(
    current: TracerTextPosition,
    tracer_x: float,
    tracer_y: float,
    width: float,
    height: float,
    text_width: float,
    text_height: float,
) -> TracerTextPosition:
    """Pick the corner where the tracer label fits, preferring top right.

    When the label fits nowhere the current position is kept.
    """
    top_ok = text_height <= tracer_y
    right_ok = text_width <= width - tracer_x
    if top_ok and right_ok:
        return TracerTextPosition.TOP_RIGHT
    bottom_ok = text_height <= height - tracer_y
    left_ok = text_width <= tracer_x
    if bottom_ok and left_ok:
        return TracerTextPosition.BOTTOM_LEFT
    if bottom_ok and right_ok:
        return TracerTextPosition.BOTTOM_RIGHT
    if top_ok and left_ok:
        return TracerTextPosition.TOP_LEFT
    return current


def key_to_nearest_sample(keys: Sequence[float], key: float) -> int:
    """Index of the sample whose key is nearest to ``key``; keys must be sorted."""
    if not keys:
        raise ValueError("no samples")
    index = bisect_left(keys, key)
    if index > 0:
        index -= 1
    if index == len(keys) - 1:
        return index
    if key < (keys[index] + keys[index + 1]) * 0.5:
        return index
    return index + 1