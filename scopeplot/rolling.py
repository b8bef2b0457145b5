"""Rolling display of a time axis that follows incoming data."""

from __future__ import annotations

from enum import Enum

from scopeplot.viewport import AxisView, Range


def _fuzzy_compare(a: float, b: float) -> bool:
    return abs(a - b) * 1e12 <= min(abs(a), abs(b))


class RollingMode(Enum):
    """State of the rolling view."""

    FREE = "free"
    GROWING = "growing"
    ROLLING = "rolling"
    EMPTY = "empty"
    FREE_LOCKED = "free_locked"


class RollingView:
    """Keeps the visible range of a time axis on the newest data.

    While the signal fits into the view, the view stays put (GROWING). When the
    signal runs past the right edge, the view either jumps ahead by
    ``rolling_step`` percent of its length or, with a step of zero, follows the
    end of the signal (ROLLING). Moving the view by hand while rolling stops
    following (FREE_LOCKED, then FREE) until the signal end is visible again.
    """

    def __init__(self, axis: AxisView, rolling_step: int = 0) -> None:
        self.axis = axis
        self.rolling_step = rolling_step
        self.mode = RollingMode.EMPTY
        self.last_signal_end = 0.0

    def update(self, x_max: float) -> RollingMode:
        """Advance the state for a signal that now ends at ``x_max``."""
        view = self.axis.view
        size = view.size()
        if self.mode is RollingMode.EMPTY:
            self.mode = RollingMode.GROWING
        elif self.mode is RollingMode.GROWING:
            if x_max > view.upper:
                if self.rolling_step:
                    new_end = x_max + self.rolling_step / 100.0 * size
                    self.axis.set_range(Range(new_end - size, new_end))
                else:
                    self.mode = RollingMode.ROLLING
                    self.axis.set_range(Range(x_max - size, x_max))
        elif self.mode is RollingMode.FREE:
            if x_max < view.upper:
                self.mode = RollingMode.GROWING
        elif self.mode is RollingMode.FREE_LOCKED:
            self.mode = RollingMode.FREE
        elif self.mode is RollingMode.ROLLING:
            if not _fuzzy_compare(view.upper, self.last_signal_end):
                self.mode = RollingMode.FREE_LOCKED
            else:
                self.axis.set_range(Range(x_max - size, x_max))

        self.last_signal_end = x_max
        return self.mode

    def set_step(self, step: int) -> None:
        """Set the jump-ahead step in percent of the view length (0 follows the end)."""
        self.rolling_step = step
        if self.mode is RollingMode.ROLLING:
            self.mode = RollingMode.GROWING

    def set_length(self, length: float, min_t: float, max_t: float) -> None:
        """Change the visible length for a signal spanning ``min_t`` to ``max_t``."""
        if self.mode is RollingMode.ROLLING:
            self.axis.set_range(Range(max_t - length, max_t))
        elif max_t - min_t > length:
            self.mode = RollingMode.ROLLING
            self.axis.set_range(Range(max_t - length, max_t))
        else:
            self.mode = RollingMode.GROWING
            self.axis.set_max_zoom(Range(min_t, min_t + length), reset=True)
        self.update(max_t)

    def set_position(self, mid: float, max_t: float) -> None:
        """Centre the view on ``mid`` keeping its length."""
        half = self.axis.view.size() / 2
        self.axis.set_range(Range(mid - half, mid + half))
        self.update(max_t)

    def reset(self) -> None:
        """Forget the signal; the next update starts growing again."""
        self.mode = RollingMode.EMPTY
        self.last_signal_end = 0.0