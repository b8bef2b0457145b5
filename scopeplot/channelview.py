"""Per-channel axis scaling and data span helpers for the main plot."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from scopeplot.formatting import ceil_to_nice_value, floor_to_nice_value
from scopeplot.viewport import Range


def channel_axis_range(view: Range, offset: float, scale: float, inverted: bool) -> Range:
    """Range of a channel's own value axis for the common visible ``view``.

    The channel is shifted by ``offset``, multiplied by ``scale`` and, when
    ``inverted``, mirrored around zero.
    """
    center = (view.center() - offset) / scale
    if inverted:
        center = -center
    size = view.size() / scale
    lower, upper = center - size / 2, center + size / 2
    if lower > upper:
        lower, upper = upper, lower
    return Range(lower, upper)


def expand_vertical_range(limits: Range, value: float) -> Range:
    """Widen ``limits`` to a nice value so that ``value`` fits; unchanged if it already does."""
    if value > limits.upper:
        return Range(limits.lower, ceil_to_nice_value(value))
    if value < limits.lower:
        return Range(floor_to_nice_value(value), limits.upper)
    return limits


def data_time_span(channels: Iterable[Sequence[float]]) -> tuple[float, float] | None:
    """Earliest first key and latest last key over channels with data.

    Each channel is a sequence of sorted keys; empty channels are ignored.
    Returns None when no channel has data.
    """
    spans = [(keys[0], keys[-1]) for keys in channels if len(keys)]
    if not spans:
        return None
    return min(first for first, _ in spans), max(last for _, last in spans)


def logic_bits_used(used: Iterable[bool]) -> int:
    """Number of leading bits of a logic group that hold data."""
    count = 0
    for bit_used in used:
        if not bit_used:
            break
        count += 1
    return count