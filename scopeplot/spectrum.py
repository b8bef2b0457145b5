"""Ranges, hold-max merging and peak search for spectrum plots."""

from __future__ import annotations

import math
from bisect import bisect_left, bisect_right
from collections.abc import Sequence

from scopeplot.formatting import ceil_to_nice_value
from scopeplot.viewport import Range

Point = tuple[float, float]

_EMPTY_KEYS = Range(0, 1000)
_EMPTY_VALUES = Range(0, 100)
_DECIBEL_SPAN = 120
_DECIBEL_HEADROOM = 20


def fft_auto_range(ranges: Sequence[tuple[Range, Range]], decibel: bool) -> tuple[Range, Range]:
    """Automatic (key, value) zoom limits for spectrum channels.

    ``ranges`` holds the key range and the value range of each channel that
    has data. With no channels the default ranges are returned. Bounds are
    truncated to whole numbers before use. The key range starts at the
    largest of the channels' lower keys.
    """
    if not ranges:
        return _EMPTY_KEYS, _EMPTY_VALUES

    y_max = float(max(int(values.upper) for _, values in ranges))
    x_max = float(max(int(keys.upper) for keys, _ in ranges))
    x_min = float(max(int(keys.lower) for keys, _ in ranges))

    if decibel:
        y_max = math.ceil(y_max / 10.0) * 10.0 + _DECIBEL_HEADROOM
        y_min = y_max - _DECIBEL_SPAN
    else:
        y_max = ceil_to_nice_value(1.5 * y_max)
        y_min = 0.0

    return Range(x_min, x_max), Range(y_min, y_max)


def hold_max(previous: Sequence[Point], current: Sequence[Point]) -> list[Point]:
    """Merge a new spectrum into the held one, keeping the larger value per point.

    The merge only happens when both spectra have the same length and end at
    the same key; otherwise the new spectrum replaces the old one.
    """
    if not current or len(previous) != len(current) or previous[-1][0] != current[-1][0]:
        return list(current)
    return [(key, max(value, old_value)) for (key, value), (_, old_value) in zip(current, previous)]


def peak_frequency(points: Sequence[Point], key_range: tuple[float, float]) -> float:
    """Key of the largest value among points whose key lies in ``key_range``.

    Points must be sorted by key. The last point inside the range is not
    searched. Returns 0 when nothing is searched.
    """
    lower, upper = key_range
    keys = [key for key, _ in points]
    start = bisect_left(keys, lower)
    stop = bisect_right(keys, upper) - 1
    peak_value, peak_key = -math.inf, 0.0
    for key, value in points[start:max(stop, start)]:
        if value > peak_value:
            peak_value, peak_key = value, key
    return peak_key