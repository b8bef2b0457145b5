"""CSV export of plotted channels."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Sequence

Point = tuple[float, float]


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


def _in_range(key: float, key_range: tuple[float, float] | None) -> bool:
    if key_range is None:
        return True
    lower, upper = key_range
    return lower <= key <= upper


def format_number(value: float, precision: int, decimal: str = ".") -> str:
    """Fixed-point text of ``value`` with ``decimal`` as the decimal separator."""
    return f"{value:.{precision}f}".replace(".", decimal)


def logic_level(value: float) -> int:
    """Level code of a logic sample: the rounded value modulo 3 (non-zero means high)."""
    return int(math.fmod(_round_half_away(value), 3))


def export_merged_csv(
    first_column: str,
    channels: Sequence[tuple[str, Sequence[Point]]],
    separator: str,
    decimal: str,
    precision: int,
) -> str:
    """Export several channels side by side, one row per distinct key.

    ``channels`` holds (name, points) pairs with points sorted by key; empty
    channels are left out. A cell stays blank where a channel has no sample
    at the row's key. Returns an empty string when no channel has data.
    """
    used = [(name, points) for name, points in channels if points]
    if not used:
        return ""

    parts = [first_column]
    for name, _ in used:
        parts.append(separator + name)

    times = sorted({key for _, points in used for key, _ in points})
    queues = [deque(points) for _, points in used]
    for time in times:
        parts.append("\n" + format_number(time, precision, decimal))
        for queue in queues:
            parts.append(separator)
            if queue and queue[0][0] == time:
                _, value = queue.popleft()
                parts.append(format_number(value, precision, decimal))
    return "".join(parts)


def export_channel_csv(
    name: str,
    points: Sequence[Point],
    separator: str,
    decimal: str,
    precision: int,
    key_range: tuple[float, float] | None = None,
) -> str:
    """Export one channel as ``time`` and value columns.

    With ``key_range`` only samples whose key lies in it are written.
    Returns an empty string for a channel without data.
    """
    if not points:
        return ""
    lines = [f"time{separator}{name}\n"]
    for key, value in points:
        if _in_range(key, key_range):
            lines.append(
                format_number(key, precision, decimal)
                + separator
                + format_number(value, precision, decimal)
                + "\n"
            )
    return "".join(lines)


def export_logic_csv(
    bits: Sequence[Sequence[Point]],
    separator: str,
    precision: int,
    key_range: tuple[float, float] | None = None,
) -> str:
    """Export the used bits of a logic group, one 0/1 column per bit.

    The keys of the first bit give the rows; every bit must have at least as
    many samples. Returns an empty string when no bit is used.
    """
    if not bits:
        return ""
    rows = len(bits[0])
    if any(len(bit) < rows for bit in bits):
        raise ValueError("all logic bits must have as many samples as the first")

    parts = ["time"]
    parts.extend(f"{separator}bit {index}" for index in range(len(bits)))
    parts.append("\n")
    for index, (time, _) in enumerate(bits[0]):
        if not _in_range(time, key_range):
            continue
        parts.append(f"{time:.{precision}f}")
        for bit in bits:
            parts.append(separator + ("1" if logic_level(bit[index][1]) else "0"))
        parts.append("\n")
    return "".join(parts)