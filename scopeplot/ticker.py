"""Axis tick labels that carry a unit with an SI prefix."""

from __future__ import annotations

import math

from scopeplot.formatting import UnitMode, UnitOfMeasure, int_log10

_MICRO = "\u00b5"
_FORMAT_CHARS = frozenset("eEfFgG")

_PREFIXES = (
    (18, " E", 1e18),
    (15, " P", 1e15),
    (12, " T", 1e12),
    (9, " G", 1e9),
    (6, " M", 1e6),
    (3, " k", 1e3),
    (0, " ", 1.0),
    (-3, " m", 1e-3),
    (-6, " " + _MICRO, 1e-6),
    (-9, " n", 1e-9),
    (-12, " p", 1e-12),
    (-15, " f", 1e-15),
    (-18, " a", 1e-18),
)


def _fuzzy_compare(a: float, b: float) -> bool:
    return abs(a - b) * 1e12 <= min(abs(a), abs(b))


def _fuzzy_is_null(value: float) -> bool:
    return abs(value) <= 1e-12


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


def _format(value: float, format_char: str, precision: int) -> str:
    if format_char not in _FORMAT_CHARS:
        raise ValueError(f"unsupported number format {format_char!r}")
    return f"{value:.{precision}{format_char}}"


class UnitTicker:
    """Produces tick labels for an axis with a fixed tick step and a unit."""

    def __init__(self, unit: UnitOfMeasure | None = None) -> None:
        self.unit = unit if unit is not None else UnitOfMeasure()
        self.tick_step = 1.0
        self._step_order = 0

    def set_tick_step(self, value: float) -> None:
        """Set the distance between ticks; it decides the prefix of the labels."""
        self._step_order = int_log10(value)
        self.tick_step = value

    def tick_label(self, tick: float, format_char: str = "g", precision: int = 6) -> str:
        """Label of the tick at ``tick``."""
        unit = self.unit
        if unit.mode is UnitMode.NO_PREFIX:
            return self._plain_label(tick, format_char, precision)

        if unit.mode is UnitMode.INDEX:
            if _fuzzy_compare(_round_half_away(tick), tick):
                return str(int(tick))
            return ""

        if unit.mode is UnitMode.TIME and not unit.special:
            if tick > 60.0 or _fuzzy_compare(tick, 60.0):
                return self._clock_label(tick, format_char, precision)

        return self._prefixed_label(tick, format_char, precision)

    def _plain_label(self, tick: float, format_char: str, precision: int) -> str:
        text = _format(tick, format_char, precision)
        if not self.unit.text:
            return text
        return f"{text} {self.unit.text}"

    @staticmethod
    def _clock_label(tick: float, format_char: str, precision: int) -> str:
        rounded = _round_half_away(tick)
        if _fuzzy_compare(rounded, tick):
            minutes = int(rounded / 60)
        else:
            minutes = int(math.floor(tick) / 60)
        seconds = tick - minutes * 60.0
        hours, minutes = divmod(minutes, 60)

        hh = f"{hours:02d}:" if hours else ""
        mm = f"{minutes:02d}:"
        ss = _format(seconds, format_char, precision)
        if len(ss) < 2 or ss[1] == ".":
            ss = "0" + ss
        return hh + mm + ss

    def _prefixed_label(self, tick: float, format_char: str, precision: int) -> str:
        # The prefix follows the order one above the tick step, so 100 shows as 0.1 k.
        unit_order = self._step_order + 1
        show_tenths = (self._step_order + 3000) % 3 == 2

        if _fuzzy_is_null(tick):
            tick, postfix = 0.0, " "
        elif unit_order >= 21:
            return self._plain_label(tick, format_char, precision)
        else:
            for min_order, prefix, divisor in _PREFIXES:
                if unit_order >= min_order:
                    tick, postfix = tick / divisor, prefix
                    break
            else:
                return self._plain_label(tick, format_char, precision)

        text = f"{tick:.{1 if show_tenths else 0}f}"
        return text + postfix + self.unit.text