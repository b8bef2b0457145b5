"""Number formatting, units of measure and binary value-type prefixes."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum

_MICRO = "\u00b5"
_INFINITY = "\u221e"
_NO_PREFIX_UNIT_CHARS = "munkMG"
_SPECIAL_RE = re.compile(r"\(([^)]+)\)")


def _fuzzy_compare(a: float, b: float) -> bool:
    return abs(a - b) * 1e12 <= min(abs(a), abs(b))


def _fuzzy_is_null(value: float) -> bool:
    return abs(value) <= 1e-12


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


class UnitMode(Enum):
    """How a unit is shown next to a number."""

    USE_PREFIX = "use_prefix"
    NO_PREFIX = "no_prefix"
    INDEX = "index"
    TIME = "time"


@dataclass(frozen=True)
class UnitOfMeasure:
    """A unit of measure with its display mode."""

    mode: UnitMode = UnitMode.NO_PREFIX
    text: str = ""
    special: str = ""

    def reciprocal(self) -> UnitOfMeasure:
        """Unit of the reciprocal quantity (seconds become hertz)."""
        if self.text == "s":
            return parse_unit("-Hz")
        return parse_unit("!/" + self.text)

    def is_decibel(self) -> bool:
        """True when the unit is a decibel unit."""
        return self.text[:2] == "dB"


def parse_unit(raw: str) -> UnitOfMeasure:
    """Parse a raw unit specification such as ``-V``, ``!mV``, ``index`` or ``time(hh:mm)``."""
    if not raw:
        return UnitOfMeasure(UnitMode.NO_PREFIX)
    if raw.startswith("-"):
        return UnitOfMeasure(UnitMode.USE_PREFIX, raw[1:])
    if raw.startswith("!"):
        return UnitOfMeasure(UnitMode.NO_PREFIX, raw[1:])
    if raw == "index":
        return UnitOfMeasure(UnitMode.INDEX)
    if raw.startswith("time"):
        match = _SPECIAL_RE.search(raw)
        return UnitOfMeasure(UnitMode.TIME, "s", match.group(1) if match else "")
    if len(raw) >= 2 and (raw[:2] == "dB" or raw[0] in _NO_PREFIX_UNIT_CHARS):
        return UnitOfMeasure(UnitMode.NO_PREFIX, raw)
    return UnitOfMeasure(UnitMode.USE_PREFIX, raw)


class ValueKind(Enum):
    """Kind of a binary value."""

    UNSIGNED = "unsigned"
    INTEGER = "integer"
    FLOAT = "float"
    INVALID = "invalid"
    INCOMPLETE = "incomplete"


@dataclass
class ValueType:
    """Description of how values in a binary stream are encoded."""

    is_binary: bool = True
    kind: ValueKind = ValueKind.INCOMPLETE
    big_endian: bool = False
    byte_count: int = 0
    multiplier: float = 1.0


_MULTIPLIERS = {
    "T": 1e12,
    "G": 1e9,
    "M": 1e6,
    "k": 1e3,
    "h": 1e2,
    "D": 1e1,
    "d": 1e-1,
    "c": 1e-2,
    "m": 1e-3,
    "u": 1e-6,
    "n": 1e-9,
    "p": 1e-12,
    "f": 1e-15,
    "a": 1e-18,
}

_ALLOWED_SIZES = {
    "u": (ValueKind.UNSIGNED, {1, 2, 3, 4}),
    "i": (ValueKind.INTEGER, {1, 2, 4}),
    "f": (ValueKind.FLOAT, {4, 8}),
}


def read_value_prefix(buffer: bytes) -> tuple[ValueType, int]:
    """Read a value-type prefix such as ``u2``, ``F8`` or ``kI4``.

    Returns the decoded type and the length of the prefix. The type is
    INCOMPLETE when more bytes are needed and INVALID when the prefix is wrong.
    """
    value_type = ValueType()
    if len(buffer) < 2:
        return value_type, 0
    if not buffer[1:2].isdigit():
        prefix_length = 3
        if len(buffer) < 3:
            return value_type, prefix_length
        multiplier = _MULTIPLIERS.get(chr(buffer[0]))
        if multiplier is None:
            value_type.kind = ValueKind.INVALID
            return value_type, prefix_length
        value_type.multiplier = multiplier
    else:
        prefix_length = 2

    type_char = chr(buffer[prefix_length - 2])
    entry = _ALLOWED_SIZES.get(type_char.lower())
    if entry is None:
        value_type.kind = ValueKind.INVALID
        return value_type, prefix_length
    kind, sizes = entry
    value_type.byte_count = buffer[prefix_length - 1] - ord("0")
    value_type.kind = kind if value_type.byte_count in sizes else ValueKind.INVALID
    value_type.big_endian = type_char == type_char.upper()
    return value_type, prefix_length


def value_type_to_string(value_type: ValueType) -> str:
    """Human-readable description of a value type."""
    if not value_type.is_binary:
        return "Decimal"
    if value_type.kind is ValueKind.INVALID:
        return "Invalid data"
    if value_type.kind is ValueKind.INCOMPLETE:
        return "Incomplete data"
    names = {
        ValueKind.INTEGER: "signed integer",
        ValueKind.UNSIGNED: "unsigned integer",
        ValueKind.FLOAT: "floating point",
    }
    endian = " (big endian)" if value_type.big_endian else " (little endian)"
    return f"{value_type.byte_count * 8}-bit {names[value_type.kind]}{endian}"


def floor_to_nice_value(value: float) -> float:
    """Largest value of the form 1, 2 or 5 times a power of ten not above ``value``."""
    if value < 0:
        return -floor_to_nice_value(-value)
    if value == 0:
        return 0
    one = math.pow(10, math.floor(math.log10(value)))
    two, five, ten = 2.0 * one, 5.0 * one, 10.0 * one
    if _fuzzy_compare(value, ten):
        return ten
    if value > five or _fuzzy_compare(value, five):
        return five
    if value > two or _fuzzy_compare(value, two):
        return two
    return one


def ceil_to_nice_value(value: float) -> float:
    """Smallest value of the form 1, 2 or 5 times a power of ten not below ``value``."""
    if value < 0:
        return -ceil_to_nice_value(-value)
    if value == 0:
        return 0
    one = math.pow(10, math.floor(math.log10(value)))
    two, five, ten = 2.0 * one, 5.0 * one, 10.0 * one
    if _fuzzy_compare(value, one):
        return one
    if value < two or _fuzzy_compare(value, two):
        return two
    if value < five or _fuzzy_compare(value, five):
        return five
    return ten


def ceil_to_multiple_of(value: float, multiple_of: float) -> float:
    """Round ``value`` up to a multiple of ``multiple_of``."""
    return math.ceil(value / multiple_of) * multiple_of


def int_log10(x: float) -> int:
    """Integer order of magnitude of ``x``, robust to exact powers of ten."""
    if _fuzzy_is_null(x):
        return -1000
    if math.isinf(x):
        return 100
    if math.isnan(x):
        return 0
    result = math.log10(abs(x))
    rounded = _round_half_away(result)
    if _fuzzy_compare(rounded, result):
        return int(rounded)
    return math.floor(result)


def next_pow2(number: int) -> int:
    """Smallest power of two greater than or equal to ``number``."""
    power = 1
    while power < number:
        power *= 2
    return power


def to_significant_digits(x: float, prec: int, trim_zeroes: bool = False) -> str:
    """Format ``x`` with ``prec`` significant digits, optionally trimming trailing zeroes."""
    if prec <= 0:
        raise ValueError("precision must be positive")
    if _fuzzy_is_null(x):
        if trim_zeroes or prec == 1:
            return "0"
        return "0." + "0" * (prec - 1)

    order = int_log10(x)
    if order >= prec - 1:
        return str(int(_round_half_away(x)))

    sign = "-" if x < 0 else ""
    digits = str(int(_round_half_away(abs(x) * math.pow(10, prec - order - 1))))
    point = len(digits) - prec + order + 1
    if point > 0:
        whole, fraction = digits[:point], digits[point:]
        if trim_zeroes:
            fraction = fraction.rstrip("0")
        text = f"{whole}.{fraction}" if fraction else whole
    else:
        text = "0." + "0" * (-point) + digits
    return sign + text


_PREFIXES = (
    (18, " E", 1e18),
    (15, " P", 1e15),
    (12, " T", 1e12),
    (9, " G", 1e9),
    (6, " M", 1e6),
    (3, " k", 1e3),
    (0, None, 1.0),
    (-3, " m", 1e-3),
    (-6, " " + _MICRO, 1e-6),
    (-9, " n", 1e-9),
    (-12, " p", 1e-12),
    (-15, " f", 1e-15),
)


def _number_text(d, digits, justify, justify_unit, no_decimals, unit):
    plain = to_significant_digits(d, digits, no_decimals) + ("  " if justify_unit else " ")
    if unit.mode is UnitMode.NO_PREFIX:
        return plain
    if unit.mode is UnitMode.INDEX:
        return str(math.floor(d))
    if _fuzzy_is_null(d):
        return to_significant_digits(0.0, digits, no_decimals) + ("  " if justify else " ")
    order = int_log10(d)
    if order >= 21:
        return plain
    for min_order, postfix, divisor in _PREFIXES:
        if order >= min_order:
            if postfix is None:
                return plain
            return to_significant_digits(d / divisor, digits, no_decimals) + postfix
    return plain


def float_to_nice_string(
    d: float,
    significant_digits: int,
    justify: bool,
    justify_unit: bool,
    no_decimals_if_integer: bool = False,
    unit: UnitOfMeasure | None = None,
) -> str:
    """Format a value with an SI prefix and unit, optionally right-justified."""
    if unit is None:
        unit = UnitOfMeasure()
    separator = "  " if justify_unit else " "
    if math.isinf(d):
        text = _INFINITY + separator
    elif math.isnan(d):
        text = "---" + separator
    else:
        text = _number_text(d, significant_digits, justify, justify_unit, no_decimals_if_integer, unit)

    if justify:
        extra = 3 if text.endswith(" ") and not justify_unit else 4
        return text.rjust(significant_digits + extra) + unit.text
    return text + unit.text