"""Encoding values from a terminal script into bytes for the serial line."""

from __future__ import annotations

import logging
import math
import struct
from collections.abc import Callable

log = logging.getLogger(__name__)

_UNSIGNED_RANGE = (0, 2**32 - 1)
_SIGNED_RANGE = (-(2**31), 2**31 - 1)

# name -> (kind, byte count); kind is "u", "i" or a struct format for floats
_FORMATS = {
    "uint8": ("u", 1), "u8": ("u", 1),
    "uint16": ("u", 2), "u16": ("u", 2),
    "uint24": ("u", 3), "u24": ("u", 3),
    "uint32": ("u", 4), "u32": ("u", 4),
    "uint64": ("u", 8), "u64": ("u", 8),
    "int8": ("i", 1), "i8": ("i", 1),
    "int16": ("i", 2), "i16": ("i", 2),
    "int24": ("i", 3), "i24": ("i", 3),
    "int32": ("i", 4), "i32": ("i", 4),
    "int64": ("i", 8), "i64": ("i", 8),
    "float": ("f", 4), "f": ("f", 4),
    "double": ("d", 8), "d": ("d", 8),
}


class TerminalEncodingError(ValueError):
    """A value could not be encoded in the requested format."""


def _to_bytes(value) -> bytes:
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, bool):
        return b"true" if value else b"false"
    if isinstance(value, (int, float)):
        return repr(value).encode("ascii")
    if isinstance(value, (list, tuple)) and not value:
        return b""
    raise TerminalEncodingError(f"cannot convert {type(value).__name__} to bytes")


def _to_int(value, limits: tuple[int, int]) -> int:
    if isinstance(value, bool):
        number = int(value)
    elif isinstance(value, int):
        number = value
    elif isinstance(value, float):
        if not math.isfinite(value):
            raise TerminalEncodingError("conversion error")
        number = int(math.copysign(math.floor(abs(value) + 0.5), value))
    elif isinstance(value, (str, bytes, bytearray)):
        try:
            number = int(value, 10)
        except ValueError as exc:
            raise TerminalEncodingError("conversion error") from exc
    else:
        raise TerminalEncodingError("conversion error")
    low, high = limits
    if not low <= number <= high:
        raise TerminalEncodingError("conversion error")
    return number


def _to_float(value) -> float:
    if isinstance(value, (bool, int, float)):
        return float(value)
    if isinstance(value, (str, bytes, bytearray)):
        try:
            return float(value)
        except ValueError as exc:
            raise TerminalEncodingError("conversion error") from exc
    raise TerminalEncodingError("conversion error")


def _encode_number(value, name: str, big_endian: bool) -> bytes:
    try:
        kind, size = _FORMATS[name]
    except KeyError:
        raise TerminalEncodingError("invalid format") from None

    if kind in ("u", "i"):
        number = _to_int(value, _UNSIGNED_RANGE if kind == "u" else _SIGNED_RANGE)
        encoded = (number & ((1 << (8 * size)) - 1)).to_bytes(size, "little")
    else:
        number = _to_float(value)
        try:
            encoded = struct.pack("<" + kind, number)
        except OverflowError:
            encoded = struct.pack("<" + kind, math.copysign(math.inf, number))
    return encoded[::-1] if big_endian else encoded


def _elements(data) -> list:
    if isinstance(data, (list, tuple)) and data:
        return list(data)
    return [data]


def _encoder(kind: str) -> Callable[[object], bytes]:
    if not kind:
        raise TerminalEncodingError("invalid format")
    if kind[0] == "s":
        return _to_bytes
    big_endian = kind[0].isupper()
    name = kind.lower()
    if name not in _FORMATS:
        raise TerminalEncodingError("invalid format")
    return lambda element: _encode_number(element, name, big_endian)


def encode_for_serial(data, kind: str = "s") -> list[bytes]:
    """Encode one value or a list of values into one byte chunk per value.

    ``kind`` is ``s`` for text or a number format such as ``u16`` or ``float``;
    an upper-case first letter selects big endian.
    """
    encode = _encoder(kind)
    return [encode(element) for element in _elements(data)]


class TerminalInterface:
    """Bridge between a terminal script and the serial line and parser."""

    def __init__(
        self,
        on_transmit: Callable[[bytes], None] | None = None,
        on_parser: Callable[[bytes], None] | None = None,
        on_receive: Callable[[bytes], None] | None = None,
    ) -> None:
        self._on_transmit = on_transmit
        self._on_parser = on_parser
        self._on_receive = on_receive
        self.dark_theme_is_used = False
        self.tab_background = ""

    def transmit_to_serial(self, data, kind: str = "s") -> None:
        """Encode and transmit each value; stops at the first value that fails."""
        encode = _encoder(kind)
        for element in _elements(data):
            chunk = encode(element)
            if self._on_transmit is not None:
                self._on_transmit(chunk)
            log.debug("terminal transmitted: %r", chunk)

    def send_to_parser(self, data) -> None:
        """Hand data to the input parser as bytes."""
        chunk = _to_bytes(data)
        if self._on_parser is not None:
            self._on_parser(chunk)

    def direct_input(self, data: bytes) -> None:
        """Pass data received from the serial line to the terminal."""
        if self._on_receive is not None:
            self._on_receive(bytes(data))