import struct

import pytest

from scopeplot.transmit import TerminalEncodingError, TerminalInterface, encode_for_serial


def test_string_mode_single():
    assert encode_for_serial("hello", "s") == [b"hello"]


def test_string_mode_list():
    assert encode_for_serial(["ab", b"cd"], "s") == [b"ab", b"cd"]


def test_string_mode_is_default():
    assert encode_for_serial("x") == [b"x"]


def test_u16_little_endian():
    assert encode_for_serial(0x1234, "u16") == [struct.pack("<H", 0x1234)]


def test_u16_big_endian():
    assert encode_for_serial(0x1234, "U16") == [struct.pack(">H", 0x1234)]


def test_long_and_short_names_agree():
    assert encode_for_serial(1000, "uint32") == encode_for_serial(1000, "u32")
    assert encode_for_serial(-5, "int16") == encode_for_serial(-5, "i16")


def test_u24_width():
    (chunk,) = encode_for_serial(0x123456, "u24")
    assert chunk == (0x123456).to_bytes(3, "little")


def test_i24_big_endian_round_trip():
    (chunk,) = encode_for_serial(-1000, "I24")
    assert int.from_bytes(chunk, "big", signed=True) == -1000


def test_i8_negative():
    assert encode_for_serial(-1, "i8") == [struct.pack("<b", -1)]


def test_u64_is_eight_bytes():
    (chunk,) = encode_for_serial(7, "u64")
    assert struct.unpack("<Q", chunk) == (7,)


def test_u8_truncates():
    assert encode_for_serial(256, "u8") == encode_for_serial(0, "u8")


def test_float_big_endian():
    assert encode_for_serial(1.5, "F") == [struct.pack(">f", 1.5)]


def test_double_round_trip():
    (chunk,) = encode_for_serial(3.25, "double")
    assert struct.unpack("<d", chunk) == (3.25,)


def test_numeric_string_accepted():
    assert encode_for_serial("12", "u8") == encode_for_serial(12, "u8")


def test_list_of_numbers():
    chunks = encode_for_serial([1, 2, 3], "u16")
    assert [struct.unpack("<H", c)[0] for c in chunks] == [1, 2, 3]


def test_invalid_format():
    with pytest.raises(TerminalEncodingError):
        encode_for_serial(1, "u12")


def test_uppercase_s_is_not_string_mode():
    with pytest.raises(TerminalEncodingError):
        encode_for_serial("a", "S")


def test_empty_kind():
    with pytest.raises(TerminalEncodingError):
        encode_for_serial("a", "")


def test_conversion_error():
    with pytest.raises(TerminalEncodingError):
        encode_for_serial("abc", "u8")


def test_out_of_range_conversion_error():
    with pytest.raises(TerminalEncodingError):
        encode_for_serial(2**40, "u64")


def test_transmit_emits_each_element():
    sent = []
    terminal = TerminalInterface(on_transmit=sent.append)
    terminal.transmit_to_serial([1, 2], "u8")
    assert sent == encode_for_serial([1, 2], "u8")


def test_transmit_stops_at_failing_element():
    sent = []
    terminal = TerminalInterface(on_transmit=sent.append)
    with pytest.raises(TerminalEncodingError):
        terminal.transmit_to_serial([1, "bad", 3], "u8")
    assert sent == encode_for_serial(1, "u8")


def test_send_to_parser():
    parsed = []
    terminal = TerminalInterface(on_parser=parsed.append)
    terminal.send_to_parser("data")
    assert parsed == [b"data"]


def test_direct_input():
    received = []
    terminal = TerminalInterface(on_receive=received.append)
    terminal.direct_input(b"\x01\x02")
    assert received == [b"\x01\x02"]