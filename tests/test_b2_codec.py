import os

import pytest

from strcodecs.binary.codecs.b2 import encode_into, decode_into
from strcodecs.binary.sizing import b2_encode_len, b2_decode_len

def _encode(src: bytes) -> bytearray:
    dest = bytearray(b2_encode_len(len(src)))
    n = encode_into(dest, src)
    assert n == 8 * len(src)
    assert dest[n] == 0
    return dest[:n]

def test_encode_single_bytes():
    assert _encode(b"\xff") == b"11111111"
    assert _encode(b"\x00") == b"00000000"
    assert _encode(b"\x80\x01") == b"1000000000000001"
    assert _encode(b"A") == b"01000001"

def test_encode_empty_writes_only_nul():
    dest = bytearray(b"\xaa")
    assert encode_into(dest, b"") == 0
    assert dest == b"\x00"

def test_encode_dest_too_small():
    with pytest.raises(ValueError):
        encode_into(bytearray(8), b"\x01")  # no room for NUL

def test_encode_in_place_rejected():
    buf = bytearray(b"\x01" + b"\x00" * 8)
    with pytest.raises(ValueError):
        encode_into(buf, buf)
    with pytest.raises(ValueError):
        encode_into(memoryview(buf), buf)

def test_roundtrip_random():
    for n in (0, 1, 7, 64):
        src = os.urandom(n)
        enc = _encode(src)
        dest = bytearray(b2_decode_len(len(enc)))
        assert decode_into(dest, enc) == n
        assert bytes(dest[:n]) == src

def test_decode_known_values():
    dest = bytearray(2)
    assert decode_into(dest, b"0100000111111111") == 2
    assert dest == b"A\xff"

def test_decode_truncates_partial_group():
    # 15 chars: one full group, the 7-char tail is dropped
    dest = bytearray(b2_decode_len(15))
    assert len(dest) == 2
    assert decode_into(dest, b"10101010" + b"1111111") == 1
    assert dest[0] == 0xAA
    assert decode_into(bytearray(1), b"1111111") == 0

def test_decode_lenient_non_zero_is_set_bit():
    dest = bytearray(1)
    assert decode_into(dest, b"0000000x") == 1
    assert dest[0] == 0x01

def test_decode_strict_rejects():
    dest = bytearray(b"\xee\xee")
    assert decode_into(dest, b"0000000", strict=True) == -1
    assert decode_into(dest, b"0000000x", strict=True) == -1
    assert decode_into(dest, b"00000001" + b"0000000 ", strict=True) == -1
    assert dest == b"\xee\xee"
    assert decode_into(dest, b"0000000100000010", strict=True) == 2
    assert dest == b"\x01\x02"

def test_decode_in_place():
    src = os.urandom(5)
    buf = _encode(src)
    assert decode_into(buf, buf) == 5
    assert bytes(buf[:5]) == src

def test_decode_dest_too_small():
    with pytest.raises(ValueError):
        decode_into(bytearray(1), b"0" * 16)

def test_decode_into_later_view_of_same_buffer():
    buf = _encode(b"\x01\x02\x03")
    assert decode_into(memoryview(buf)[9:], buf) == 3
    assert bytes(buf[9:12]) == b"\x01\x02\x03"

def test_decode_from_later_view_into_whole_buffer():
    buf = bytearray(b"xxxxxxxx") + _encode(b"\xa5\x5a")
    assert decode_into(buf, memoryview(buf)[8:], strict=True) == 2
    assert bytes(buf[:2]) == b"\xa5\x5a"
