import pytest

from strcodecs.binary.sizing import b2_encode_len, b2_encode_strlen, b2_decode_len

def test_encode_sizes():
    for n in range(0, 20):
        assert b2_encode_len(n) == 8 * n + 1
        assert b2_encode_strlen(n) == 8 * n

def test_decode_len_boundaries():
    assert b2_decode_len(0) == 0
    assert b2_decode_len(6) == 0
    assert b2_decode_len(7) == 1
    assert b2_decode_len(8) == 1
    assert b2_decode_len(15) == 2
    assert b2_decode_len(16) == 2

def test_negative_rejected():
    with pytest.raises(ValueError):
        b2_encode_len(-1)
    with pytest.raises(ValueError):
        b2_decode_len(-1)
