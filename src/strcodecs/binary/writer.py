from __future__ import annotations
from typing import Union
from .codecs.b2 import encode_into
from .sizing import b2_encode_len

def b2_encode(data: Union[bytes, bytearray, memoryview]) -> bytes:
    """Encode bytes as ASCII '0'/'1' text, MSB first. The NUL terminator is stripped."""
    dest = bytearray(b2_encode_len(len(data)))
    d = encode_into(dest, data)
    return bytes(dest[:d])
