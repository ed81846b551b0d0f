from __future__ import annotations
from typing import Tuple, Union
from ..sizing import b2_encode_len

Buffer = Union[bytes, bytearray, memoryview]

_ZERO = 0x30  # '0'
_ONE = 0x31   # '1'

# byte value -> its 8 ASCII digits, MSB first
_ENCODE_TABLE: Tuple[bytes, ...] = tuple(
    bytes(_ONE if (v >> (7 - k)) & 1 else _ZERO for k in range(8))
    for v in range(256)
)


def _same_buffer(a: Buffer, b: Buffer) -> bool:
    """True if a and b are (views over) the same underlying object."""
    if a is b:
        return True
    oa = a.obj if isinstance(a, memoryview) else a
    ob = b.obj if isinstance(b, memoryview) else b
    return oa is ob


def _spans_whole(v: Buffer) -> bool:
    """True if v covers its underlying object from offset 0 to the end."""
    if not isinstance(v, memoryview):
        return True
    with memoryview(v.obj) as whole:
        return v.nbytes == whole.nbytes


def encode_into(dest: bytearray | memoryview, src: Buffer) -> int:
    """
    Write the base-2 text of src into dest, MSB first, then a NUL byte.

    dest needs b2_encode_len(len(src)) bytes. Returns the number of
    characters written, NUL excluded (always 8 * len(src)).
    Encoding expands, so dest must not share memory with src.
    """
    if _same_buffer(dest, src):
        raise ValueError("in-place base-2 encode is not supported")
    with memoryview(src).cast("B") as s, memoryview(dest).cast("B") as out:
        need = b2_encode_len(len(s))
        if len(out) < need:
            raise ValueError(f"dest too small: need {need}, have {len(out)}")
        j = 0
        for v in s:
            out[j:j + 8] = _ENCODE_TABLE[v]
            j += 8
        out[j] = 0
    return j


def _check_group(s: memoryview, off: int) -> bool:
    for k in range(off, off + 8):
        if s[k] != _ZERO and s[k] != _ONE:
            return False
    return True


def decode_into(dest: bytearray | memoryview, src: Buffer, *, strict: bool = False) -> int:
    """
    Rebuild bytes from base-2 text, 8 characters per byte, MSB first.

    Lenient (default): a trailing group shorter than 8 characters is dropped
    and any character other than '0' counts as a set bit.
    strict=True: returns -1 if len(src) is not a multiple of 8 or any
    character is outside {'0', '1'}; dest is left untouched in that case.

    dest may be the same buffer as src. Views into one buffer at other
    offsets are decoded from a copy of src. Returns the number of bytes written.
    """
    if _same_buffer(dest, src) and not (_spans_whole(dest) and _spans_whole(src)):
        with memoryview(src) as m:
            src = m.tobytes()
    with memoryview(src).cast("B") as s, memoryview(dest).cast("B") as out:
        n = len(s)
        groups = n // 8
        if len(out) < groups:
            raise ValueError(f"dest too small: need {groups}, have {len(out)}")

        if strict:
            if n % 8 != 0:
                return -1
            for g in range(groups):
                if not _check_group(s, g * 8):
                    return -1

        for g in range(groups):
            off = g * 8
            acc = 0
            for k in range(8):
                if s[off + k] != _ZERO:
                    acc |= 0x80 >> k
            # group g is fully read before out[g] (g <= off) is written
            out[g] = acc
    return groups
