from __future__ import annotations

from pathlib import Path
from typing import Iterator, List, Tuple, Union

from .codecs.qsiter import QsCursor
from .codecs.b2 import decode_into
from .sizing import b2_decode_len

from strcodecs.models.common import QueryPair

BytesLike = Union[str, Path, bytes, bytearray, memoryview]


class B2DecodeError(ValueError):
    pass


# -----------------------------
# Helpers
# -----------------------------

def _load_bytes(inp: BytesLike) -> bytes:
    if isinstance(inp, (bytes, bytearray, memoryview)):
        return bytes(inp)
    p = Path(str(inp))
    return p.read_bytes()


def _text(view: memoryview) -> str:
    # raw bytes in, no charset semantics: round-trips any byte via surrogateescape
    return view.tobytes().decode("utf-8", errors="surrogateescape")


# -----------------------------
# Query strings
# -----------------------------

def iter_pairs(data: Union[bytes, bytearray, memoryview]) -> Iterator[Tuple[memoryview, memoryview]]:
    """
    Stream (key, value) views over data without copying.
    Values of fields without '=' are empty views.
    """
    cur = QsCursor(data)
    while cur.next():
        yield cur.key, cur.value


def parse_query(data: Union[str, Path, bytes, bytearray, memoryview]) -> List[QueryPair]:
    """
    Tokenize a query string and copy every field out as a QueryPair.
    A str is the query text itself (UTF-8, surrogateescape); a Path is read
    from disk. No %XX or '+' unescaping is done.
    """
    if isinstance(data, Path):
        raw = _load_bytes(data)
    elif isinstance(data, str):
        raw = data.encode("utf-8", errors="surrogateescape")
    else:
        raw = data
    cur = QsCursor(raw)
    out: List[QueryPair] = []
    while cur.next():
        out.append(QueryPair(
            key=_text(cur.key),
            value=_text(cur.value),
            has_value=cur.has_value,
            key_offset=cur.key_off,
            value_offset=cur.val_off if cur.has_value else -1,
        ))
    return out


# -----------------------------
# Base-2 text -> bytes
# -----------------------------

def b2_decode(data: Union[bytes, bytearray, memoryview], *, strict: bool = False) -> bytes:
    """Decode base-2 text into a new bytes object; raises B2DecodeError on malformed input."""
    dest = bytearray(b2_decode_len(len(data)))
    d = decode_into(dest, data, strict=strict)
    if d < 0:
        raise B2DecodeError(f"malformed base-2 input ({len(data)} chars)")
    return bytes(dest[:d])


def b2_decode_inplace(buf: bytearray, *, strict: bool = False) -> bytearray:
    """
    Decode buf over itself and shrink it to the decoded length.
    On error buf is cleared and B2DecodeError is raised.
    """
    n = len(buf)
    d = decode_into(buf, buf, strict=strict)
    if d < 0:
        buf.clear()
        raise B2DecodeError(f"malformed base-2 input ({n} chars)")
    del buf[d:]
    return buf
