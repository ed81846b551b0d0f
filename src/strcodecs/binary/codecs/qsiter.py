from __future__ import annotations
from typing import Iterator, Optional, Tuple

_AMP = 0x26  # '&'
_EQ = 0x3D   # '='


class QsCursor:
    """
    URL query string key/value iterator over a borrowed buffer.

    Makes no copy and never writes to the input; keys and values come back as
    memoryview slices of it. No %XX or '+' unescaping is done.

        cur = QsCursor(b"foo=bar&ding=baz")
        while cur.next():
            print(bytes(cur.key), bytes(cur.value))
    """
    __slots__ = ("buf", "len", "pos", "key_off", "key_len",
                 "val_off", "val_len", "has_value", "_trailing")

    def __init__(self, data: bytes | bytearray | memoryview = b""):
        self.reset(data)

    def reset(self, data: bytes | bytearray | memoryview) -> None:
        self.buf = memoryview(data).cast("B").toreadonly()
        self.len = len(self.buf)
        self.pos = 0
        self._trailing = False
        self._clear()

    def _clear(self) -> None:
        self.key_off, self.key_len = -1, 0
        self.val_off, self.val_len = -1, 0
        self.has_value = False

    def __copy__(self):
        raise TypeError("QsCursor cannot be copied; bind a new cursor with reset()")

    def __deepcopy__(self, memo):
        raise TypeError("QsCursor cannot be copied; bind a new cursor with reset()")

    def tell(self) -> int: return self.pos
    def remaining(self) -> int: return self.len - self.pos

    @property
    def key(self) -> Optional[memoryview]:
        if self.key_off < 0: return None
        return self.buf[self.key_off:self.key_off + self.key_len]

    @property
    def value(self) -> Optional[memoryview]:
        # absent values are an empty slice at the end of the key
        if self.key_off < 0: return None
        return self.buf[self.val_off:self.val_off + self.val_len]

    def next(self) -> bool:
        """
        Advance to the next key/value pair.
        Returns False once the input is exhausted; key/value are cleared then.
        """
        if self.pos >= self.len:
            if not self._trailing:
                self._clear()
                return False
            # input ended with '&': one more empty field sits at the end
            self._trailing = False
            self.key_off, self.key_len = self.len, 0
            self.val_off, self.val_len = self.len, 0
            self.has_value = False
            return True

        buf, end = self.buf, self.len
        start = i = self.pos
        while i < end and buf[i] != _EQ and buf[i] != _AMP:
            i += 1
        self.key_off, self.key_len = start, i - start

        if i < end and buf[i] == _EQ:
            vstart = i = i + 1
            while i < end and buf[i] != _AMP:
                i += 1
            self.val_off, self.val_len = vstart, i - vstart
            self.has_value = True
        else:
            self.val_off, self.val_len = i, 0
            self.has_value = False

        if i < end:
            # i sits on '&'
            self.pos = i + 1
            self._trailing = self.pos == end
        else:
            self.pos = end
        return True

    def __iter__(self) -> Iterator[Tuple[memoryview, memoryview]]:
        while self.next():
            yield self.key, self.value
