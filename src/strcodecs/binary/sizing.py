def _check_len(n: int) -> int:
    if n < 0:
        raise ValueError(f"length must be >= 0, got {n}")
    return n

def b2_encode_len(n: int) -> int:
    """
    Destination capacity for base-2 encoding n bytes.
    8 characters per input byte, +1 for the NUL written after them.
    """
    return 8 * _check_len(n) + 1

def b2_encode_strlen(n: int) -> int:
    """Characters produced by encoding n bytes (NUL not counted)."""
    return 8 * _check_len(n)

def b2_decode_len(n: int) -> int:
    # (n + 1) // 8 rounds up a 7-char tail; decode itself only emits n // 8.
    return (_check_len(n) + 1) // 8
