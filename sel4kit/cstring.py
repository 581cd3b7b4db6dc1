"""NUL-terminated string comparison and in-buffer memory operations."""

from __future__ import annotations


def _as_bytes(data) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def _at(data: bytes, i: int) -> int:
    return data[i] if i < len(data) else 0


def strlen(data) -> int:
    """Return the number of bytes before the first NUL (or the whole length)."""
    raw = _as_bytes(data)
    end = raw.find(b"\0")
    return len(raw) if end < 0 else end


def strcmp(a, b) -> int:
    """Compare two NUL-terminated byte strings as unsigned bytes.

    The end of a buffer counts as a NUL terminator.
    """
    return strncmp(a, b, max(len(_as_bytes(a)), len(_as_bytes(b))) + 1)


def strncmp(a, b, n: int) -> int:
    """Compare at most n bytes of two NUL-terminated byte strings."""
    if n < 0:
        raise ValueError("n must not be negative")
    left, right = _as_bytes(a), _as_bytes(b)
    for i in range(n):
        x, y = _at(left, i), _at(right, i)
        if x != y or x == 0:
            return x - y
    return 0


def _check_span(buf, offset: int, n: int, what: str) -> None:
    if offset < 0 or n < 0:
        raise ValueError(f"{what} offset and length must not be negative")
    if offset + n > len(buf):
        raise IndexError(f"{what} range {offset}..{offset + n} exceeds buffer of {len(buf)}")


def memset(buf: bytearray, offset: int, value: int, n: int) -> None:
    """Fill n bytes of buf from offset with the low byte of value."""
    _check_span(buf, offset, n, "destination")
    buf[offset : offset + n] = bytes([value & 0xFF]) * n


def memcpy(buf: bytearray, dest: int, src: int, n: int) -> None:
    """Copy n bytes within buf from src to dest, front to back.

    When the destination overlaps the source from above, bytes already
    written are read again, as a forward byte copy does; use memmove to copy
    overlapping regions faithfully.
    """
    _check_span(buf, src, n, "source")
    _check_span(buf, dest, n, "destination")
    if src < dest < src + n:
        period = bytes(buf[src:dest])
        repeats = -(-n // len(period))
        buf[dest : dest + n] = (period * repeats)[:n]
    else:
        buf[dest : dest + n] = buf[src : src + n]


def memmove(buf: bytearray, dest: int, src: int, n: int) -> None:
    """Copy n bytes within buf from src to dest, correct for any overlap."""
    _check_span(buf, src, n, "source")
    _check_span(buf, dest, n, "destination")
    buf[dest : dest + n] = bytes(buf[src : src + n])