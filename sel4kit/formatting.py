"""A minimal printf-style formatter and a console that counts what it prints.

Only the conversions ``%s %p %x %d %u %c %z? %l? %ll? %%`` are understood.
Width, precision and flag characters are accepted and ignored. Unknown
conversions print ``?`` and consume no argument.
"""

from __future__ import annotations

import operator
import sys
from dataclasses import dataclass, field
from typing import Callable, Iterator

_HEX = "0123456789abcdef"
_MASK32 = 0xFFFFFFFF
_MASK64 = (1 << 64) - 1
_IGNORED_MODIFIERS = frozenset("0123456789-.")
_LONG_CONVERSIONS = {"d": 10, "u": 10, "x": 16}


def _format_number(n: int, base: int) -> str:
    if n == 0:
        return "0"
    digits = []
    while n > 0:
        n, remainder = divmod(n, base)
        digits.append(_HEX[remainder])
    return "".join(reversed(digits))


def _as_c_int(value) -> int:
    """Read a value as a C int and widen it to a 64-bit unsigned integer."""
    v32 = operator.index(value) & _MASK32
    return v32 | (_MASK64 ^ _MASK32) if v32 & 0x80000000 else v32


def _as_u64(value) -> int:
    return operator.index(value) & _MASK64


def _as_text(value) -> str:
    if isinstance(value, (bytes, bytearray)):
        value = bytes(value).decode("latin-1")
    elif not isinstance(value, str):
        raise TypeError(f"%s expects a string, got {type(value).__name__}")
    return value.split("\0", 1)[0]


def _as_char(value) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("%c expects a single character")
        return value
    return chr(operator.index(value) & 0xFF)


def _render(fmt: str, args: tuple) -> Iterator[str]:
    pending = iter(args)

    def take():
        try:
            return next(pending)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None

    chars = iter(fmt)
    escape = False
    for ch in chars:
        if ch == "\0":
            return
        if not escape:
            if ch == "%":
                escape = True
            else:
                yield ch
            continue
        if ch == "%":
            yield ch
            escape = False
            continue
        if ch in _IGNORED_MODIFIERS:
            continue
        escape = False
        if ch == "s":
            yield from _as_text(take())
        elif ch == "p":
            yield from _format_number(_as_u64(take()), 16)
        elif ch == "x":
            yield from _format_number(_as_c_int(take()), 16)
        elif ch in ("d", "u"):
            yield from _format_number(_as_c_int(take()), 10)
        elif ch == "c":
            yield _as_char(take())
        elif ch == "z":
            base = _LONG_CONVERSIONS.get(next(chars, ""))
            yield "?" if base is None else _format_number(_as_u64(take()), base)
        elif ch == "l":
            following = next(chars, "")
            if following == "l":
                following = next(chars, "")
            base = _LONG_CONVERSIONS.get(following)
            yield "?" if base is None else _format_number(_as_u64(take()), base)
        else:
            yield "?"


def cformat(fmt: str, *args) -> str:
    """Format arguments the way the minimal printf does and return the text."""
    return "".join(_render(fmt, args))


def _stdout_putchar(c: int) -> None:
    sys.stdout.write(chr(c))


@dataclass
class Console:
    """Character console that emits CR before every LF.

    ``putchar`` receives each character code. The returned counts include
    every character of the text but not the inserted carriage returns.
    """

    putchar: Callable[[int], object] = field(default=_stdout_putchar)

    def _write(self, text: str) -> int:
        count = 0
        for ch in text:
            if ch == "\n":
                self.putchar(ord("\r"))
            count += 1
            self.putchar(ord(ch))
        return count

    def printf(self, fmt: str, *args) -> int:
        """Print formatted text and return the number of characters counted."""
        return self._write(cformat(fmt, *args))

    def puts(self, text: str) -> int:
        """Print text followed by a newline and return the characters counted."""
        return self._write(_as_text(text) + "\n")