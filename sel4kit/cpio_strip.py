"""Remove build-host metadata from a newc CPIO archive.

The i-node number, owner, group and modification time of every entry are
overwritten so that archives built from identical files are byte-identical.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from typing import Iterator

_MAGIC = b"070701"
_HEADER_SIZE = 110
_ALIGNMENT = 4
_FIELD_WIDTH = 8
_TRAILER = "TRAILER!!!"
_FIELDS = (
    "ino",
    "mode",
    "uid",
    "gid",
    "nlink",
    "mtime",
    "filesize",
    "devmajor",
    "devminor",
    "rdevmajor",
    "rdevminor",
    "namesize",
    "check",
)
# I-node numbers up to 10 are reserved on some file systems.
_FIRST_INODE = 11


class CpioError(ValueError):
    """Raised when an archive cannot be interpreted as newc CPIO."""


@dataclass(frozen=True)
class CpioEntry:
    """One file entry of a CPIO archive, excluding the trailer."""

    index: int
    name: str
    offset: int
    data_offset: int
    size: int
    ino: int
    mode: int
    uid: int
    gid: int
    mtime: int
    data: bytes = field(repr=False)


def _align(value: int) -> int:
    return (value + _ALIGNMENT - 1) & ~(_ALIGNMENT - 1)


def _field_span(offset: int, name: str) -> slice:
    start = offset + len(_MAGIC) + _FIELD_WIDTH * _FIELDS.index(name)
    return slice(start, start + _FIELD_WIDTH)


def _read_field(data, offset: int, name: str) -> int:
    raw = bytes(data[_field_span(offset, name)]).split(b"\0", 1)[0]
    if not raw:
        return 0
    try:
        return int(raw, 16)
    except ValueError:
        raise CpioError(f"invalid {name} field in header at offset {offset}") from None


def iter_entries(data) -> Iterator[CpioEntry]:
    """Yield the entries of a newc archive up to, but not including, the trailer."""
    length = len(data)
    offset = 0
    index = 0
    while True:
        if offset + _HEADER_SIZE > length:
            raise CpioError(f"truncated header at offset {offset}")
        if bytes(data[offset : offset + len(_MAGIC)]) != _MAGIC:
            raise CpioError(f"bad magic in header at offset {offset}")
        namesize = _read_field(data, offset, "namesize")
        filesize = _read_field(data, offset, "filesize")
        if namesize == 0:
            raise CpioError(f"empty file name in header at offset {offset}")
        name_start = offset + _HEADER_SIZE
        name_end = name_start + namesize
        if name_end > length:
            raise CpioError(f"truncated file name at offset {name_start}")
        raw_name = bytes(data[name_start:name_end]).split(b"\0", 1)[0]
        name = raw_name.decode("utf-8", "surrogateescape")
        data_start = _align(name_end)
        data_end = data_start + filesize
        if data_end > length:
            raise CpioError(f"truncated contents of {name!r}")
        if name == _TRAILER:
            return
        yield CpioEntry(
            index=index,
            name=name,
            offset=offset,
            data_offset=data_start,
            size=filesize,
            ino=_read_field(data, offset, "ino"),
            mode=_read_field(data, offset, "mode"),
            uid=_read_field(data, offset, "uid"),
            gid=_read_field(data, offset, "gid"),
            mtime=_read_field(data, offset, "mtime"),
            data=bytes(data[data_start:data_end]),
        )
        offset = _align(data_end)
        index += 1


def strip_archive(data) -> bytes:
    """Return a copy of the archive with i-node, owner, group and mtime replaced.

    The i-node field receives the first seven hex digits of ``11 + index``
    followed by a NUL byte, as a size-limited ``%08x`` print produces; the
    owner, group and modification time fields are filled with NUL bytes.
    """
    buffer = bytearray(data)
    entries = list(iter_entries(buffer))
    blank = b"\0" * _FIELD_WIDTH
    for entry in entries:
        inode = f"{_FIRST_INODE + entry.index:08x}".encode("ascii")
        buffer[_field_span(entry.offset, "ino")] = inode[: _FIELD_WIDTH - 1] + b"\0"
        for name in ("uid", "gid", "mtime"):
            buffer[_field_span(entry.offset, name)] = blank
    return bytes(buffer)


def strip_file(path) -> int:
    """Strip an archive file in place and return the number of entries."""
    with open(path, "r+b") as handle:
        content = handle.read()
        if not content:
            raise CpioError("archive is empty")
        stripped = strip_archive(content)
        handle.seek(0)
        handle.write(stripped)
    return sum(1 for _ in iter_entries(stripped))


def main(argv=None) -> int:
    """Command-line entry point: strip the metadata of one archive file."""
    args = sys.argv[1:] if argv is None else list(argv)
    prog = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "cpio-strip"
    if len(args) != 1:
        print(f"Usage: {prog} file\n Strip meta data from a CPIO file", file=sys.stderr)
        return 1
    try:
        strip_file(args[0])
    except OSError as exc:
        print(f"failed to open archive: {exc}", file=sys.stderr)
        return 1
    except CpioError as exc:
        print(f"failed to read CPIO info: {exc}", file=sys.stderr)
        return 1
    return 0