"""Flattened device tree header inspection."""

from __future__ import annotations

import struct

FDT_MAGIC = 0xD00DFEED
# Newest FDT version that is understood.
FDT_MAX_VERSION = 17

_HEADER = struct.Struct(">10I")


def fdt_size(blob) -> int:
    """Return the total size recorded in an FDT header, or 0 if it is not usable.

    The header is rejected when its magic is wrong or when it is only
    compatible with versions newer than FDT_MAX_VERSION.
    """
    if len(blob) < _HEADER.size:
        raise ValueError(f"FDT header needs {_HEADER.size} bytes, got {len(blob)}")
    (
        magic,
        totalsize,
        _off_dt_struct,
        _off_dt_strings,
        _off_mem_rsvmap,
        _version,
        last_comp_version,
        _boot_cpuid_phys,
        _size_dt_strings,
        _size_dt_struct,
    ) = _HEADER.unpack_from(blob)
    if magic != FDT_MAGIC or last_comp_version > FDT_MAX_VERSION:
        return 0
    return totalsize