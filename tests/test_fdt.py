import struct

import pytest

from sel4kit.fdt import FDT_MAGIC, FDT_MAX_VERSION, fdt_size


def _header(magic=0xD00DFEED, totalsize=4096, last_comp_version=16):
    return struct.pack(">10I", magic, totalsize, 56, 2000, 40, 17, last_comp_version, 0, 300, 1500)


def test_valid_header_returns_total_size():
    assert fdt_size(_header(totalsize=4096)) == 4096


def test_magic_is_big_endian_on_the_wire():
    rest = struct.pack(">9I", 321, 56, 2000, 40, 17, 16, 0, 300, 1500)
    assert fdt_size(b"\xd0\x0d\xfe\xed" + rest) == 321
    assert fdt_size(FDT_MAGIC.to_bytes(4, "little") + rest) == 0


def test_bad_magic_returns_zero():
    assert fdt_size(_header(magic=0xEDFE0DD0)) == 0


def test_newest_supported_version_accepted():
    assert fdt_size(_header(totalsize=777, last_comp_version=FDT_MAX_VERSION)) == 777


def test_too_new_version_returns_zero():
    assert fdt_size(_header(last_comp_version=FDT_MAX_VERSION + 1)) == 0


def test_trailing_data_ignored():
    blob = bytearray(_header(totalsize=123)) + b"\xff" * 64
    assert fdt_size(blob) == 123


def test_short_blob_rejected():
    with pytest.raises(ValueError):
        fdt_size(_header()[:20])