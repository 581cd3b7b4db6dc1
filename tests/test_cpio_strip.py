import pytest

from sel4kit.cpio_strip import CpioError, iter_entries, main, strip_archive, strip_file


def _pad(blob):
    return blob + b"\0" * (-len(blob) % 4)


def _entry(name, data, ino=1234, uid=1000, gid=1000, mtime=1600000000, mode=0o100644):
    raw_name = name.encode()
    fields = [ino, mode, uid, gid, 1, mtime, len(data), 0, 0, 0, 0, len(raw_name) + 1, 0]
    header = b"070701" + b"".join(b"%08x" % value for value in fields)
    return _pad(header + raw_name + b"\0") + _pad(data)


def _archive(*entries):
    return b"".join(entries) + _entry("TRAILER!!!", b"", ino=0, uid=0, gid=0, mtime=0, mode=0)


def _field(blob, header_offset, index):
    start = header_offset + 6 + 8 * index
    return blob[start : start + 8]


@pytest.fixture
def sample():
    return _archive(
        _entry("kernel.elf", b"\x7fELF" + b"x" * 13, ino=77, uid=501, gid=20, mtime=123456),
        _entry("rootserver", b"hello", ino=78, uid=501, gid=20, mtime=654321),
    )


def test_iter_entries_reads_names_and_contents(sample):
    entries = list(iter_entries(sample))
    assert [e.name for e in entries] == ["kernel.elf", "rootserver"]
    assert entries[1].data == b"hello"
    assert entries[0].size == 17
    assert [e.index for e in entries] == [0, 1]


def test_iter_entries_reads_metadata(sample):
    first = next(iter_entries(sample))
    assert (first.ino, first.uid, first.gid, first.mtime) == (77, 501, 20, 123456)
    assert first.mode == 0o100644
    assert first.offset == 0


def test_empty_archive_has_no_entries():
    assert list(iter_entries(_archive())) == []


def test_bad_magic_rejected(sample):
    with pytest.raises(CpioError):
        list(iter_entries(b"070707" + sample[6:]))


def test_truncated_archive_rejected(sample):
    with pytest.raises(CpioError):
        list(iter_entries(sample[:50]))


def test_missing_trailer_rejected():
    with pytest.raises(CpioError):
        list(iter_entries(_entry("a", b"abc")))


def test_strip_keeps_length_and_contents(sample):
    stripped = strip_archive(sample)
    assert len(stripped) == len(sample)
    before = list(iter_entries(sample))
    after = list(iter_entries(stripped))
    assert [(e.name, e.data, e.mode) for e in after] == [(e.name, e.data, e.mode) for e in before]


def test_strip_blanks_owner_and_time(sample):
    stripped = strip_archive(sample)
    for entry in iter_entries(stripped):
        assert _field(stripped, entry.offset, 2) == b"\0" * 8
        assert _field(stripped, entry.offset, 3) == b"\0" * 8
        assert _field(stripped, entry.offset, 5) == b"\0" * 8
        assert (entry.uid, entry.gid, entry.mtime) == (0, 0, 0)


def test_strip_synthesises_inode(sample):
    stripped = strip_archive(sample)
    offsets = [e.offset for e in iter_entries(stripped)]
    for index, offset in enumerate(offsets):
        expected = f"{11 + index:08x}".encode()[:7] + b"\0"
        assert _field(stripped, offset, 0) == expected


def test_strip_is_idempotent(sample):
    once = strip_archive(sample)
    assert strip_archive(once) == once


def test_archives_differing_in_metadata_strip_identically():
    first = _archive(_entry("a", b"abc", ino=5, uid=1, gid=2, mtime=3))
    second = _archive(_entry("a", b"abc", ino=9, uid=7, gid=8, mtime=99999))
    assert first != second
    assert strip_archive(first) == strip_archive(second)


def test_strip_file_in_place(tmp_path, sample):
    path = tmp_path / "archive.cpio"
    path.write_bytes(sample)
    assert strip_file(path) == 2
    assert path.read_bytes() == strip_archive(sample)


def test_strip_file_empty_rejected(tmp_path):
    path = tmp_path / "empty.cpio"
    path.write_bytes(b"")
    with pytest.raises(CpioError):
        strip_file(path)


def test_main_usage(capsys):
    assert main([]) == 1
    assert "Usage:" in capsys.readouterr().err


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.cpio")]) == 1
    assert "failed to open archive" in capsys.readouterr().err


def test_main_bad_archive(tmp_path, capsys):
    path = tmp_path / "bad.cpio"
    path.write_bytes(b"not an archive at all" * 10)
    assert main([str(path)]) == 1
    assert "failed to read CPIO info" in capsys.readouterr().err


def test_main_success(tmp_path, sample):
    path = tmp_path / "archive.cpio"
    path.write_bytes(sample)
    assert main([str(path)]) == 0
    assert path.read_bytes() == strip_archive(sample)