# sel4kit

Small tools for building boot images, with no dependencies outside the
standard library. They also model the minimal helpers a boot loader carries.

## Modules

### `sel4kit.cpio_strip`

Removes build-host metadata from a `newc` CPIO archive. Repeated builds from
identical files then produce identical archives.

- `iter_entries(data)` yields a `CpioEntry` for each file, stopping before
  the `TRAILER!!!` record. Each entry has its index, name, offsets, size,
  i-node, mode, uid, gid, mtime and contents.
- `strip_archive(data)` returns a copy of the archive with these changes:
  - The i-node field of entry *n* is set to the first seven hex digits of
    `11 + n`, followed by a NUL byte.
  - The uid, gid and mtime fields are filled with NUL bytes.
- `strip_file(path)` strips an archive file in place and returns the number
  of entries.

An archive that is malformed, truncated or empty raises `CpioError`, a
subclass of `ValueError`.

### `sel4kit.fdt`

`fdt_size(blob)` returns the `totalsize` field of a flattened device-tree
header. It returns 0 in either of these cases:

- the magic is not `0xd00dfeed`;
- `last_comp_version` is newer than 17.

A blob shorter than the 40-byte header raises `ValueError`.

### `sel4kit.digests`

- `Md5` and `Sha256` are incremental hashers. Each has `update(data)`,
  `digest()` and `hexdigest()`. `digest()` does not reset the hasher, so you
  can keep feeding it data afterwards.
- `get_hash(hash_type, data)` returns the SHA-256 digest for
  `HashType.SHA_256` and the MD5 digest otherwise.
- `print_hash(digest, stream=None)` writes each byte in hex to `stream`
  (default: standard output), then a newline.

Note that `print_hash` does not zero-pad bytes: the byte `0x0a` is written as
`a`, not `0a`.

### `sel4kit.formatting`

`cformat(fmt, *args)` formats text in a minimal printf dialect.

- Supported conversions: `%s %p %x %d %u %c %%`, plus the `z`, `l` and `ll`
  forms of `d`, `u` and `x`.
- Plain `%x`, `%d` and `%u` read the argument as a 32-bit C int and print it
  unsigned after widening to 64 bits. `cformat("%d", -1)` gives
  `18446744073709551615`.
- Width, precision, `-` and `.` characters are ignored.
- An unknown conversion prints `?`.
- Too few arguments raise `TypeError`.

`Console(putchar)` prints through a callback that receives character codes.
The default callback writes to standard output.

- `printf(fmt, *args)` and `puts(text)` write a carriage return before every
  newline.
- Both return the number of characters written. This count does not include
  the inserted carriage returns.

### `sel4kit.cstring`

C string and memory semantics over Python byte buffers.

- `strlen`, `strcmp` and `strncmp` accept bytes or str. The end of a buffer
  counts as a NUL terminator.
- `memset(buf, offset, value, n)`, `memcpy(buf, dest, src, n)` and
  `memmove(buf, dest, src, n)` work on a `bytearray` in place.
- `memcpy` copies forwards byte by byte. When the destination overlaps the
  source from above, it re-reads bytes it has already written. `memmove`
  copies overlapping regions correctly.
- Out-of-range spans raise `IndexError`.
- Negative offsets or lengths raise `ValueError`.

## Command line

```
cpio-strip archive.cpio
```

This strips the named archive in place. If the file cannot be opened or read
as a `newc` archive, the command prints a message to standard error and exits
with status 1. It does the same, after printing usage, when it is not given
exactly one argument.

## Library use

```python
from sel4kit.cpio_strip import strip_archive
from sel4kit.digests import HashType, get_hash
from sel4kit.formatting import cformat

with open("archive.cpio", "rb") as fh:
    clean = strip_archive(fh.read())
print(get_hash(HashType.SHA_256, clean).hex())
print(cformat("%s has %lu bytes", "archive.cpio", len(clean)))
```

## What it does not do

- It does not create CPIO archives. It only reads existing ones and rewrites
  their metadata.
- It does not parse the device-tree structure beyond the header size check.
- It does not match device-tree compatible strings to drivers.
- It has no UART or other device output. Console output goes only to the
  callback you give `Console`.

## Tests

```
pip install .[test]
pytest
```