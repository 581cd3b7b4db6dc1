"""Boot-image utilities: CPIO metadata stripping, FDT sizing, digests, printf formatting and C string helpers."""

__version__ = "0.1.0"
__all__ = ["cpio_strip", "fdt", "digests", "formatting", "cstring"]