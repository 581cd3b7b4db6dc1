"""MD5 and SHA-256 message digests and helpers to compute and print them."""

from __future__ import annotations

import enum
import struct
import sys
from typing import Callable

_MASK = 0xFFFFFFFF
_MASK64 = (1 << 64) - 1


def _rol(n: int, k: int) -> int:
    return ((n << k) | (n >> (32 - k))) & _MASK


def _ror(n: int, k: int) -> int:
    return ((n >> k) | (n << (32 - k))) & _MASK


class _BlockState:
    """Buffering and padding shared by 64-byte block digests."""

    def __init__(
        self,
        initial: tuple,
        process: Callable[[list, bytes], None],
        byteorder: str,
        state_format: str,
    ) -> None:
        self._h = list(initial)
        self._process = process
        self._byteorder = byteorder
        self._state_format = state_format
        self._length = 0
        self._pending = bytearray()

    def absorb(self, data) -> None:
        chunk = bytes(data)
        self._length += len(chunk)
        self._pending += chunk
        full = len(self._pending) - len(self._pending) % 64
        for start in range(0, full, 64):
            self._process(self._h, bytes(self._pending[start : start + 64]))
        del self._pending[:full]

    def finish(self) -> bytes:
        state = list(self._h)
        bit_length = (self._length * 8) & _MASK64
        tail = (
            bytes(self._pending)
            + b"\x80"
            + b"\x00" * ((55 - len(self._pending)) % 64)
            + bit_length.to_bytes(8, self._byteorder)
        )
        for start in range(0, len(tail), 64):
            self._process(state, tail[start : start + 64])
        return struct.pack(self._state_format, *state)


_MD5_T = (
    0xD76AA478, 0xE8C7B756, 0x242070DB, 0xC1BDCEEE, 0xF57C0FAF, 0x4787C62A, 0xA8304613, 0xFD469501,
    0x698098D8, 0x8B44F7AF, 0xFFFF5BB1, 0x895CD7BE, 0x6B901122, 0xFD987193, 0xA679438E, 0x49B40821,
    0xF61E2562, 0xC040B340, 0x265E5A51, 0xE9B6C7AA, 0xD62F105D, 0x02441453, 0xD8A1E681, 0xE7D3FBC8,
    0x21E1CDE6, 0xC33707D6, 0xF4D50D87, 0x455A14ED, 0xA9E3E905, 0xFCEFA3F8, 0x676F02D9, 0x8D2A4C8A,
    0xFFFA3942, 0x8771F681, 0x6D9D6122, 0xFDE5380C, 0xA4BEEA44, 0x4BDECFA9, 0xF6BB4B60, 0xBEBFBC70,
    0x289B7EC6, 0xEAA127FA, 0xD4EF3085, 0x04881D05, 0xD9D4D039, 0xE6DB99E5, 0x1FA27CF8, 0xC4AC5665,
    0xF4292244, 0x432AFF97, 0xAB9423A7, 0xFC93A039, 0x655B59C3, 0x8F0CCC92, 0xFFEFF47D, 0x85845DD1,
    0x6FA87E4F, 0xFE2CE6E0, 0xA3014314, 0x4E0811A1, 0xF7537E82, 0xBD3AF235, 0x2AD7D2BB, 0xEB86D391,
)
_MD5_SHIFTS = ((7, 12, 17, 22), (5, 9, 14, 20), (4, 11, 16, 23), (6, 10, 15, 21))
_MD5_INITIAL = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476)


def _md5_process(state: list, block: bytes) -> None:
    words = struct.unpack("<16I", block)
    a, b, c, d = state
    for i, constant in enumerate(_MD5_T):
        stage = i // 16
        if stage == 0:
            f = d ^ (b & (c ^ d))
            g = i
        elif stage == 1:
            f = c ^ (d & (c ^ b))
            g = (5 * i + 1) % 16
        elif stage == 2:
            f = b ^ c ^ d
            g = (3 * i + 5) % 16
        else:
            f = c ^ (b | (~d & _MASK))
            g = (7 * i) % 16
        total = (a + f + words[g] + constant) & _MASK
        a, d, c, b = d, c, b, (b + _rol(total, _MD5_SHIFTS[stage][i % 4])) & _MASK
    for k, value in enumerate((a, b, c, d)):
        state[k] = (state[k] + value) & _MASK


class Md5:
    """MD5 digest."""

    def __init__(self, data=b"") -> None:
        self._state = _BlockState(_MD5_INITIAL, _md5_process, "little", "<4I")
        if data:
            self.update(data)

    def update(self, data) -> None:
        """Feed more bytes into the digest."""
        self._state.absorb(data)

    def digest(self) -> bytes:
        """Return the digest of everything fed so far, leaving the state intact."""
        return self._state.finish()

    def hexdigest(self) -> str:
        """Return the digest as lower-case hex."""
        return self.digest().hex()


_SHA256_K = (
    0x428A2F98, 0x71374491, 0xB5C0FBCF, 0xE9B5DBA5, 0x3956C25B, 0x59F111F1, 0x923F82A4, 0xAB1C5ED5,
    0xD807AA98, 0x12835B01, 0x243185BE, 0x550C7DC3, 0x72BE5D74, 0x80DEB1FE, 0x9BDC06A7, 0xC19BF174,
    0xE49B69C1, 0xEFBE4786, 0x0FC19DC6, 0x240CA1CC, 0x2DE92C6F, 0x4A7484AA, 0x5CB0A9DC, 0x76F988DA,
    0x983E5152, 0xA831C66D, 0xB00327C8, 0xBF597FC7, 0xC6E00BF3, 0xD5A79147, 0x06CA6351, 0x14292967,
    0x27B70A85, 0x2E1B2138, 0x4D2C6DFC, 0x53380D13, 0x650A7354, 0x766A0ABB, 0x81C2C92E, 0x92722C85,
    0xA2BFE8A1, 0xA81A664B, 0xC24B8B70, 0xC76C51A3, 0xD192E819, 0xD6990624, 0xF40E3585, 0x106AA070,
    0x19A4C116, 0x1E376C08, 0x2748774C, 0x34B0BCB5, 0x391C0CB3, 0x4ED8AA4A, 0x5B9CCA4F, 0x682E6FF3,
    0x748F82EE, 0x78A5636F, 0x84C87814, 0x8CC70208, 0x90BEFFFA, 0xA4506CEB, 0xBEF9A3F7, 0xC67178F2,
)
_SHA256_INITIAL = (
    0x6A09E667, 0xBB67AE85, 0x3C6EF372, 0xA54FF53A,
    0x510E527F, 0x9B05688C, 0x1F83D9AB, 0x5BE0CD19,
)


def _sha256_process(state: list, block: bytes) -> None:
    w = list(struct.unpack(">16I", block))
    for i in range(16, 64):
        r0 = _ror(w[i - 15], 7) ^ _ror(w[i - 15], 18) ^ (w[i - 15] >> 3)
        r1 = _ror(w[i - 2], 17) ^ _ror(w[i - 2], 19) ^ (w[i - 2] >> 10)
        w.append((r1 + w[i - 7] + r0 + w[i - 16]) & _MASK)
    a, b, c, d, e, f, g, h = state
    for constant, word in zip(_SHA256_K, w):
        s1 = _ror(e, 6) ^ _ror(e, 11) ^ _ror(e, 25)
        ch = g ^ (e & (f ^ g))
        t1 = (h + s1 + ch + constant + word) & _MASK
        s0 = _ror(a, 2) ^ _ror(a, 13) ^ _ror(a, 22)
        maj = (a & b) | (c & (a | b))
        t2 = (s0 + maj) & _MASK
        h, g, f, e, d, c, b, a = g, f, e, (d + t1) & _MASK, c, b, a, (t1 + t2) & _MASK
    for k, value in enumerate((a, b, c, d, e, f, g, h)):
        state[k] = (state[k] + value) & _MASK


class Sha256:
    """SHA-256 digest."""

    def __init__(self, data=b"") -> None:
        self._state = _BlockState(_SHA256_INITIAL, _sha256_process, "big", ">8I")
        if data:
            self.update(data)

    def update(self, data) -> None:
        """Feed more bytes into the digest."""
        self._state.absorb(data)

    def digest(self) -> bytes:
        """Return the digest of everything fed so far, leaving the state intact."""
        return self._state.finish()

    def hexdigest(self) -> str:
        """Return the digest as lower-case hex."""
        return self.digest().hex()


class HashType(enum.Enum):
    """Digest algorithms available to get_hash."""

    SHA_256 = "sha256"
    MD5 = "md5"


def get_hash(hash_type: HashType, data) -> bytes:
    """Digest data with SHA-256 when asked for it, and with MD5 otherwise."""
    hasher = Sha256() if hash_type is HashType.SHA_256 else Md5()
    hasher.update(data)
    return hasher.digest()


def print_hash(digest, stream=None) -> None:
    """Write each byte of a digest in hex followed by a newline.

    Bytes are written without zero padding, matching the minimal console
    formatter, which ignores width modifiers.
    """
    out = sys.stdout if stream is None else stream
    out.write("".join(f"{byte:x}" for byte in bytes(digest)) + "\n")