"""A self-contained SHA-256 message digest."""

from __future__ import annotations

import struct

_MASK = 0xFFFFFFFF
_BLOCK_SIZE = 64

_K = (
    0x428A2F98, 0x71374491, 0xB5C0FBCF, 0xE9B5DBA5,
    0x3956C25B, 0x59F111F1, 0x923F82A4, 0xAB1C5ED5,
    0xD807AA98, 0x12835B01, 0x243185BE, 0x550C7DC3,
    0x72BE5D74, 0x80DEB1FE, 0x9BDC06A7, 0xC19BF174,
    0xE49B69C1, 0xEFBE4786, 0x0FC19DC6, 0x240CA1CC,
    0x2DE92C6F, 0x4A7484AA, 0x5CB0A9DC, 0x76F988DA,
    0x983E5152, 0xA831C66D, 0xB00327C8, 0xBF597FC7,
    0xC6E00BF3, 0xD5A79147, 0x06CA6351, 0x14292967,
    0x27B70A85, 0x2E1B2138, 0x4D2C6DFC, 0x53380D13,
    0x650A7354, 0x766A0ABB, 0x81C2C92E, 0x92722C85,
    0xA2BFE8A1, 0xA81A664B, 0xC24B8B70, 0xC76C51A3,
    0xD192E819, 0xD6990624, 0xF40E3585, 0x106AA070,
    0x19A4C116, 0x1E376C08, 0x2748774C, 0x34B0BCB5,
    0x391C0CB3, 0x4ED8AA4A, 0x5B9CCA4F, 0x682E6FF3,
    0x748F82EE, 0x78A5636F, 0x84C87814, 0x8CC70208,
    0x90BEFFFA, 0xA4506CEB, 0xBEF9A3F7, 0xC67178F2,
)

_INITIAL_STATE = (
    0x6A09E667, 0xBB67AE85, 0x3C6EF372, 0xA54FF53A,
    0x510E527F, 0x9B05688C, 0x1F83D9AB, 0x5BE0CD19,
)

_WORDS = struct.Struct(">16I")
_DIGEST = struct.Struct(">8I")


def _rotr(x: int, n: int) -> int:
    return ((x >> n) | (x << (32 - n))) & _MASK


def _compress(state: tuple[int, ...], block: bytes) -> tuple[int, ...]:
    """Run the compression function over one 64-byte block."""
    w = list(_WORDS.unpack(block))
    for k in range(16, 64):
        x2, x15 = w[k - 2], w[k - 15]
        sig1 = _rotr(x2, 17) ^ _rotr(x2, 19) ^ (x2 >> 10)
        sig0 = _rotr(x15, 7) ^ _rotr(x15, 18) ^ (x15 >> 3)
        w.append((sig1 + w[k - 7] + sig0 + w[k - 16]) & _MASK)

    a, b, c, d, e, f, g, h = state
    for k_i, w_i in zip(_K, w):
        maj = (a & (b | c)) | (b & c)
        xor_a = _rotr(a, 2) ^ _rotr(a, 13) ^ _rotr(a, 22)
        ch = (e & f) ^ (~e & g)
        xor_e = _rotr(e, 6) ^ _rotr(e, 11) ^ _rotr(e, 25)
        total = (w_i + k_i + h + ch + xor_e) & _MASK
        h, g, f, e = g, f, e, (d + total) & _MASK
        d, c, b, a = c, b, a, (xor_a + maj + total) & _MASK

    return tuple(
        (old + new) & _MASK
        for old, new in zip(state, (a, b, c, d, e, f, g, h))
    )


def to_hex(digest: bytes) -> str:
    """Render a digest as lower-case hexadecimal, two digits per byte."""
    return bytes(digest).hex()


class SHA256:
    """Incremental SHA-256 hasher."""

    def __init__(self) -> None:
        self._state: tuple[int, ...] = _INITIAL_STATE
        self._buffer = bytearray()
        self._bitlen = 0

    def update(self, data: bytes | bytearray | memoryview | str) -> None:
        """Feed more data; text is encoded as UTF-8."""
        if isinstance(data, str):
            data = data.encode("utf-8")
        self._buffer.extend(data)
        full = len(self._buffer) - len(self._buffer) % _BLOCK_SIZE
        if not full:
            return
        view = memoryview(self._buffer)
        state = self._state
        for offset in range(0, full, _BLOCK_SIZE):
            state = _compress(state, view[offset:offset + _BLOCK_SIZE])
        view.release()
        del self._buffer[:full]
        self._state = state
        self._bitlen += full * 8

    def digest(self) -> bytes:
        """Return the 32-byte digest of everything fed so far."""
        bitlen = (self._bitlen + len(self._buffer) * 8) & 0xFFFFFFFFFFFFFFFF
        tail = bytearray(self._buffer)
        tail.append(0x80)
        tail.extend(b"\x00" * ((56 - len(tail)) % _BLOCK_SIZE))
        tail.extend(bitlen.to_bytes(8, "big"))
        state = self._state
        for offset in range(0, len(tail), _BLOCK_SIZE):
            state = _compress(state, bytes(tail[offset:offset + _BLOCK_SIZE]))
        return _DIGEST.pack(*state)

    def hexdigest(self) -> str:
        """Return the digest as a 64-character hex string."""
        return to_hex(self.digest())