import hashlib

import pytest

from ebookkeeper.sha256 import SHA256, to_hex


def _hash(data):
    h = SHA256()
    h.update(data)
    return h


def test_empty_message_known_value():
    assert SHA256().hexdigest() == (
        "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
    )


def test_abc_known_value():
    assert _hash(b"abc").hexdigest() == (
        "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
    )


@pytest.mark.parametrize("length", [0, 1, 55, 56, 57, 63, 64, 65, 119, 120, 128, 1000])
def test_matches_reference_across_padding_boundaries(length):
    data = bytes(i % 251 for i in range(length))
    assert _hash(data).digest() == hashlib.sha256(data).digest()


def test_digest_is_32_bytes():
    assert len(_hash(b"hello").digest()) == 32


def test_incremental_updates_equal_single_update():
    data = bytes(range(256)) * 5
    h = SHA256()
    for start in range(0, len(data), 37):
        h.update(data[start:start + 37])
    assert h.digest() == _hash(data).digest()


def test_string_is_encoded_as_utf8():
    text = "书单 ebook"
    assert _hash(text).digest() == hashlib.sha256(text.encode("utf-8")).digest()


def test_digest_can_be_called_repeatedly_and_continue():
    h = SHA256()
    h.update(b"part one ")
    first = h.digest()
    assert h.digest() == first
    h.update(b"part two")
    assert h.digest() == hashlib.sha256(b"part one part two").digest()


def test_hexdigest_matches_to_hex_of_digest():
    h = _hash(b"some content")
    assert h.hexdigest() == to_hex(h.digest())
    assert h.hexdigest() == hashlib.sha256(b"some content").hexdigest()


def test_to_hex_pads_each_byte_to_two_digits():
    assert to_hex(bytes([0, 1, 15, 16, 255])) == "00010f10ff"