"""
Tests: hasher adapters and the algorithm lookup table.

Run with:
    pytest digest_columns/tests/test_hashers.py -v
"""

import base64

import pytest

from digest_columns.digest.hashers import (
    available_algorithms,
    new_hasher,
    resolve_algorithm,
    supported_algorithms,
)
from digest_columns.errors import UnsupportedAlgorithm


class TestResolve:
    @pytest.mark.parametrize("name", ["SHA-1", "sha1", "SHA1", "sha_1", "Sha-1"])
    def test_aliases(self, name):
        assert resolve_algorithm(name) == "SHA-1"

    def test_unknown_name(self):
        with pytest.raises(UnsupportedAlgorithm) as info:
            resolve_algorithm("Rot13")
        assert info.value.algorithm == "Rot13"
        assert isinstance(info.value.cause, KeyError)

    def test_empty_name(self):
        with pytest.raises(UnsupportedAlgorithm):
            new_hasher("")

    def test_guaranteed_algorithms_available(self):
        available = available_algorithms()
        for name in ("MD5", "SHA-1", "SHA-256", "SHA-512", "SHA3-256", "BLAKE2b", "CRC-32", "Adler-32"):
            assert name in available
        assert set(available) <= set(supported_algorithms())


class TestHashlibHasher:
    def test_md5_empty(self):
        assert new_hasher("MD5").hexdigest() == "d41d8cd98f00b204e9800998ecf8427e"

    def test_sha1(self):
        h = new_hasher("SHA-1")
        h.update(b"abc")
        assert h.hexdigest() == "a9993e364706816aba3e25717850c26c9cd0d89d"
        assert h.digest() == bytes.fromhex("a9993e364706816aba3e25717850c26c9cd0d89d")

    def test_b64_matches_raw_digest(self):
        h = new_hasher("SHA-256")
        h.update(b"abc")
        assert h.b64digest() == base64.b64encode(h.digest()).decode("ascii")

    def test_copy_is_independent(self):
        h = new_hasher("MD5")
        clone = h.copy()
        clone.update(b"testvalue")
        assert h.hexdigest() == "d41d8cd98f00b204e9800998ecf8427e"
        assert clone.hexdigest() == "e9de89b0a5e9ad6efd5e5ab543ec617c"


class TestChecksumHasher:
    def test_crc32(self):
        h = new_hasher("CRC-32")
        h.update(b"123456789")
        assert h.hexdigest() == "cbf43926"
        assert len(h.digest()) == 4

    def test_crc_ccitt(self):
        h = new_hasher("crc-ccitt")
        h.update(b"123456789")
        assert h.hexdigest() == "29b1"

    def test_adler32(self):
        h = new_hasher("adler32")
        h.update(b"Wikipedia")
        assert h.hexdigest() == "11e60398"

    def test_incremental_update(self):
        whole = new_hasher("CRC-32")
        whole.update(b"123456789")
        parts = new_hasher("CRC-32")
        parts.update(b"1234")
        parts.update(b"56789")
        assert parts.digest() == whole.digest()

    def test_hex_keeps_leading_zeros(self):
        h = new_hasher("Adler-32")
        # adler32 of empty input is 1
        assert h.hexdigest() == "00000001"
