"""
Hasher adapters — one capability interface over every supported digest.

Each supported algorithm is an entry in ``_ALGORITHMS`` mapping its canonical
name to a constructor.  Message digests come from ``hashlib``; checksums come
from ``zlib`` / ``binascii`` and are wrapped so they look like a digest
(big-endian bytes of the running checksum).
"""

from __future__ import annotations

import base64
import binascii
import hashlib
import logging
import re
import zlib
from typing import Callable, Protocol

from digest_columns.errors import UnsupportedAlgorithm

logger = logging.getLogger(__name__)


class Hasher(Protocol):
    """What the digest policy needs from a hash primitive."""

    name: str
    digest_size: int

    def update(self, data: bytes) -> None: ...

    def digest(self) -> bytes: ...

    def hexdigest(self) -> str: ...

    def b64digest(self) -> str: ...

    def copy(self) -> "Hasher": ...


class HashlibHasher:
    """Adapter over a ``hashlib`` hash object."""

    def __init__(self, name: str, hashlib_name: str, _state=None):
        self.name = name
        self.hashlib_name = hashlib_name
        self._h = _state if _state is not None else hashlib.new(hashlib_name)

    @property
    def digest_size(self) -> int:
        return self._h.digest_size

    def update(self, data: bytes) -> None:
        self._h.update(data)

    def digest(self) -> bytes:
        return self._h.digest()

    def hexdigest(self) -> str:
        return self._h.hexdigest()

    def b64digest(self) -> str:
        return base64.b64encode(self._h.digest()).decode("ascii")

    def copy(self) -> "HashlibHasher":
        return HashlibHasher(self.name, self.hashlib_name, _state=self._h.copy())

    def __repr__(self) -> str:
        return f"HashlibHasher({self.name!r})"


class ChecksumHasher:
    """
    Adapter over a running checksum such as ``zlib.crc32``.

    ``func(data, value)`` must return the checksum of ``data`` continued
    from ``value``; ``initial`` is the checksum of empty input and
    ``digest_size`` the output width in bytes.
    """

    def __init__(
        self,
        name: str,
        func: Callable[[bytes, int], int],
        initial: int,
        digest_size: int,
    ):
        self.name = name
        self.digest_size = digest_size
        self._func = func
        self._initial = initial
        self._value = initial

    def update(self, data: bytes) -> None:
        self._value = self._func(data, self._value)

    def digest(self) -> bytes:
        mask = (1 << (8 * self.digest_size)) - 1
        return (self._value & mask).to_bytes(self.digest_size, "big")

    def hexdigest(self) -> str:
        return self.digest().hex()

    def b64digest(self) -> str:
        return base64.b64encode(self.digest()).decode("ascii")

    def copy(self) -> "ChecksumHasher":
        clone = ChecksumHasher(self.name, self._func, self._initial, self.digest_size)
        clone._value = self._value
        return clone

    def __repr__(self) -> str:
        return f"ChecksumHasher({self.name!r})"


# ── Lookup table ─────────────────────────────────────────


def _hashlib(name: str, hashlib_name: str) -> Callable[[], Hasher]:
    return lambda: HashlibHasher(name, hashlib_name)


def _checksum(name: str, func, initial: int, size: int) -> Callable[[], Hasher]:
    return lambda: ChecksumHasher(name, func, initial, size)


_ALGORITHMS: dict[str, Callable[[], Hasher]] = {
    "MD5": _hashlib("MD5", "md5"),
    "MD4": _hashlib("MD4", "md4"),
    "SHA-1": _hashlib("SHA-1", "sha1"),
    "SHA-224": _hashlib("SHA-224", "sha224"),
    "SHA-256": _hashlib("SHA-256", "sha256"),
    "SHA-384": _hashlib("SHA-384", "sha384"),
    "SHA-512": _hashlib("SHA-512", "sha512"),
    "SHA3-224": _hashlib("SHA3-224", "sha3_224"),
    "SHA3-256": _hashlib("SHA3-256", "sha3_256"),
    "SHA3-384": _hashlib("SHA3-384", "sha3_384"),
    "SHA3-512": _hashlib("SHA3-512", "sha3_512"),
    "BLAKE2b": _hashlib("BLAKE2b", "blake2b"),
    "BLAKE2s": _hashlib("BLAKE2s", "blake2s"),
    "RIPEMD-160": _hashlib("RIPEMD-160", "ripemd160"),
    "Whirlpool": _hashlib("Whirlpool", "whirlpool"),
    "CRC-32": _checksum("CRC-32", zlib.crc32, 0, 4),
    "CRC-CCITT": _checksum("CRC-CCITT", binascii.crc_hqx, 0xFFFF, 2),
    "Adler-32": _checksum("Adler-32", zlib.adler32, 1, 4),
}


def _normalize(name: str) -> str:
    return re.sub(r"[-_\s]", "", name).lower()


_BY_KEY: dict[str, str] = {_normalize(n): n for n in _ALGORITHMS}


def resolve_algorithm(name: str) -> str:
    """Return the canonical name for ``name`` (``"sha1"`` -> ``"SHA-1"``)."""
    canonical = _BY_KEY.get(_normalize(name or ""))
    if canonical is None:
        raise UnsupportedAlgorithm(name, KeyError(f"unknown digest algorithm {name!r}"))
    return canonical


def new_hasher(name: str) -> Hasher:
    """
    Build a fresh hasher for ``name``.

    Raises UnsupportedAlgorithm for unknown names and for names whose
    primitive this interpreter's hash library cannot build.
    """
    canonical = resolve_algorithm(name)
    try:
        return _ALGORITHMS[canonical]()
    except (ValueError, TypeError) as exc:
        logger.debug(f"Digest algorithm {canonical} unavailable: {exc}")
        raise UnsupportedAlgorithm(canonical, exc) from exc


def supported_algorithms() -> list[str]:
    """Every canonical name in the lookup table."""
    return list(_ALGORITHMS)


def available_algorithms() -> list[str]:
    """Canonical names that can actually be constructed here."""
    available = []
    for name in _ALGORITHMS:
        try:
            new_hasher(name)
        except UnsupportedAlgorithm:
            continue
        available.append(name)
    return available
