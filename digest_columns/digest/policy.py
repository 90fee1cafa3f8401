"""
Digest Policy — which columns of an entity type get digested, and how.

One policy is owned by each EntityType descriptor and is read on every save
of every instance of that type.  The repository calls ``before_insert`` /
``before_update`` immediately before handing the row to the store.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable

from digest_columns.digest.hashers import Hasher, new_hasher
from digest_columns.errors import (
    DigestProductionError,
    UnknownColumn,
    UnsupportedAlgorithm,
    UnsupportedEncoding,
)
from digest_columns.models.enums import DigestEncoding
from digest_columns.models.schemas import DigestOptions

logger = logging.getLogger(__name__)

_ENCODINGS = {e.value: e for e in DigestEncoding}


class DigestPolicy:
    """
    Digest configuration for one entity type.

    Attributes:
        columns:   ordered field names that are digested on save
        algorithm: resolved name of the digest algorithm (default MD5)
        encoding:  binary | hex | base64 (default hex)
        auto:      when False, saves leave every column untouched
        hasher:    prototype hasher for ``algorithm``; never fed any data,
                   each digest runs on a fresh copy of it
    """

    def __init__(
        self,
        fields: Iterable[str],
        *,
        entity: str = "",
        key_columns: Iterable[str] = (),
        algorithm: str = "MD5",
        encoding: str | DigestEncoding = DigestEncoding.HEX,
        auto: bool = True,
    ):
        self.entity = entity
        self._fields = frozenset(fields)
        self._key_columns = frozenset(key_columns)
        self.columns: tuple[str, ...] = ()
        self.hasher: Hasher = new_hasher(algorithm)
        self.algorithm: str = self.hasher.name
        self.encoding: DigestEncoding = self._check_encoding(encoding)
        self.auto: bool = bool(auto)

    # ── Configuration ────────────────────────────────────

    def set_columns(self, names: str | Iterable[str]) -> tuple[str, ...]:
        """
        Replace the digested columns. Every name must be a known field and
        none may be a key column. A single string names one column.
        """
        names = [names] if isinstance(names, str) else list(names)
        for name in names:
            if name not in self._fields:
                logger.error(f"Cannot digest {name!r}: no such column on {self.entity}")
                raise UnknownColumn(name, self.entity)
            if name in self._key_columns:
                logger.error(f"Cannot digest {name!r}: it is the primary key of {self.entity}")
                raise UnknownColumn(name, self.entity, reason="is the primary key and cannot be digested")
        self.columns = tuple(dict.fromkeys(names))
        logger.info(f"[{self.entity}] digest columns: {', '.join(self.columns) or '(none)'}")
        return self.columns

    def set_algorithm(self, name: str) -> str:
        """
        Switch to another digest algorithm and return its resolved name.
        On failure the current algorithm and hasher are kept.
        """
        try:
            hasher = new_hasher(name)
        except UnsupportedAlgorithm as exc:
            logger.error(f"[{self.entity}] {exc}")
            raise
        self.hasher = hasher
        self.algorithm = hasher.name
        logger.info(f"[{self.entity}] digest algorithm: {self.algorithm}")
        return self.algorithm

    def set_encoding(self, name: str | DigestEncoding) -> DigestEncoding:
        self.encoding = self._check_encoding(name)
        logger.info(f"[{self.entity}] digest encoding: {self.encoding.value}")
        return self.encoding

    def set_auto(self, enabled: bool) -> bool:
        self.auto = bool(enabled)
        logger.info(f"[{self.entity}] automatic digest {'on' if self.auto else 'off'}")
        return self.auto

    def configure(
        self,
        columns: Iterable[str] | None = None,
        algorithm: str | None = None,
        encoding: str | DigestEncoding | None = None,
        auto: bool | None = None,
    ) -> "DigestPolicy":
        """Apply whichever settings are given, in the order columns, algorithm, encoding, auto."""
        if columns is not None:
            self.set_columns(columns)
        if algorithm is not None:
            self.set_algorithm(algorithm)
        if encoding is not None:
            self.set_encoding(encoding)
        if auto is not None:
            self.set_auto(auto)
        return self

    def apply_options(self, options: DigestOptions) -> "DigestPolicy":
        return self.configure(**options.as_kwargs())

    def options(self) -> DigestOptions:
        return DigestOptions(
            columns=list(self.columns),
            algorithm=self.algorithm,
            encoding=self.encoding.value,
            auto=self.auto,
        )

    @staticmethod
    def _check_encoding(name: str | DigestEncoding) -> DigestEncoding:
        if isinstance(name, DigestEncoding):
            return name
        encoding = _ENCODINGS.get(name) if isinstance(name, str) else None
        if encoding is None:
            raise UnsupportedEncoding(str(name))
        return encoding

    # ── Digest ───────────────────────────────────────────

    def digest(self, value: Any) -> str | bytes:
        """Digest ``value`` with the current algorithm and encoding."""
        if isinstance(value, bytes):
            data = value
        else:
            data = str(value).encode("utf-8")

        try:
            hasher = self.hasher.copy()
            hasher.update(data)
            if self.encoding is DigestEncoding.BINARY:
                return hasher.digest()
            if self.encoding is DigestEncoding.HEX:
                return hasher.hexdigest()
            return hasher.b64digest()
        except Exception as exc:
            logger.error(f"[{self.entity}] {self.algorithm} digest failed: {exc}")
            raise DigestProductionError(exc) from exc

    # ── Save hooks ───────────────────────────────────────

    def before_save(self, instance: Any) -> list[str]:
        """
        Replace every non-null digest column on ``instance`` with its digest.

        Returns the names of the columns that were digested.  All digests are
        computed before any attribute is written, so a failure leaves the
        instance as it was.
        """
        if not self.auto:
            return []

        digested: dict[str, str | bytes] = {}
        for column in self.columns:
            value = getattr(instance, column, None)
            if value is not None:
                digested[column] = self.digest(value)

        for column, value in digested.items():
            setattr(instance, column, value)

        if digested:
            logger.debug(f"[{self.entity}] digested {', '.join(digested)}")
        return list(digested)

    before_insert = before_save
    before_update = before_save

    def __repr__(self) -> str:
        return (
            f"DigestPolicy(entity={self.entity!r}, columns={list(self.columns)!r}, "
            f"algorithm={self.algorithm!r}, encoding={self.encoding.value!r}, auto={self.auto})"
        )
