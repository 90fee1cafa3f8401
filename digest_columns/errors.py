"""
Exceptions raised while configuring digest columns or saving rows.
"""

from __future__ import annotations


class DigestColumnsError(Exception):
    """Base class for every error raised by this package."""


class UnknownColumn(DigestColumnsError, ValueError):
    """A configured column is not a field of the entity type, or is its primary key."""

    def __init__(self, column: str, entity: str = "", reason: str = ""):
        self.column = column
        self.entity = entity
        self.reason = reason or "doesn't exist"
        where = f" on {entity}" if entity else ""
        super().__init__(f"column {column} {self.reason}{where}")


class UnsupportedAlgorithm(DigestColumnsError):
    """The hash library could not build a hasher for the requested name."""

    def __init__(self, algorithm: str, cause: BaseException | None = None):
        self.algorithm = algorithm
        self.cause = cause
        detail = f": {cause}" if cause else ""
        super().__init__(f"{algorithm} could not be used as a digest algorithm{detail}")


class UnsupportedEncoding(DigestColumnsError, ValueError):
    def __init__(self, encoding: str):
        self.encoding = encoding
        super().__init__(f"{encoding} is not a supported encoding scheme")


class DigestProductionError(DigestColumnsError):
    """Accumulating or extracting a digest failed."""

    def __init__(self, cause: BaseException):
        self.cause = cause
        super().__init__(f"could not get a digest string: {cause}")


# ── Persistence ──────────────────────────────────────────


class RowNotFound(DigestColumnsError, LookupError):
    def __init__(self, table: str, key: str):
        self.table = table
        self.key = key
        super().__init__(f"No row {key!r} in {table}")


class DuplicateRow(DigestColumnsError):
    def __init__(self, table: str, key: str):
        self.table = table
        self.key = key
        super().__init__(f"Row {key!r} already exists in {table}")
