"""Digest — hasher adapters and the per-entity DigestPolicy."""

from digest_columns.digest.hashers import (
    Hasher,
    available_algorithms,
    new_hasher,
    resolve_algorithm,
    supported_algorithms,
)
from digest_columns.digest.policy import DigestPolicy

__all__ = [
    "Hasher",
    "DigestPolicy",
    "available_algorithms",
    "new_hasher",
    "resolve_algorithm",
    "supported_algorithms",
]
