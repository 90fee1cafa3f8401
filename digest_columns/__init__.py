"""
digest-columns — replace designated entity fields with a message digest
on insert and update.

    from pydantic import BaseModel
    from digest_columns import EntityType, EntityRepository

    class User(BaseModel):
        id: str | None = None
        password: str | None = None

    users = EntityType(User, columns=["password"], algorithm="SHA-256")
    EntityRepository().insert(users, User(password="hunter2"))
"""

from digest_columns.digest import DigestPolicy, available_algorithms, supported_algorithms
from digest_columns.errors import (
    DigestColumnsError,
    DigestProductionError,
    DuplicateRow,
    RowNotFound,
    UnknownColumn,
    UnsupportedAlgorithm,
    UnsupportedEncoding,
)
from digest_columns.models import DigestEncoding, DigestOptions
from digest_columns.models.entity import EntityType
from digest_columns.persistence.repository import EntityRepository

__version__ = "0.1.0"

__all__ = [
    "DigestPolicy",
    "DigestEncoding",
    "DigestOptions",
    "EntityType",
    "EntityRepository",
    "available_algorithms",
    "supported_algorithms",
    "DigestColumnsError",
    "DigestProductionError",
    "DuplicateRow",
    "RowNotFound",
    "UnknownColumn",
    "UnsupportedAlgorithm",
    "UnsupportedEncoding",
]
