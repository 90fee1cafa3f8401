"""
Row Stores — where entity rows end up after the digest step.

MemoryRowStore keeps rows in a dict (mock mode); MongoRowStore keeps one
collection per entity type with the primary key as ``_id``.
"""

from __future__ import annotations

import logging
from copy import deepcopy
from typing import Any, Protocol

from pymongo.errors import DuplicateKeyError

from digest_columns.errors import DuplicateRow, RowNotFound
from digest_columns.persistence.mongo_client import MongoClient

logger = logging.getLogger(__name__)


class RowStore(Protocol):
    def insert(self, table: str, key: Any, row: dict[str, Any]) -> None: ...

    def replace(self, table: str, key: Any, row: dict[str, Any]) -> None: ...

    def find(self, table: str, key: Any) -> dict[str, Any] | None: ...

    def all(self, table: str) -> list[dict[str, Any]]: ...


class MemoryRowStore:
    """In-memory row store. Rows are copied on the way in and out."""

    def __init__(self):
        self._tables: dict[str, dict[Any, dict[str, Any]]] = {}

    def insert(self, table: str, key: Any, row: dict[str, Any]) -> None:
        rows = self._tables.setdefault(table, {})
        if key in rows:
            raise DuplicateRow(table, key)
        rows[key] = deepcopy(row)
        logger.debug(f"[MEMORY] inserted {table}/{key}")

    def replace(self, table: str, key: Any, row: dict[str, Any]) -> None:
        rows = self._tables.get(table, {})
        if key not in rows:
            raise RowNotFound(table, key)
        rows[key] = deepcopy(row)
        logger.debug(f"[MEMORY] updated {table}/{key}")

    def find(self, table: str, key: Any) -> dict[str, Any] | None:
        row = self._tables.get(table, {}).get(key)
        return deepcopy(row) if row is not None else None

    def all(self, table: str) -> list[dict[str, Any]]:
        return [deepcopy(r) for r in self._tables.get(table, {}).values()]


class MongoRowStore:
    """MongoDB row store; ``database`` defaults to the configured connection."""

    def __init__(self, database: Any = None):
        self._db = database if database is not None else MongoClient().get_database()

    def insert(self, table: str, key: Any, row: dict[str, Any]) -> None:
        doc = dict(row, _id=key)
        try:
            self._db[table].insert_one(doc)
        except DuplicateKeyError as exc:
            raise DuplicateRow(table, key) from exc
        logger.debug(f"[MONGO] inserted {table}/{key}")

    def replace(self, table: str, key: Any, row: dict[str, Any]) -> None:
        result = self._db[table].replace_one({"_id": key}, dict(row, _id=key))
        if result.matched_count == 0:
            raise RowNotFound(table, key)
        logger.debug(f"[MONGO] updated {table}/{key}")

    def find(self, table: str, key: Any) -> dict[str, Any] | None:
        doc = self._db[table].find_one({"_id": key})
        if doc is None:
            return None
        doc.pop("_id", None)
        return doc

    def all(self, table: str) -> list[dict[str, Any]]:
        rows = []
        for doc in self._db[table].find({}):
            doc.pop("_id", None)
            rows.append(doc)
        return rows
