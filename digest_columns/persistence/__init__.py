"""Persistence — MongoClient, row stores, EntityRepository."""

from digest_columns.persistence.mongo_client import MongoClient
from digest_columns.persistence.repository import EntityRepository
from digest_columns.persistence.row_store import MemoryRowStore, MongoRowStore, RowStore

__all__ = ["MongoClient", "EntityRepository", "MemoryRowStore", "MongoRowStore", "RowStore"]
