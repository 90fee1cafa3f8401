"""
Entity Repository — the row lifecycle for entity types.

Every insert and update runs the entity type's digest step on the in-memory
instance and only then writes the row to the store.  If digesting fails the
store is never touched.
"""

from __future__ import annotations

import logging
import uuid
from typing import Any, Optional

from pydantic import BaseModel

from digest_columns.config import get_settings
from digest_columns.errors import RowNotFound
from digest_columns.models.entity import EntityType
from digest_columns.persistence.row_store import MemoryRowStore, MongoRowStore, RowStore

logger = logging.getLogger(__name__)


def default_store() -> RowStore:
    """Memory store in mock mode, MongoDB otherwise."""
    if get_settings().mock_mode:
        logger.info("[MOCK] Using in-memory row store")
        return MemoryRowStore()
    return MongoRowStore()


class EntityRepository:
    """Insert, update and load entity instances."""

    def __init__(self, store: Optional[RowStore] = None):
        self.store = store if store is not None else default_store()

    def insert(self, entity_type: EntityType, instance: BaseModel) -> BaseModel:
        """
        Persist a new row. A missing primary key is filled with a uuid4 hex
        string. Returns the (digested) instance.
        """
        self._check_model(entity_type, instance)
        entity_type.digest.before_insert(instance)

        # the primary key is never a digest column, so it is stable from here on
        if entity_type.key_of(instance) is None:
            setattr(instance, entity_type.primary_key, uuid.uuid4().hex)
        key = entity_type.key_of(instance)
        self.store.insert(entity_type.name, key, instance.model_dump())
        logger.info(f"Inserted {entity_type.name}/{key}")
        return instance

    def update(self, entity_type: EntityType, instance: BaseModel) -> BaseModel:
        """Persist changes to an existing row. Returns the (digested) instance."""
        self._check_model(entity_type, instance)
        key = entity_type.key_of(instance)
        if key is None or self.store.find(entity_type.name, key) is None:
            raise RowNotFound(entity_type.name, key)

        entity_type.digest.before_update(instance)
        self.store.replace(entity_type.name, key, instance.model_dump())
        logger.info(f"Updated {entity_type.name}/{key}")
        return instance

    def get(self, entity_type: EntityType, key: Any) -> BaseModel | None:
        """Load one row, or None if it does not exist."""
        row = self.store.find(entity_type.name, key)
        if row is None:
            return None
        return entity_type.model.model_validate(row)

    def list(self, entity_type: EntityType) -> list[BaseModel]:
        """Load every row of an entity type."""
        return [entity_type.model.model_validate(r) for r in self.store.all(entity_type.name)]

    @staticmethod
    def _check_model(entity_type: EntityType, instance: BaseModel) -> None:
        if not isinstance(instance, entity_type.model):
            raise TypeError(
                f"{type(instance).__name__} is not a {entity_type.model.__name__} "
                f"(entity type {entity_type.name})"
            )
