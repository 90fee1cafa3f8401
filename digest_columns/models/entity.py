"""
Entity Type — descriptor tying a pydantic row model to its digest policy.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional

from pydantic import BaseModel

from digest_columns.config import get_settings
from digest_columns.digest.policy import DigestPolicy
from digest_columns.errors import UnknownColumn
from digest_columns.models.schemas import DigestOptions


class EntityType:
    """
    Describes one kind of persisted row.

    The digest policy belongs to the descriptor, so two entity types built
    from the same model never share configuration.

        users = EntityType(User, columns=["password"], encoding="base64")
    """

    def __init__(
        self,
        model: type[BaseModel],
        *,
        name: str = "",
        primary_key: str = "id",
        options: Optional[DigestOptions] = None,
        columns: Optional[Iterable[str]] = None,
        algorithm: Optional[str] = None,
        encoding: Optional[str] = None,
        auto: Optional[bool] = None,
    ):
        self.model = model
        self.name = name or model.__name__.lower()
        if primary_key not in model.model_fields:
            raise UnknownColumn(primary_key, self.name)
        self.primary_key = primary_key

        settings = get_settings()
        self.digest = DigestPolicy(
            self.fields(),
            entity=self.name,
            key_columns=[primary_key],
            algorithm=settings.digest_algorithm,
            encoding=settings.digest_encoding,
            auto=settings.digest_auto,
        )
        if options is not None:
            self.digest.apply_options(options)
        self.digest.configure(columns=columns, algorithm=algorithm, encoding=encoding, auto=auto)

    def fields(self) -> list[str]:
        return list(self.model.model_fields)

    def key_of(self, instance: BaseModel) -> Any:
        return getattr(instance, self.primary_key)

    def __repr__(self) -> str:
        return f"EntityType({self.model.__name__}, name={self.name!r})"
