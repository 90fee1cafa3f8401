"""Models — DigestEncoding, DigestOptions. EntityType lives in models.entity."""

from digest_columns.models.enums import DigestEncoding
from digest_columns.models.schemas import DigestOptions

__all__ = ["DigestEncoding", "DigestOptions"]
