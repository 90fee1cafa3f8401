"""
Declarative digest options, as written in entity definitions or config files.
"""

from __future__ import annotations

from typing import Optional
from pydantic import BaseModel


class DigestOptions(BaseModel):
    """
    Partial digest configuration. Only fields that are set are applied,
    so ``DigestOptions(encoding="base64")`` leaves the other settings alone.
    """
    columns: Optional[list[str]] = None
    algorithm: Optional[str] = None
    encoding: Optional[str] = None  # validated by DigestPolicy.set_encoding
    auto: Optional[bool] = None

    def as_kwargs(self) -> dict:
        return self.model_dump(exclude_none=True)
