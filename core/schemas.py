"""
Pydantic models for catalog items and persisted mastery records.

Catalog items come from CSV files or MongoDB documents; mastery records are
the JSON payloads stored in the key-value store.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CatalogItem(BaseModel):
    """
    A single term/definition pair.

    Immutable once loaded; the quiz core only reads it.
    """
    model_config = ConfigDict(frozen=True)

    id: int = Field(..., description="Unique id within the catalog")
    prompt: str = Field(..., description="Term side (e.g., kanji, Japanese word)")
    answer: str = Field(..., description="Definition side (e.g., reading and meaning)")


def _coerce_id(value: Any) -> int | None:
    """
    Interpret a persisted id, or return None for anything non-numeric.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


class MasteryRecord(BaseModel):
    """
    Persisted mastery payload: {"wrong": [...], "correct": [...]}.

    Unseen ids are never stored; they are derived from the catalog on load.
    Malformed entries are dropped rather than rejected.
    """
    wrong: list[int] = Field(default_factory=list)
    correct: list[int] = Field(default_factory=list)

    @field_validator("wrong", "correct", mode="before")
    @classmethod
    def _drop_malformed_ids(cls, value: Any) -> list[int]:
        if not isinstance(value, (list, tuple)):
            return []
        ids = (_coerce_id(v) for v in value)
        return [v for v in ids if v is not None]
