"""
Key-value persistence backends for mastery records.

Backends may raise on failure; MasteryStore is the layer that turns
failures into best-effort results.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable, Optional, Protocol

from sqlalchemy.orm import Session

from core.quiz.models import MasteryStateEntry


class KeyValueStore(Protocol):
    """Minimal string key-value interface."""

    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...

    def remove(self, key: str) -> None:
        ...


class InMemoryKeyValueStore:
    """
    Dict-backed store, used for tests and when no database is configured.
    """

    def __init__(self, data: Optional[dict[str, str]] = None):
        self.data: dict[str, str] = dict(data or {})

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value

    def remove(self, key: str) -> None:
        self.data.pop(key, None)


class SqlKeyValueStore:
    """
    SQLAlchemy-backed store over the mastery_state table.
    """

    def __init__(self, session_factory: Callable[[], Session]):
        self.session_factory = session_factory

    def get(self, key: str) -> Optional[str]:
        session = self.session_factory()
        try:
            entry = session.get(MasteryStateEntry, key)
            return entry.value if entry is not None else None
        finally:
            session.close()

    def set(self, key: str, value: str) -> None:
        session = self.session_factory()
        try:
            session.merge(MasteryStateEntry(
                key=key,
                value=value,
                updated_at=datetime.now(timezone.utc),
            ))
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def remove(self, key: str) -> None:
        session = self.session_factory()
        try:
            session.query(MasteryStateEntry).filter(
                MasteryStateEntry.key == key
            ).delete()
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()
