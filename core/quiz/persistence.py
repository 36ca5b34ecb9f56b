"""
Persistence Layer - Mastery Store

Loads and saves the wrong/correct pools for a session key.

Persistence is best-effort: a quiz must keep running when storage is
unavailable or holds garbage. load() falls back to a fresh partition, and
save()/clear() report failure through StoreResult instead of raising.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from pydantic import ValidationError

from core.quiz.kv_store import KeyValueStore
from core.quiz.pools import MasteryPartition
from core.schemas import MasteryRecord


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StoreResult:
    """Outcome of a best-effort write or delete."""
    ok: bool
    error: Optional[str] = None


def encode_partition(partition: MasteryPartition) -> str:
    """Serialize the persisted part of a partition (wrong and correct)."""
    record = MasteryRecord(
        wrong=sorted(partition.wrong),
        correct=sorted(partition.correct),
    )
    return record.model_dump_json()


def decode_partition(raw: str, catalog_ids: Iterable[int]) -> MasteryPartition:
    """
    Rebuild a partition from a stored payload.

    Ids outside the catalog are dropped; unseen is everything left over.
    An id listed as both wrong and correct stays wrong.

    Raises:
        ValueError: payload is not a JSON object
    """
    data = json.loads(raw)
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object, got {type(data).__name__}")
    record = MasteryRecord.model_validate(data)

    all_ids = set(catalog_ids)
    wrong = {item_id for item_id in record.wrong if item_id in all_ids}
    correct = {item_id for item_id in record.correct if item_id in all_ids} - wrong

    dropped = (set(record.wrong) | set(record.correct)) - all_ids
    if dropped:
        logger.debug("Dropped %d stale ids from persisted mastery", len(dropped))

    return MasteryPartition(
        unseen=all_ids - wrong - correct,
        wrong=wrong,
        correct=correct,
    )


class MasteryStore:
    """
    Best-effort mastery persistence on top of a key-value backend.
    """

    def __init__(self, backend: KeyValueStore):
        self.backend = backend

    def load(self, key: str, catalog_ids: Iterable[int]) -> MasteryPartition:
        """
        Load the partition for key, restricted to catalog_ids.

        Returns:
            Persisted partition, or a fully-unseen partition when nothing is
            stored or the stored data cannot be read
        """
        catalog_ids = list(catalog_ids)
        try:
            raw = self.backend.get(key)
            if raw:
                return decode_partition(raw, catalog_ids)
        except (ValueError, ValidationError) as exc:
            logger.warning("Ignoring unreadable mastery record %r: %s", key, exc)
        except Exception as exc:
            logger.warning("Mastery store read failed for %r: %s", key, exc)
        return MasteryPartition.fresh(catalog_ids)

    def save(self, key: str, partition: MasteryPartition) -> StoreResult:
        """Persist wrong/correct pools for key."""
        try:
            self.backend.set(key, encode_partition(partition))
        except Exception as exc:
            logger.warning("Mastery store write failed for %r: %s", key, exc)
            return StoreResult(ok=False, error=str(exc))
        return StoreResult(ok=True)

    def clear(self, key: str) -> StoreResult:
        """Remove persisted state for key."""
        try:
            self.backend.remove(key)
        except Exception as exc:
            logger.warning("Mastery store delete failed for %r: %s", key, exc)
            return StoreResult(ok=False, error=str(exc))
        return StoreResult(ok=True)
