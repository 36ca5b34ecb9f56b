"""
Selector - Weighted Pool Selection

Picks the next item in two independent steps:
1. Weighted draw over the non-empty pools (unseen > wrong > correct)
2. Uniform draw inside the chosen pool, skipping recently asked items

The anti-repeat history only suppresses immediate repeats; it does not
guarantee a minimum gap beyond its size.
"""

from __future__ import annotations

import random
from collections import deque
from typing import Iterable, Optional

from core.quiz.constants import HISTORY_SIZE, POOL_ORDER, POOL_WEIGHTS, Pool
from core.quiz.pools import MasteryPartition


class PickHistory:
    """
    Most-recent-last record of the last few picked ids.
    """

    def __init__(self, size: int = HISTORY_SIZE, picks: Iterable[int] = ()):
        self._picks: deque[int] = deque(picks, maxlen=size)

    def push(self, item_id: int) -> None:
        self._picks.append(item_id)

    def clear(self) -> None:
        self._picks.clear()

    def as_list(self) -> list[int]:
        return list(self._picks)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._picks

    def __len__(self) -> int:
        return len(self._picks)


def candidate_pools(
    partition: MasteryPartition,
    weights: dict[Pool, float] = POOL_WEIGHTS
) -> list[tuple[Pool, float]]:
    """
    List non-empty pools with their fixed weights, in walk order.
    """
    return [
        (name, weights[name])
        for name in POOL_ORDER
        if partition.pool(name)
    ]


def choose_pool(
    partition: MasteryPartition,
    rng: random.Random,
    weights: dict[Pool, float] = POOL_WEIGHTS
) -> Optional[Pool]:
    """
    Weighted categorical draw over the non-empty pools.

    Returns:
        The chosen pool, or None if every pool is empty
    """
    candidates = candidate_pools(partition, weights)
    if not candidates:
        return None

    total_weight = sum(weight for _, weight in candidates)
    r = rng.random() * total_weight
    for name, weight in candidates:
        r -= weight
        if r <= 0:
            return name
    return candidates[0][0]


def choose_from_pool(
    pool_ids: Iterable[int],
    history: PickHistory,
    rng: random.Random
) -> Optional[int]:
    """
    Uniform draw from a pool, preferring ids outside the recent history.
    """
    # Sorted so that a seeded rng gives the same pick regardless of set order
    ids = sorted(pool_ids)
    if not ids:
        return None
    not_recent = [item_id for item_id in ids if item_id not in history]
    pick_from = not_recent or ids
    return rng.choice(pick_from)


class Selector:
    """
    Chooses the next item id from a mastery partition.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        weights: dict[Pool, float] = POOL_WEIGHTS
    ):
        self.rng = rng or random.Random()
        self.weights = weights

    def pick(self, partition: MasteryPartition, history: PickHistory) -> Optional[int]:
        """
        Pick the next item id, or None when every pool is empty.
        """
        pool = choose_pool(partition, self.rng, self.weights)
        if pool is None:
            return None
        return choose_from_pool(partition.pool(pool), history, self.rng)
