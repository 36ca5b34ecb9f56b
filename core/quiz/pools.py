"""
Mastery partition: three disjoint pools of item ids.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from core.quiz.constants import Pool


@dataclass
class MasteryPartition:
    """
    Session-scoped mastery state for a catalog scope.

    Every scoped id lives in exactly one of unseen, wrong, correct.
    """
    unseen: set[int] = field(default_factory=set)
    wrong: set[int] = field(default_factory=set)
    correct: set[int] = field(default_factory=set)

    @classmethod
    def fresh(cls, item_ids: Iterable[int]) -> "MasteryPartition":
        """Build a partition with every id unseen."""
        return cls(unseen=set(item_ids))

    def pool(self, name: Pool) -> set[int]:
        if name == Pool.UNSEEN:
            return self.unseen
        if name == Pool.WRONG:
            return self.wrong
        if name == Pool.CORRECT:
            return self.correct
        raise ValueError(f"Unknown pool: {name}")

    def move_to(self, item_id: int, target: Pool) -> None:
        """
        Move an item id to the target pool, removing it from the others.
        """
        self.unseen.discard(item_id)
        self.wrong.discard(item_id)
        self.correct.discard(item_id)
        self.pool(target).add(item_id)

    def record_answer(self, item_id: int, is_correct: bool) -> None:
        """
        Apply an answer: correct answers land in correct, misses in wrong.
        """
        self.move_to(item_id, Pool.CORRECT if is_correct else Pool.WRONG)

    def all_ids(self) -> set[int]:
        return self.unseen | self.wrong | self.correct

    def sizes(self) -> dict[Pool, int]:
        return {
            Pool.UNSEEN: len(self.unseen),
            Pool.WRONG: len(self.wrong),
            Pool.CORRECT: len(self.correct),
        }

    def is_consistent(self, item_ids: Iterable[int]) -> bool:
        """
        True when the pools are pairwise disjoint and cover exactly item_ids.
        """
        disjoint = not (
            (self.unseen & self.wrong)
            or (self.unseen & self.correct)
            or (self.wrong & self.correct)
        )
        return disjoint and self.all_ids() == set(item_ids)
