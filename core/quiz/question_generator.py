"""
Question Generator

Builds a multiple-choice question from a catalog item. The direction is
flipped at random so both prompt->answer and answer->prompt recall get drilled.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional, Sequence

from core.quiz.constants import OPTION_COUNT
from core.schemas import CatalogItem


@dataclass(frozen=True)
class Question:
    """
    A single multiple-choice question. Regenerated per draw, never persisted.
    """
    item_id: int
    prompt: str
    options: tuple[str, ...]
    correct_index: int
    reversed: bool = False

    @property
    def correct_answer(self) -> str:
        return self.options[self.correct_index]


def generate_question(
    catalog: Sequence[CatalogItem],
    item: CatalogItem,
    rng: Optional[random.Random] = None,
    option_count: int = OPTION_COUNT
) -> Question:
    """
    Generate a question for item with distractors drawn from the catalog.

    Args:
        catalog: Scoped catalog the distractors come from
        item: Item being asked
        rng: Random source (module-level random if omitted)
        option_count: Options wanted, including the correct one

    Returns:
        Question with shuffled options. Scopes with fewer than
        option_count items produce fewer options.
    """
    rng = rng or random.Random()

    show_reverse = rng.random() > 0.5
    prompt = item.answer if show_reverse else item.prompt
    correct_answer = item.prompt if show_reverse else item.answer

    pool = [other for other in catalog if other.id != item.id]
    rng.shuffle(pool)
    distractors = [
        other.prompt if show_reverse else other.answer
        for other in pool[:option_count - 1]
    ]

    options = [correct_answer, *distractors]
    rng.shuffle(options)

    return Question(
        item_id=item.id,
        prompt=prompt,
        options=tuple(options),
        correct_index=options.index(correct_answer),
        reversed=show_reverse,
    )
