"""
Quiz setup requests, validated before a session is built.
"""

from __future__ import annotations

from dataclasses import dataclass

from core.catalog_repo import storage_key
from core.quiz.constants import DEFAULT_TOTAL_QUESTIONS, MIN_ITEM_COUNT


class InvalidQuizRequest(ValueError):
    """Raised when setup input cannot start a quiz."""


@dataclass(frozen=True)
class QuizRequest:
    """
    Settings for one quiz run over a catalog scope.
    """
    catalog_type: str
    item_count: int
    total_questions: int

    @property
    def storage_key(self) -> str:
        return storage_key(self.catalog_type, self.item_count)


def _parse_int(value: object) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        return None


def default_total_questions(item_count: int) -> int:
    return max(DEFAULT_TOTAL_QUESTIONS, item_count)


def normalize_quiz_request(
    catalog_type: str,
    item_count: object,
    total_questions: object,
    max_items: int
) -> QuizRequest:
    """
    Validate raw setup input and build a QuizRequest.

    Item count must be a number between MIN_ITEM_COUNT and max_items.
    A blank or non-numeric question count falls back to
    max(DEFAULT_TOTAL_QUESTIONS, item_count), and the question count is
    never lower than the item count.

    Raises:
        InvalidQuizRequest: item count missing or out of range
    """
    count = _parse_int(item_count)
    if count is None:
        raise InvalidQuizRequest("Item count must be a number")
    if count < MIN_ITEM_COUNT or count > max_items:
        raise InvalidQuizRequest(
            f"Item count must be between {MIN_ITEM_COUNT} and {max_items}"
        )

    questions = _parse_int(total_questions)
    if not questions:
        questions = default_total_questions(count)

    return QuizRequest(
        catalog_type=catalog_type,
        item_count=count,
        total_questions=max(questions, count),
    )
