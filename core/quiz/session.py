r"""
Quiz Session - Session Controller

Drives one bounded quiz run:

    start() -> ASKING -> submit_answer() -> REVEALED -> (delay) -> ASKING ...
                                                     \-> FINISHED

Picking and question generation are synchronous. Only the hop from REVEALED
to the next question goes through the scheduler, so answers are recorded
immediately and tests can fire the delay on demand.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from core.quiz.constants import REVEAL_DELAY_MS, Pool
from core.quiz.persistence import MasteryStore
from core.quiz.pools import MasteryPartition
from core.quiz.question_generator import Question, generate_question
from core.quiz.scheduling import ImmediateScheduler, Scheduler
from core.quiz.selector import PickHistory, Selector
from core.schemas import CatalogItem


logger = logging.getLogger(__name__)


class SessionPhase(str, Enum):
    ASKING = "asking"        # A question is live
    REVEALED = "revealed"    # Answer recorded, feedback showing
    FINISHED = "finished"    # Terminal


class InvalidTransitionError(RuntimeError):
    """Raised when a session operation is not valid in the current phase."""


@dataclass(frozen=True)
class AnswerResult:
    item_id: int
    selected_index: int
    correct_index: int
    is_correct: bool


@dataclass(frozen=True)
class SessionSummary:
    total_correct: int
    total_asked: int


@dataclass(frozen=True)
class SessionSnapshot:
    """
    Everything the UI needs to render the current state.

    correct_index stays None until the current question is answered.
    """
    phase: SessionPhase
    prompt: Optional[str]
    options: tuple[str, ...]
    selected_index: Optional[int]
    correct_index: Optional[int]
    pool_sizes: dict[Pool, int]
    total_asked: int
    total_correct: int
    total_questions: int


class QuizSession:
    """
    Adaptive multiple-choice session over a scoped catalog.

    Args:
        catalog: Scoped catalog items
        total_questions: Questions to ask before finishing
        store: Mastery store; persistence is skipped without a key
        key: Session key for persisted mastery
        scheduler: Deferral used between reveal and the next question
        rng: Random source shared by selection and question generation
    """

    def __init__(
        self,
        catalog: Sequence[CatalogItem],
        total_questions: int,
        store: Optional[MasteryStore] = None,
        key: Optional[str] = None,
        scheduler: Optional[Scheduler] = None,
        rng: Optional[random.Random] = None,
        reveal_delay_ms: int = REVEAL_DELAY_MS,
    ):
        self.catalog = list(catalog)
        self.items = {item.id: item for item in self.catalog}
        self.total_questions = total_questions
        self.store = store if key else None
        self.key = key
        self.scheduler = scheduler or ImmediateScheduler()
        self.rng = rng or random.Random()
        self.selector = Selector(self.rng)
        self.reveal_delay_ms = reveal_delay_ms

        if self.store is not None:
            self.partition = self.store.load(key, self.items.keys())
        else:
            self.partition = MasteryPartition.fresh(self.items.keys())

        self.history = PickHistory()
        self.question: Optional[Question] = None
        self.selected_index: Optional[int] = None
        self.total_asked = 0
        self.total_correct = 0
        self.phase: Optional[SessionPhase] = None
        self.closed = False
        # Bumped on restart so stale reveal callbacks are ignored
        self._generation = 0

    # ---- Lifecycle ----

    @property
    def finished(self) -> bool:
        return self.phase == SessionPhase.FINISHED

    def start(self) -> SessionPhase:
        """Ask the first question, or finish immediately if none can be asked."""
        if self.phase is not None:
            raise InvalidTransitionError("Session already started")
        logger.info(
            "Starting quiz session key=%s items=%d questions=%d",
            self.key, len(self.items), self.total_questions
        )
        self._pick_next()
        return self.phase

    def submit_answer(self, option_index: int) -> Optional[AnswerResult]:
        """
        Record an answer for the live question.

        Only the first answer to a question counts; later submissions and
        submissions outside ASKING return None.
        """
        if self.phase != SessionPhase.ASKING or self.question is None:
            return None
        if self.selected_index is not None:
            return None

        question = self.question
        self.selected_index = option_index
        is_correct = option_index == question.correct_index

        self.total_asked += 1
        if is_correct:
            self.total_correct += 1

        self.partition.record_answer(question.item_id, is_correct)
        self._persist()

        self.phase = SessionPhase.REVEALED
        generation = self._generation
        self.scheduler.schedule(
            self.reveal_delay_ms,
            lambda: self._advance(generation)
        )

        return AnswerResult(
            item_id=question.item_id,
            selected_index=option_index,
            correct_index=question.correct_index,
            is_correct=is_correct,
        )

    def restart(self) -> SessionPhase:
        """
        Reset mastery, history and score, persist the reset, and ask again.
        """
        self._generation += 1
        self.partition = MasteryPartition.fresh(self.items.keys())
        self.history.clear()
        self.total_asked = 0
        self.total_correct = 0
        self.question = None
        self.selected_index = None
        self.closed = False
        self._persist()
        logger.info("Restarted quiz session key=%s", self.key)
        self._pick_next()
        return self.phase

    def exit(self) -> SessionSummary:
        """
        Leave a finished session, clearing its persisted mastery.
        """
        if self.phase != SessionPhase.FINISHED:
            raise InvalidTransitionError("Session can only be exited once finished")
        if self.store is not None:
            # Failure only means stale mastery on the next visit
            self.store.clear(self.key)
        self.closed = True
        return self.summary()

    # ---- Outputs ----

    def summary(self) -> SessionSummary:
        return SessionSummary(
            total_correct=self.total_correct,
            total_asked=self.total_asked,
        )

    def pool_sizes(self) -> dict[Pool, int]:
        return self.partition.sizes()

    def snapshot(self) -> SessionSnapshot:
        question = self.question
        revealed = question is not None and self.selected_index is not None
        return SessionSnapshot(
            phase=self.phase,
            prompt=question.prompt if question else None,
            options=question.options if question else (),
            selected_index=self.selected_index,
            correct_index=question.correct_index if revealed else None,
            pool_sizes=self.pool_sizes(),
            total_asked=self.total_asked,
            total_correct=self.total_correct,
            total_questions=self.total_questions,
        )

    # ---- Internals ----

    def _advance(self, generation: int) -> None:
        if generation != self._generation or self.phase != SessionPhase.REVEALED:
            return
        self._pick_next()

    def _pick_next(self) -> None:
        if self.total_asked >= self.total_questions:
            self._finish()
            return

        next_id = self.selector.pick(self.partition, self.history)
        if next_id is None:
            self._finish()
            return

        self.question = generate_question(self.catalog, self.items[next_id], self.rng)
        self.history.push(next_id)
        self.selected_index = None
        self.phase = SessionPhase.ASKING

    def _finish(self) -> None:
        self.phase = SessionPhase.FINISHED
        logger.info(
            "Quiz session finished key=%s score=%d/%d",
            self.key, self.total_correct, self.total_asked
        )

    def _persist(self) -> None:
        # Best-effort: a failed write is logged by the store and otherwise ignored
        if self.store is not None:
            self.store.save(self.key, self.partition)
