"""
Quiz - Adaptive Multiple-Choice Engine

Main API for the flashcard quiz.

Items live in three mastery pools (unseen, wrong, correct). Each question
is drawn from a pool picked by weight (60/30/10), avoiding the last few
items asked, and the answer moves the item between pools. Pools persist
per session key so a learner can resume later.

Quick start:
    from core import quiz

    store = quiz.MasteryStore(quiz.InMemoryKeyValueStore())
    session = quiz.QuizSession(items, total_questions=20, store=store, key="kanji-5")
    session.start()
    session.submit_answer(2)
"""

# Session controller
from core.quiz.session import (
    QuizSession,
    SessionPhase,
    SessionSnapshot,
    SessionSummary,
    AnswerResult,
    InvalidTransitionError,
)

# Selection and question generation
from core.quiz.selector import Selector, PickHistory, choose_pool, choose_from_pool
from core.quiz.question_generator import Question, generate_question
from core.quiz.pools import MasteryPartition

# Persistence
from core.quiz.persistence import MasteryStore, StoreResult
from core.quiz.kv_store import KeyValueStore, InMemoryKeyValueStore, SqlKeyValueStore
from core.quiz.database import init_db, is_test_mode, get_session_factory

# Scheduling
from core.quiz.scheduling import Scheduler, ImmediateScheduler, DeferredScheduler

# Constants
from core.quiz.constants import (
    Pool,
    POOL_WEIGHTS,
    HISTORY_SIZE,
    OPTION_COUNT,
    REVEAL_DELAY_MS,
    MIN_ITEM_COUNT,
    DEFAULT_TOTAL_QUESTIONS,
)

__all__ = [
    "QuizSession",
    "SessionPhase",
    "SessionSnapshot",
    "SessionSummary",
    "AnswerResult",
    "InvalidTransitionError",
    "Selector",
    "PickHistory",
    "choose_pool",
    "choose_from_pool",
    "Question",
    "generate_question",
    "MasteryPartition",
    "MasteryStore",
    "StoreResult",
    "KeyValueStore",
    "InMemoryKeyValueStore",
    "SqlKeyValueStore",
    "init_db",
    "is_test_mode",
    "get_session_factory",
    "Scheduler",
    "ImmediateScheduler",
    "DeferredScheduler",
    "Pool",
    "POOL_WEIGHTS",
    "HISTORY_SIZE",
    "OPTION_COUNT",
    "REVEAL_DELAY_MS",
    "MIN_ITEM_COUNT",
    "DEFAULT_TOTAL_QUESTIONS",
]
