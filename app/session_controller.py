"""
Session lifecycle helpers for Streamlit app.

Wraps a QuizSession kept in st.session_state. The reveal delay runs through
a DeferredScheduler that is checked on every rerun.
"""

from __future__ import annotations

import time

import streamlit as st

from app.catalog_registry import get_catalog_spec
from app.session_requests import InvalidQuizRequest, QuizRequest, normalize_quiz_request
from app.state import get_mastery_store, load_catalog_cached
from core import quiz
from core.catalog_repo import scope_catalog
from core.schemas import CatalogItem


def get_catalog(catalog_type: str) -> list[CatalogItem]:
    return [CatalogItem(**item) for item in load_catalog_cached(catalog_type)]


def open_setup(catalog_type: str) -> None:
    """Switch to the setup form for a catalog."""
    get_catalog_spec(catalog_type)
    st.session_state.catalog_type = catalog_type
    st.session_state.setup_error = None
    st.session_state.screen = "setup"


def go_home() -> None:
    st.session_state.quiz_scheduler.cancel()
    st.session_state.quiz_session = None
    st.session_state.quiz_request = None
    st.session_state.screen = "home"


def submit_setup(item_count: object, total_questions: object) -> bool:
    """
    Validate setup input and start a quiz.

    Returns:
        True if a quiz was started
    """
    catalog_type = st.session_state.catalog_type
    catalog = get_catalog(catalog_type)
    try:
        request = normalize_quiz_request(
            catalog_type,
            item_count,
            total_questions,
            max_items=len(catalog),
        )
    except InvalidQuizRequest as exc:
        st.session_state.setup_error = str(exc)
        return False

    st.session_state.setup_error = None
    start_quiz(request, catalog)
    return True


def start_quiz(request: QuizRequest, catalog: list[CatalogItem]) -> None:
    """
    Start a new quiz session, resuming persisted mastery for its key.
    """
    scheduler = st.session_state.quiz_scheduler
    scheduler.cancel()

    session = quiz.QuizSession(
        scope_catalog(catalog, request.item_count),
        total_questions=request.total_questions,
        store=get_mastery_store(),
        key=request.storage_key,
        scheduler=scheduler,
    )
    session.start()

    st.session_state.quiz_request = request
    st.session_state.quiz_session = session
    st.session_state.screen = "quiz"


def submit_answer(option_index: int) -> None:
    """Record an answer; repeated clicks on a revealed question are ignored."""
    session: quiz.QuizSession = st.session_state.quiz_session
    if session is not None:
        session.submit_answer(option_index)


def advance_after_reveal() -> None:
    """
    Wait out the reveal delay, then move to the next question.

    The answer is already recorded; this only defers the next pick.
    """
    scheduler: quiz.DeferredScheduler = st.session_state.quiz_scheduler
    remaining = scheduler.due_in()
    if remaining is None:
        return
    if remaining > 0:
        time.sleep(remaining)
    scheduler.run_due()


def restart_quiz() -> None:
    session: quiz.QuizSession = st.session_state.quiz_session
    if session is not None:
        st.session_state.quiz_scheduler.cancel()
        session.restart()


def exit_quiz() -> None:
    """
    Leave a finished quiz, clearing its persisted mastery.
    """
    session: quiz.QuizSession = st.session_state.quiz_session
    if session is not None and session.finished:
        session.exit()
    go_home()
