"""
Study page rendering.
"""

from __future__ import annotations

import streamlit as st

from app.catalog_registry import CATALOG_SPECS, get_catalog_spec
from app.session_controller import (
    advance_after_reveal,
    exit_quiz,
    get_catalog,
    go_home,
    open_setup,
    restart_quiz,
    submit_answer,
    submit_setup,
)
from app.ui import (
    render_answer_options,
    render_pool_status,
    render_prompt_card,
    render_quiz_header,
    render_results,
    render_setup_form,
)
from core import quiz


def render_study_page() -> None:
    """
    Render the study flow (home, setup, quiz or results).
    """
    screen = st.session_state.screen
    if screen == "setup":
        _render_setup_screen()
    elif screen == "quiz":
        _render_quiz_screen()
    else:
        _render_home_screen()


def _render_home_screen() -> None:
    st.markdown("<style>.stApp h1 { font-size: 2.4rem; }</style>", unsafe_allow_html=True)
    st.title("日本語")
    st.markdown("Study Japanese every day")
    if quiz.is_test_mode():
        st.warning("⚠️ **TEST MODE** - Using test_quiz_state (set TEST_MODE=false in .env for production)")
    st.markdown("<br>", unsafe_allow_html=True)

    columns = st.columns(len(CATALOG_SPECS))
    for column, spec in zip(columns, CATALOG_SPECS.values()):
        with column:
            count = len(get_catalog(spec.catalog_type))
            label = f"{spec.glyph}\n\n{spec.label} · {count} {spec.unit}"
            if st.button(label, key=f"home_{spec.catalog_type}", use_container_width=True):
                open_setup(spec.catalog_type)
                st.rerun()


def _render_setup_screen() -> None:
    spec = get_catalog_spec(st.session_state.catalog_type)
    max_items = len(get_catalog(spec.catalog_type))

    submitted, back, item_count, total_questions = render_setup_form(
        label=spec.setup_prompt,
        max_items=max_items,
        error=st.session_state.setup_error,
    )
    if back:
        go_home()
        st.rerun()
    if submitted:
        submit_setup(item_count, total_questions)
        st.rerun()


def _render_quiz_screen() -> None:
    session: quiz.QuizSession = st.session_state.quiz_session
    if session is None:
        go_home()
        st.rerun()
        return

    snapshot = session.snapshot()
    if snapshot.phase == quiz.SessionPhase.FINISHED:
        restart, home = render_results(session.summary())
        if restart:
            restart_quiz()
            st.rerun()
        if home:
            exit_quiz()
            st.rerun()
        return

    spec = get_catalog_spec(st.session_state.catalog_type)
    render_quiz_header(spec.label, snapshot)
    render_pool_status(snapshot.pool_sizes)
    render_prompt_card(snapshot.prompt)

    key_suffix = f"{snapshot.total_asked}_{snapshot.total_correct}"
    choice = render_answer_options(snapshot, key_suffix=key_suffix)
    if choice is not None:
        submit_answer(choice)
        st.rerun()

    if snapshot.phase == quiz.SessionPhase.REVEALED:
        advance_after_reveal()
        st.rerun()
