"""
Streamlit session state and storage initialization helpers.
"""

from __future__ import annotations

import logging
import os

import streamlit as st

from app.catalog_registry import get_catalog_spec
from core import quiz
from core.quiz.database import get_session_factory, init_db


logger = logging.getLogger(__name__)


@st.cache_resource
def get_mastery_store() -> quiz.MasteryStore:
    """
    Build the mastery store once per server process.

    MASTERY_BACKEND=memory keeps state only for the running process. If the
    database cannot be initialized the app degrades to the in-memory store.
    """
    backend = os.getenv("MASTERY_BACKEND", "sql").lower()
    if backend == "memory":
        return quiz.MasteryStore(quiz.InMemoryKeyValueStore())
    try:
        init_db()
    except Exception as exc:
        logger.warning("Mastery database unavailable, using in-memory store: %s", exc)
        return quiz.MasteryStore(quiz.InMemoryKeyValueStore())
    return quiz.MasteryStore(quiz.SqlKeyValueStore(get_session_factory()))


@st.cache_data(show_spinner=False)
def load_catalog_cached(catalog_type: str) -> list[dict]:
    """Load a catalog once per server process, as plain dicts."""
    return [item.model_dump() for item in get_catalog_spec(catalog_type).load()]


def ensure_session_state() -> None:
    """
    Populate Streamlit session_state with defaults.
    """
    if "screen" not in st.session_state:
        st.session_state.screen = "home"
    if "catalog_type" not in st.session_state:
        st.session_state.catalog_type = None
    if "quiz_request" not in st.session_state:
        st.session_state.quiz_request = None
    if "quiz_session" not in st.session_state:
        st.session_state.quiz_session = None
    if "quiz_scheduler" not in st.session_state:
        st.session_state.quiz_scheduler = quiz.DeferredScheduler()
    if "setup_error" not in st.session_state:
        st.session_state.setup_error = None
