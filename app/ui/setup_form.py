"""
Quiz setup form.

Collects the catalog scope and question count. Validation happens in
app.session_requests before a session is built.
"""

from __future__ import annotations

from typing import Optional

import streamlit as st

from app.session_requests import default_total_questions
from core.quiz.constants import MIN_ITEM_COUNT


def render_setup_form(
    label: str,
    max_items: int,
    error: Optional[str] = None,
) -> tuple[bool, bool, str, str]:
    """
    Render the setup form.

    Returns:
        (start clicked, back clicked, raw item count, raw question count)
    """
    st.markdown(f"### {label}")

    default_count = min(5, max_items)
    item_count = st.text_input(
        f"Number of items ({MIN_ITEM_COUNT}–{max_items})",
        value=str(default_count),
        key="setup_item_count",
    )
    total_questions = st.text_input(
        "Total questions",
        value=str(default_total_questions(default_count)),
        key="setup_total_questions",
    )

    if error:
        st.error(error)

    col1, col2 = st.columns(2)
    with col1:
        start = st.button("Start", type="primary", use_container_width=True)
    with col2:
        back = st.button("Back", use_container_width=True)
    return start, back, item_count, total_questions
