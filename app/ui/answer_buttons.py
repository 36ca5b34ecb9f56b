"""
Answer Option UI

Renders the multiple-choice options as a 2x2 grid of buttons.
"""

from __future__ import annotations

import html
from typing import Optional

import streamlit as st

from app.ui.flashcard_style import CORRECT_COLOR, INCORRECT_COLOR, MUTED_COLOR
from core.quiz import SessionSnapshot


def _revealed_option_html(index: int, text: str, color: str, muted: bool) -> str:
    opacity = "0.55" if muted else "1"
    return (
        f'<div style="border: 2px solid {color}; border-radius: 14px; '
        f'padding: 0.9rem 1rem; margin-bottom: 0.75rem; color: {color}; '
        f'opacity: {opacity}; font-size: 1.25em; font-weight: 600;">'
        f"{index + 1}. {html.escape(text)}</div>"
    )


def render_answer_options(snapshot: SessionSnapshot, key_suffix: str = "") -> Optional[int]:
    """
    Render answer options for the current question.

    Before an answer the options are buttons; afterwards they are colored
    to show the correct choice and the learner's pick.

    Returns:
        Index of the clicked option, or None if nothing was clicked
    """
    options = snapshot.options
    if not options:
        return None

    columns = st.columns(2)
    clicked = None

    for index, text in enumerate(options):
        with columns[index % 2]:
            if snapshot.correct_index is None:
                if st.button(
                    f"{index + 1}. {text}",
                    key=f"option_{key_suffix}_{index}",
                    use_container_width=True,
                ):
                    clicked = index
            elif index == snapshot.correct_index:
                st.markdown(_revealed_option_html(index, text, CORRECT_COLOR, False), unsafe_allow_html=True)
            elif index == snapshot.selected_index:
                st.markdown(_revealed_option_html(index, text, INCORRECT_COLOR, False), unsafe_allow_html=True)
            else:
                st.markdown(_revealed_option_html(index, text, MUTED_COLOR, True), unsafe_allow_html=True)

    return clicked
