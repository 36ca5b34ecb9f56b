"""
Prompt Card UI Component

Renders the question prompt as a centered card.
"""

from __future__ import annotations

import html

import streamlit as st
from app.ui.flashcard_style import (
    CARD_MIN_HEIGHT,
    CARD_PADDING,
    PromptCardStyle,
    style_for_prompt,
)


def render_prompt_card(prompt: str | None, style: PromptCardStyle | None = None) -> None:
    """
    Render the prompt card.

    Args:
        prompt: Prompt text; nothing is rendered when None
        style: Optional style preset; chosen from prompt length by default
    """
    if prompt is None:
        return
    style = style or style_for_prompt(prompt)

    white_space = "normal" if style.wrap_text else "nowrap"
    main_html = (
        f'<h1 style="font-size: {style.font_size}; color: {style.color}; '
        f'font-weight: {style.weight}; margin: 0; white-space: {white_space}; '
        'text-align: center; line-height: 1.4; max-width: 100%; '
        'overflow-wrap: anywhere; word-break: break-word;">'
        f"{html.escape(prompt)}</h1>"
    )
    card_html = (
        f'<div style="background-color: {style.bg_color}; padding: {CARD_PADDING}; '
        'border-radius: 15px; text-align: center; box-shadow: 0 4px 6px '
        f'rgba(0, 0, 0, 0.1); min-height: {CARD_MIN_HEIGHT}; display: flex; '
        'flex-direction: column; align-items: center; justify-content: center;">'
        f"{main_html}</div>"
    )

    st.markdown(card_html, unsafe_allow_html=True)
