"""
Quiz card style presets and constants.
"""

from __future__ import annotations

from dataclasses import dataclass


# ---- Shared Card Layout ----

CARD_PADDING = "35px 24px"
CARD_MIN_HEIGHT = "180px"
PROMPT_BG_COLOR = "#f0f2f6"

# Prompts up to this many characters get the large glyph style
SHORT_PROMPT_LENGTH = 3


# ---- Answer Feedback Colors ----

CORRECT_COLOR = "#16a34a"
INCORRECT_COLOR = "#dc2626"
MUTED_COLOR = "#9ca3af"


@dataclass(frozen=True)
class PromptCardStyle:
    """
    Visual style preset for the prompt card.
    """
    font_size: str = "2em"
    color: str = "#1f1f1f"
    weight: str = "bold"
    wrap_text: bool = True
    bg_color: str = PROMPT_BG_COLOR


SHORT_PROMPT_STYLE = PromptCardStyle(
    font_size="5em",
    wrap_text=False,
)

LONG_PROMPT_STYLE = PromptCardStyle()


def style_for_prompt(prompt: str) -> PromptCardStyle:
    if len(prompt) <= SHORT_PROMPT_LENGTH:
        return SHORT_PROMPT_STYLE
    return LONG_PROMPT_STYLE
