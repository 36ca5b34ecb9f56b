"""UI Components for the Flashcard Quiz"""

from app.ui.prompt_card import render_prompt_card
from app.ui.answer_buttons import render_answer_options
from app.ui.session_stats import render_quiz_header, render_pool_status, render_results
from app.ui.setup_form import render_setup_form

__all__ = [
    "render_prompt_card",
    "render_answer_options",
    "render_quiz_header",
    "render_pool_status",
    "render_results",
    "render_setup_form",
]
