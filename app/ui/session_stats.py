"""
Session Statistics UI

Renders quiz progress, pool sizes and the final score.
"""

from __future__ import annotations

import streamlit as st

from core.quiz import Pool, SessionSnapshot, SessionSummary


def render_quiz_header(title: str, snapshot: SessionSnapshot) -> None:
    """Render the title with progress and running score."""
    col1, col2 = st.columns([3, 2])
    with col1:
        st.subheader(title)
    with col2:
        st.caption(
            f"{snapshot.total_asked}/{snapshot.total_questions} · "
            f"Correct: {snapshot.total_correct}"
        )


def render_pool_status(pool_sizes: dict[Pool, int]) -> None:
    """Render the unseen / wrong / correct pool counts."""
    st.caption(
        f"🆕 {pool_sizes[Pool.UNSEEN]}  "
        f"❌ {pool_sizes[Pool.WRONG]}  "
        f"✅ {pool_sizes[Pool.CORRECT]}"
    )


def render_results(summary: SessionSummary) -> tuple[bool, bool]:
    """
    Render the final score with restart and home buttons.

    Returns:
        (restart clicked, home clicked)
    """
    st.markdown("## Results")
    st.metric("Correct answers", f"{summary.total_correct}/{summary.total_asked}")
    if summary.total_asked > 0:
        accuracy = summary.total_correct / summary.total_asked * 100
        st.info(f"Accuracy: {accuracy:.1f}%")

    col1, col2 = st.columns(2)
    with col1:
        restart = st.button("Restart", type="primary", use_container_width=True)
    with col2:
        home = st.button("Home", use_container_width=True)
    return restart, home
