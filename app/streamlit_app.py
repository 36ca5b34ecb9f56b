"""
Flashcard Quiz - Main App

Streamlit front end for the adaptive multiple-choice quiz.
"""

import logging
import os

import streamlit as st
from dotenv import load_dotenv

from app.router import PAGES
from app.state import ensure_session_state


# ---- Environment & Logging ----

load_dotenv()

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


# ---- Page Setup ----

st.set_page_config(
    page_title="Flashcard Quiz",
    page_icon="🎴",
    layout="centered"
)


# ---- Main App ----

def main():
    """Main app entry point."""
    ensure_session_state()

    tabs = st.tabs([page.title for page in PAGES])
    for tab, page in zip(tabs, PAGES):
        with tab:
            page.render()


if __name__ == "__main__":
    main()
