"""
Daily Vocabulary Drill - Main App

Streamlit UI for the daily drill: first pass through every word, then
growing packages of the words still unknown.
"""

import logging

import streamlit as st

from app.session_controller import get_session, handle_intent
from app.state import ensure_session_state
from app.ui import render_answer_buttons, render_flashcard, render_session_stats
from app.ui.flashcard_style import ANSWER_STYLE, COMPLETE_STYLE, PROMPT_STYLE
from core import settings
from core.drill import Intent
from core.drill.view import COMPLETE_HINT, COMPLETE_TITLE, LOAD_FAILED_TITLE


logging.basicConfig(
    level=settings.get_log_level(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


# ---- Page Setup ----

st.set_page_config(
    page_title="Daily Vocabulary Drill",
    page_icon="📚",
    layout="centered"
)


def render_test_mode_warning():
    """Show warning if in test mode."""
    if settings.is_test_mode():
        st.warning("⚠️ **TEST MODE** - Using test_drill_state.db (set TEST_MODE=false in .env for production)")


def main():
    """Main app entry point."""
    ensure_session_state()

    st.markdown("<style>.stApp h1 { font-size: 1.6rem; }</style>", unsafe_allow_html=True)
    st.title("📚 Daily Vocabulary Drill")
    render_test_mode_warning()

    session = get_session()
    if session is None:
        st.error(LOAD_FAILED_TITLE)
        st.caption(st.session_state.load_error)
        st.stop()

    view = session.view()

    if render_session_stats(view):
        handle_intent(Intent.RESET)

    if view.word is None:
        render_flashcard(COMPLETE_TITLE, subtitle=COMPLETE_HINT, style=COMPLETE_STYLE)
    elif view.revealed:
        render_flashcard(view.word.translation, corner_text=view.word.text, style=ANSWER_STYLE)
    else:
        render_flashcard(view.word.text, style=PROMPT_STYLE)

    st.markdown("<br>", unsafe_allow_html=True)

    intent = render_answer_buttons(view)
    if intent is not None:
        handle_intent(intent)


if __name__ == "__main__":
    main()
