"""UI Components for the Daily Drill"""

from app.ui.flashcard import render_flashcard
from app.ui.session_stats import render_session_stats
from app.ui.feedback_buttons import render_answer_buttons

__all__ = [
    "render_flashcard",
    "render_session_stats",
    "render_answer_buttons",
]
