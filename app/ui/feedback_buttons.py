"""
Answer Button UI

Renders reveal / correct / wrong and maps clicks to intents.
"""

from typing import Optional

import streamlit as st
from core.drill import Intent, SessionView


def render_answer_buttons(view: SessionView) -> Optional[Intent]:
    """
    Render the answer row.

    Buttons are disabled when there is no word on screen.

    Returns:
        Intent for the clicked button, or None if nothing was clicked
    """
    disabled = not view.can_answer
    key_suffix = view.word.id if view.word is not None else "none"

    if st.button(
        "Reveal",
        use_container_width=True,
        disabled=disabled or view.revealed,
        key=f"reveal_{key_suffix}",
    ):
        return Intent.REVEAL

    col1, col2 = st.columns(2)

    with col1:
        if st.button(
            "✅ Correct",
            type="primary",
            use_container_width=True,
            disabled=disabled,
            key=f"correct_{key_suffix}",
        ):
            return Intent.ANSWER_CORRECT

    with col2:
        if st.button(
            "❌ Wrong",
            use_container_width=True,
            disabled=disabled,
            key=f"wrong_{key_suffix}",
        ):
            return Intent.ANSWER_WRONG

    return None
