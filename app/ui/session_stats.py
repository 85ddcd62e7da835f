"""
Session Statistics UI

Renders the day's counters and the reset control.
"""

import streamlit as st
from core.drill import SessionView


def render_session_stats(view: SessionView) -> bool:
    """
    Render phase, counters and the reset button.

    Returns:
        True if reset was clicked, False otherwise
    """
    st.caption(f"Phase: **{view.phase_label}**")

    col1, col2, col3, col4, col5 = st.columns(5)

    with col1:
        st.metric("Mastered", f"{view.mastered_count}/{view.target_mastered}")

    with col2:
        st.metric("Unknown", view.unknown_count)

    with col3:
        st.metric("First pass left", view.first_pass_remaining)

    with col4:
        st.metric("In package", view.active_count)

    with col5:
        st.metric("Package size", view.package_size)

    st.progress(min(1.0, view.mastered_count / view.target_mastered))
    st.divider()

    return st.button("🔄 Reset today", help="Throw away today's progress and start over")
