"""
Session lifecycle helpers for Streamlit app.
"""

from __future__ import annotations

import logging
from typing import Optional

import streamlit as st

from app.state import get_catalog, get_store
from core.drill import CatalogLoadError, DrillSession, Intent, today_stamp

logger = logging.getLogger(__name__)


def start_session() -> Optional[DrillSession]:
    """
    Load the catalog and today's session.

    Returns None (and records the error) when the catalog cannot be loaded.
    """
    try:
        catalog = get_catalog()
    except CatalogLoadError as exc:
        logger.error("Catalog load failed: %s", exc)
        st.session_state.load_error = str(exc)
        st.session_state.drill = None
        return None

    st.session_state.load_error = None
    st.session_state.drill = DrillSession.start(catalog, get_store(), day_stamp=today_stamp())
    return st.session_state.drill


def get_session() -> Optional[DrillSession]:
    """
    Current session, restarted when the calendar day has changed.
    """
    session: Optional[DrillSession] = st.session_state.drill
    if session is None:
        return start_session()

    if session.day_stamp != today_stamp():
        logger.info("Day changed since %s, reloading session", session.day_stamp)
        return start_session()

    return session


def handle_intent(intent: Intent) -> None:
    """
    Apply one intent and rerun the script to redraw.
    """
    session = get_session()
    if session is None:
        return

    if intent == Intent.RESET:
        session.reset(day_stamp=today_stamp())
    else:
        session.dispatch(intent)

    st.rerun()
