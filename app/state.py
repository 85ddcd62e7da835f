"""
Streamlit session state and resource initialization helpers.
"""

from __future__ import annotations

import streamlit as st

from core import catalog_repo, settings
from core.drill import MemoryStateStore, SqlStateStore, StateStore
from core.schemas import WordRecord


@st.cache_resource
def get_catalog() -> list[WordRecord]:
    """
    Load the word catalog once per server process.

    CatalogLoadError propagates; Streamlit does not cache failures.
    """
    return catalog_repo.load_catalog()


@st.cache_resource
def _get_sql_store(database_url: str) -> SqlStateStore:
    return SqlStateStore(database_url)


def get_store() -> StateStore:
    """
    Store for the session blob.

    "session" backend keeps one MemoryStateStore per browser session.
    """
    if settings.get_persistence_backend() == "session":
        if "memory_store" not in st.session_state:
            st.session_state.memory_store = MemoryStateStore()
        return st.session_state.memory_store
    return _get_sql_store(settings.get_database_url())


def ensure_session_state() -> None:
    """
    Populate Streamlit session_state with defaults.
    """
    if "drill" not in st.session_state:
        st.session_state.drill = None
    if "load_error" not in st.session_state:
        st.session_state.load_error = None
