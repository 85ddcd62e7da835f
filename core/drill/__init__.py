"""
Drill - Daily Vocabulary Drill Scheduler

Main API for the daily drill.

Each day runs in two phases:
- First pass: every catalog word once, in shuffled order
- Packages: growing batches of unmastered words, two correct in a row to master

Quick start:
    from core import drill

    store = drill.MemoryStateStore()
    session = drill.DrillSession.start(catalog, store)

    view = session.answer_correct()
    print(view.word, view.mastered_count)
"""

# Core scheduler API (algorithm logic)
from core.drill.scheduler import (
    SchedulerStep,
    answer,
    ensure_current_word,
    is_day_complete,
    reduce,
    refill_active_if_needed,
    reset,
)

# State
from core.drill.session_state import (
    SessionState,
    new_session_state,
    sanitize_session_state,
    today_stamp,
)

# Persistence
from core.drill.codec import decode_state, encode_state
from core.drill.store import MemoryStateStore, SqlStateStore, StateStore

# Session service
from core.drill.service import DrillSession, load_state
from core.drill.view import SessionView, build_view

# Constants and errors
from core.drill.constants import (
    Intent,
    INITIAL_PACKAGE_SIZE,
    MASTERY_STREAK,
    PACKAGE_GROWTH,
    STORAGE_KEY,
    TARGET_MASTERED,
)
from core.drill.errors import CatalogLoadError, DrillError, PersistedStateCorrupt


__all__ = [
    # Core algorithm
    "SchedulerStep",
    "answer",
    "ensure_current_word",
    "is_day_complete",
    "reduce",
    "refill_active_if_needed",
    "reset",

    # State
    "SessionState",
    "new_session_state",
    "sanitize_session_state",
    "today_stamp",

    # Persistence
    "decode_state",
    "encode_state",
    "MemoryStateStore",
    "SqlStateStore",
    "StateStore",

    # Service
    "DrillSession",
    "load_state",
    "SessionView",
    "build_view",

    # Enums
    "Intent",

    # Parameters
    "INITIAL_PACKAGE_SIZE",
    "MASTERY_STREAK",
    "PACKAGE_GROWTH",
    "STORAGE_KEY",
    "TARGET_MASTERED",

    # Errors
    "CatalogLoadError",
    "DrillError",
    "PersistedStateCorrupt",
]
