"""
Session State - Daily Drill Progress

Defines the single mutable record owned by the scheduler, how a fresh one is
built for a day, and how a resumed one is cleaned up against the current
catalog.

Key concepts:
- Unknown pool: words not yet mastered today
- First pass: every catalog word shown once, in a shuffled order
- Package: a small batch of unknown words drilled until mastered
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Iterable, Optional
import random

from core.drill.constants import INITIAL_PACKAGE_SIZE


@dataclass
class SessionState:
    """
    Progress for one calendar day.

    ``consecutive_correct`` only holds words that are currently tracked;
    a missing key means "not in a batch", not "zero correct".
    """
    day_stamp: str

    # Pools (disjoint)
    unknown_ids: list[str]
    mastered_today: list[str]

    # First pass
    first_pass_queue: list[str]
    first_pass_done: bool = False

    # Package phase
    package_size: int = INITIAL_PACKAGE_SIZE
    package_started: bool = False
    active_ids: list[str] = field(default_factory=list)
    consecutive_correct: dict[str, int] = field(default_factory=dict)

    def copy(self) -> "SessionState":
        """Return an independent copy (all collections duplicated)."""
        return SessionState(
            day_stamp=self.day_stamp,
            unknown_ids=list(self.unknown_ids),
            mastered_today=list(self.mastered_today),
            first_pass_queue=list(self.first_pass_queue),
            first_pass_done=self.first_pass_done,
            package_size=self.package_size,
            package_started=self.package_started,
            active_ids=list(self.active_ids),
            consecutive_correct=dict(self.consecutive_correct),
        )


def today_stamp(now: Optional[datetime] = None) -> str:
    """
    Day key for the persisted state (UTC date, YYYY-MM-DD).
    """
    if now is None:
        now = datetime.now(timezone.utc)
    return now.date().isoformat()


def unique(ids: Iterable[str]) -> list[str]:
    """Deduplicate while keeping first-seen order."""
    return list(dict.fromkeys(ids))


def new_session_state(
    catalog_ids: list[str],
    day_stamp: str,
    rng: random.Random
) -> SessionState:
    """
    Build the state for a brand-new day.

    Args:
        catalog_ids: Every word id in the catalog, in catalog order
        day_stamp: Today's day key
        rng: Random source used for the first-pass shuffle

    Returns:
        Fresh SessionState with every word unknown and queued once
    """
    queue = list(catalog_ids)
    rng.shuffle(queue)
    return SessionState(
        day_stamp=day_stamp,
        unknown_ids=list(catalog_ids),
        mastered_today=[],
        first_pass_queue=queue,
    )


def sanitize_session_state(
    state: SessionState,
    catalog_ids: Iterable[str]
) -> SessionState:
    """
    Clean a resumed state against the current catalog.

    Rules:
    - Ids no longer in the catalog are dropped everywhere
    - mastered_today and unknown_ids are deduplicated and made disjoint
    - first_pass_queue loses duplicates and mastered ids
    - active_ids is kept inside unknown_ids
    - An empty first-pass queue means the first pass is done
    """
    known = set(catalog_ids)

    mastered = unique(i for i in state.mastered_today if i in known)
    mastered_set = set(mastered)
    unknown = unique(i for i in state.unknown_ids if i in known and i not in mastered_set)
    unknown_set = set(unknown)
    queue = unique(i for i in state.first_pass_queue if i in known and i not in mastered_set)
    active = unique(i for i in state.active_ids if i in unknown_set)
    counters = {
        word_id: max(0, int(count))
        for word_id, count in state.consecutive_correct.items()
        if word_id in known and word_id not in mastered_set
    }

    return SessionState(
        day_stamp=state.day_stamp,
        unknown_ids=unknown,
        mastered_today=mastered,
        first_pass_queue=queue,
        first_pass_done=state.first_pass_done or not queue,
        package_size=max(INITIAL_PACKAGE_SIZE, int(state.package_size)),
        package_started=state.package_started,
        active_ids=active,
        consecutive_correct=counters,
    )
