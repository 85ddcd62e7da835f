"""
Drill Service - Session Lifecycle and Persistence

Wraps the pure scheduler with the side effects around it:
- Startup: read blob, decode/sanitize or start fresh, derive word, write blob
- Intents: reduce, then write (delete + write on reset, nothing on reveal)
- Projection for the UI

One DrillSession owns one SessionState. Intents are processed strictly one
at a time; each finishes its store write before returning.
"""

from __future__ import annotations
from typing import Optional
import logging
import random

from core.drill import scheduler
from core.drill.codec import decode_state, encode_state
from core.drill.constants import Intent, STORAGE_KEY
from core.drill.errors import PersistedStateCorrupt
from core.drill.scheduler import SchedulerStep
from core.drill.session_state import (
    SessionState,
    new_session_state,
    sanitize_session_state,
    today_stamp,
)
from core.drill.store import StateStore
from core.drill.view import SessionView, build_view
from core.schemas import WordRecord

logger = logging.getLogger(__name__)


def load_state(
    raw: Optional[str],
    catalog_ids: list[str],
    day_stamp: str,
    rng: random.Random
) -> SessionState:
    """
    Turn whatever was in the store into a usable state for today.

    Fresh state when the blob is missing, corrupt, or from another day;
    otherwise the blob sanitized against the current catalog.
    """
    if not raw:
        logger.info("No saved session, starting fresh for %s", day_stamp)
        return new_session_state(catalog_ids, day_stamp, rng)

    try:
        saved = decode_state(raw)
    except PersistedStateCorrupt as exc:
        logger.warning("Saved session unreadable, starting fresh: %s", exc)
        return new_session_state(catalog_ids, day_stamp, rng)

    if saved.day_stamp != day_stamp:
        logger.info("Saved session is from %s, starting fresh for %s", saved.day_stamp, day_stamp)
        return new_session_state(catalog_ids, day_stamp, rng)

    state = sanitize_session_state(saved, catalog_ids)
    logger.info(
        "Resumed session for %s: %d mastered, %d unknown, %d in first pass",
        day_stamp,
        len(state.mastered_today),
        len(state.unknown_ids),
        len(state.first_pass_queue),
    )
    return state


class DrillSession:
    """
    The running drill: catalog + state + store + random source.
    """

    def __init__(
        self,
        catalog: list[WordRecord],
        store: StateStore,
        step: SchedulerStep,
        rng: random.Random,
        key: str = STORAGE_KEY
    ):
        self.catalog = list(catalog)
        self.words_by_id = {word.id: word for word in self.catalog}
        self.store = store
        self.rng = rng
        self.key = key
        self.revealed = False
        self._step = step

    @classmethod
    def start(
        cls,
        catalog: list[WordRecord],
        store: StateStore,
        day_stamp: Optional[str] = None,
        rng: Optional[random.Random] = None,
        key: str = STORAGE_KEY
    ) -> "DrillSession":
        """
        Load or create today's session and persist it before returning.

        Args:
            catalog: Every word for this run (may be empty)
            store: Where the session blob lives
            day_stamp: Today's key (defaults to the current UTC date)
            rng: Random source (defaults to an unseeded Random)
            key: Storage slot
        """
        day_stamp = day_stamp or today_stamp()
        rng = rng or random.Random()
        catalog_ids = [word.id for word in catalog]

        state = load_state(store.read(key), catalog_ids, day_stamp, rng)
        step = scheduler.ensure_current_word(state, rng)

        session = cls(catalog, store, step, rng, key)
        session._persist()
        return session

    # ---- Accessors ----

    @property
    def state(self) -> SessionState:
        return self._step.state

    @property
    def current_id(self) -> Optional[str]:
        return self._step.current_id

    @property
    def current_word(self) -> Optional[WordRecord]:
        if self.current_id is None:
            return None
        return self.words_by_id.get(self.current_id)

    @property
    def day_stamp(self) -> str:
        return self.state.day_stamp

    @property
    def catalog_ids(self) -> list[str]:
        return [word.id for word in self.catalog]

    def view(self) -> SessionView:
        return build_view(self.state, self.current_word, self.revealed)

    # ---- Intents ----

    def dispatch(self, intent: Intent, day_stamp: Optional[str] = None) -> SessionView:
        """
        Process one intent to completion (state change + store write).

        Args:
            intent: What the learner did
            day_stamp: Day to restart on for RESET (defaults to the session's day)
        """
        intent = Intent(intent)

        if intent == Intent.REVEAL:
            if self.current_id is not None:
                self.revealed = True
            return self.view()

        if intent == Intent.RESET:
            self.store.delete(self.key)

        self._step = scheduler.reduce(
            self._step,
            intent,
            catalog_ids=self.catalog_ids,
            day_stamp=day_stamp or self.day_stamp,
            rng=self.rng,
        )
        self.revealed = False
        self._persist()
        return self.view()

    def reveal(self) -> SessionView:
        return self.dispatch(Intent.REVEAL)

    def answer_correct(self) -> SessionView:
        return self.dispatch(Intent.ANSWER_CORRECT)

    def answer_wrong(self) -> SessionView:
        return self.dispatch(Intent.ANSWER_WRONG)

    def reset(self, day_stamp: Optional[str] = None) -> SessionView:
        return self.dispatch(Intent.RESET, day_stamp=day_stamp)

    # ---- Persistence ----

    def _persist(self) -> None:
        self.store.write(self.key, encode_state(self.state))
