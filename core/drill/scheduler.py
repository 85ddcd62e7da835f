"""
Scheduler - Daily Drill State Machine

Pure scheduling and state updates (no store calls).

Main workflow:
1. Caller holds a SchedulerStep (state + word currently on screen)
2. An intent comes in from the presentation layer
3. reduce() returns the next SchedulerStep
4. Caller persists the new state

Phases:
- First pass: each word once; correct = mastered, wrong = left for later
- Packages: batches drawn from the unknown pool; two correct in a row
  masters a word, a wrong answer resets its streak

This module handles ONLY the algorithm logic.
Persistence is handled by the service module.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Optional
import logging
import random

from core.drill.constants import (
    Intent,
    MASTERY_STREAK,
    PACKAGE_GROWTH,
    TARGET_MASTERED,
)
from core.drill.session_state import SessionState, new_session_state

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SchedulerStep:
    """
    Scheduler output: the new state and the word to show (None = nothing).
    """
    state: SessionState
    current_id: Optional[str]


def is_day_complete(state: SessionState) -> bool:
    """True once the mastery target is hit or nothing is left to learn."""
    return len(state.mastered_today) >= TARGET_MASTERED or not state.unknown_ids


# ---- Internal mutators (operate on a private copy) ----

def _mark_mastered(state: SessionState, word_id: str) -> None:
    if word_id not in state.mastered_today:
        state.mastered_today.append(word_id)
    state.unknown_ids = [i for i in state.unknown_ids if i != word_id]
    logger.debug("Mastered %s (%d today)", word_id, len(state.mastered_today))


def _refill(state: SessionState, rng: random.Random) -> None:
    if not state.first_pass_done:
        return

    if is_day_complete(state):
        state.active_ids = []
        return

    if state.active_ids:
        return

    if not state.package_started:
        state.package_started = True
    else:
        state.package_size += PACKAGE_GROWTH

    pick_count = min(state.package_size, len(state.unknown_ids))
    state.active_ids = rng.sample(state.unknown_ids, pick_count)

    for word_id in state.active_ids:
        state.consecutive_correct.setdefault(word_id, 0)

    logger.info(
        "Formed package of %d (size %d, %d unknown left)",
        len(state.active_ids),
        state.package_size,
        len(state.unknown_ids),
    )


def _draw_current(state: SessionState, rng: random.Random) -> Optional[str]:
    if not state.first_pass_done:
        if not state.first_pass_queue:
            logger.warning("First pass not done but queue is empty")
            return None
        return state.first_pass_queue[0]

    if is_day_complete(state):
        return None

    _refill(state, rng)

    if not state.active_ids:
        return None

    return rng.choice(state.active_ids)


def _answer_first_pass(state: SessionState, word_id: str, is_correct: bool, rng: random.Random) -> None:
    state.first_pass_queue = [i for i in state.first_pass_queue if i != word_id]

    if is_correct:
        _mark_mastered(state, word_id)

    if not state.first_pass_queue:
        state.first_pass_done = True
        logger.info(
            "First pass done: %d mastered, %d unknown",
            len(state.mastered_today),
            len(state.unknown_ids),
        )
        _refill(state, rng)


def _answer_package(state: SessionState, word_id: str, is_correct: bool, rng: random.Random) -> None:
    if is_correct:
        streak = state.consecutive_correct.get(word_id, 0) + 1
        state.consecutive_correct[word_id] = streak

        if streak >= MASTERY_STREAK:
            _mark_mastered(state, word_id)
            state.active_ids = [i for i in state.active_ids if i != word_id]
            del state.consecutive_correct[word_id]
    else:
        state.consecutive_correct[word_id] = 0

    _refill(state, rng)


# ---- Public API ----

def refill_active_if_needed(state: SessionState, rng: random.Random) -> SessionState:
    """
    Form a new package when the current one is used up.

    No-op during the first pass or while a batch is in progress. Clears the
    batch once the day is complete. The first batch keeps the initial size;
    every later batch is PACKAGE_GROWTH larger than the one before.

    Args:
        state: Current state (not modified)
        rng: Random source for drawing the batch

    Returns:
        New SessionState
    """
    next_state = state.copy()
    _refill(next_state, rng)
    return next_state


def ensure_current_word(state: SessionState, rng: random.Random) -> SchedulerStep:
    """
    Derive which word to show next.

    - First pass: head of the queue
    - Day complete: None
    - Otherwise: a uniform draw from the active batch (refilled if empty)
    """
    next_state = state.copy()
    current_id = _draw_current(next_state, rng)
    return SchedulerStep(state=next_state, current_id=current_id)


def answer(
    state: SessionState,
    current_id: Optional[str],
    is_correct: bool,
    rng: random.Random
) -> SchedulerStep:
    """
    Apply a correct/wrong answer for the word on screen.

    Args:
        state: Current state (not modified)
        current_id: Word the learner just answered (None = no-op)
        is_correct: Whether the learner knew it
        rng: Random source for refills and the next draw

    Returns:
        SchedulerStep with the updated state and the next word
    """
    if current_id is None:
        return SchedulerStep(state=state, current_id=None)

    next_state = state.copy()

    if not next_state.first_pass_done:
        if current_id not in next_state.first_pass_queue:
            logger.warning("Ignoring answer for %s: not in first-pass queue", current_id)
            return SchedulerStep(state=state, current_id=current_id)
        _answer_first_pass(next_state, current_id, is_correct, rng)
    else:
        if current_id not in next_state.active_ids:
            logger.warning("Ignoring answer for %s: not in active package", current_id)
            return SchedulerStep(state=state, current_id=current_id)
        _answer_package(next_state, current_id, is_correct, rng)

    return SchedulerStep(state=next_state, current_id=_draw_current(next_state, rng))


def reset(
    catalog_ids: list[str],
    day_stamp: str,
    rng: random.Random
) -> SchedulerStep:
    """
    Start the day over, exactly like a first run.
    """
    logger.info("Resetting session for %s (%d words)", day_stamp, len(catalog_ids))
    return ensure_current_word(new_session_state(catalog_ids, day_stamp, rng), rng)


def reduce(
    step: SchedulerStep,
    intent: Intent,
    *,
    catalog_ids: Iterable[str],
    day_stamp: str,
    rng: random.Random
) -> SchedulerStep:
    """
    Single entry point: (step, intent) -> next step.

    REVEAL never changes state. RESET needs the catalog and day to rebuild.
    """
    intent = Intent(intent)

    if intent == Intent.REVEAL:
        return step
    if intent == Intent.ANSWER_CORRECT:
        return answer(step.state, step.current_id, True, rng)
    if intent == Intent.ANSWER_WRONG:
        return answer(step.state, step.current_id, False, rng)
    if intent == Intent.RESET:
        return reset(list(catalog_ids), day_stamp, rng)

    raise ValueError(f"Unknown intent: {intent}")
