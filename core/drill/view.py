"""
Presentation projection of the drill session.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from core.drill.constants import (
    PHASE_DISPLAY,
    PHASE_FIRST_PASS,
    PHASE_PACKAGE,
    TARGET_MASTERED,
)
from core.drill.session_state import SessionState
from core.schemas import WordRecord


COMPLETE_TITLE = "✅ Session complete for today"
COMPLETE_HINT = "Reset to start over."
LOAD_FAILED_TITLE = "Failed to load words."


@dataclass(frozen=True)
class SessionView:
    """
    Everything the UI needs to draw one frame.
    """
    word: Optional[WordRecord]
    revealed: bool
    phase: str
    mastered_count: int
    unknown_count: int
    first_pass_remaining: int
    active_count: int
    package_size: int
    target_mastered: int = TARGET_MASTERED

    @property
    def phase_label(self) -> str:
        return PHASE_DISPLAY[self.phase]

    @property
    def is_complete(self) -> bool:
        return self.word is None

    @property
    def can_answer(self) -> bool:
        """Reveal/correct/wrong buttons are enabled only with a word on screen."""
        return self.word is not None


def build_view(
    state: SessionState,
    word: Optional[WordRecord],
    revealed: bool = False
) -> SessionView:
    return SessionView(
        word=word,
        revealed=revealed and word is not None,
        phase=PHASE_PACKAGE if state.first_pass_done else PHASE_FIRST_PASS,
        mastered_count=len(state.mastered_today),
        unknown_count=len(state.unknown_ids),
        first_pass_remaining=len(state.first_pass_queue),
        active_count=len(state.active_ids),
        package_size=state.package_size,
    )
