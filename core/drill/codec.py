"""
Blob codec for SessionState.

JSON with camelCase keys, same layout as the web app's localStorage slot.
"""

from __future__ import annotations

from pydantic import ValidationError

from core.drill.constants import INITIAL_PACKAGE_SIZE
from core.drill.errors import PersistedStateCorrupt
from core.drill.session_state import SessionState
from core.schemas import PersistedSession


def encode_state(state: SessionState) -> str:
    """Serialize a state to its persisted JSON string."""
    model = PersistedSession(
        day_stamp=state.day_stamp,
        unknown_ids=state.unknown_ids,
        mastered_today=state.mastered_today,
        first_pass_queue=state.first_pass_queue,
        first_pass_done=state.first_pass_done,
        package_size=state.package_size,
        package_started=state.package_started,
        active_ids=state.active_ids,
        consecutive_correct=state.consecutive_correct,
    )
    return model.model_dump_json(by_alias=True)


def decode_state(raw: str | bytes) -> SessionState:
    """
    Parse a persisted blob.

    Raises:
        PersistedStateCorrupt: invalid JSON, wrong field types, or no dayStamp
    """
    try:
        model = PersistedSession.model_validate_json(raw)
    except ValidationError as exc:
        raise PersistedStateCorrupt(str(exc)) from exc

    return SessionState(
        day_stamp=model.day_stamp,
        unknown_ids=list(model.unknown_ids),
        mastered_today=list(model.mastered_today),
        first_pass_queue=list(model.first_pass_queue),
        first_pass_done=model.first_pass_done,
        package_size=model.package_size or INITIAL_PACKAGE_SIZE,
        package_started=model.package_started,
        active_ids=list(model.active_ids),
        consecutive_correct=dict(model.consecutive_correct),
    )
