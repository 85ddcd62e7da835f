"""
Pydantic models for the word catalog and the persisted drill session.

The persisted model uses camelCase keys, matching blobs exported from the
web app's localStorage slot.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator


def _coerce_id(value: Any) -> Any:
    # Catalog files written by hand often use numeric ids
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


# ---- Catalog ----

class WordRecord(BaseModel):
    """A single word/translation pair. Immutable for the run."""
    id: str = Field(..., min_length=1, description="Stable identifier across runs")
    text: str = Field(..., alias="hebrew", description="Prompt shown on the card front")
    translation: str = Field(..., description="Answer shown on reveal")

    class Config:
        frozen = True
        populate_by_name = True

    @field_validator("id", mode="before")
    @classmethod
    def _id_to_str(cls, value: Any) -> Any:
        return _coerce_id(value)


# ---- Persisted Session ----

class PersistedSession(BaseModel):
    """
    Wire shape of a saved SessionState.

    Only ``dayStamp`` is required; anything else missing falls back to the
    value a fresh session would have.
    """
    day_stamp: str = Field(..., alias="dayStamp")
    unknown_ids: list[str] = Field(default_factory=list, alias="unknownIds")
    mastered_today: list[str] = Field(default_factory=list, alias="masteredToday")
    first_pass_queue: list[str] = Field(default_factory=list, alias="firstPassQueue")
    first_pass_done: bool = Field(default=False, alias="firstPassDone")
    package_size: Optional[int] = Field(default=None, alias="packageSize")
    package_started: bool = Field(default=False, alias="packageStarted")
    active_ids: list[str] = Field(default_factory=list, alias="activeIds")
    consecutive_correct: dict[str, int] = Field(default_factory=dict, alias="consecutiveCorrect")

    class Config:
        populate_by_name = True

    @field_validator(
        "unknown_ids",
        "mastered_today",
        "first_pass_queue",
        "active_ids",
        mode="before",
    )
    @classmethod
    def _id_lists(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, list):
            return [_coerce_id(item) for item in value]
        return value

    @field_validator("consecutive_correct", mode="before")
    @classmethod
    def _counters(cls, value: Any) -> Any:
        if value is None:
            return {}
        return value
