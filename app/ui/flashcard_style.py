"""
Flashcard style presets and constants.
"""

from __future__ import annotations

from dataclasses import dataclass


# ---- Shared Card Layout ----

CARD_PADDING = "35px 24px"
CARD_MIN_HEIGHT = "210px"
FRONT_BG_COLOR = "#f0f2f6"
BACK_BG_COLOR = "#e8f4f8"
DONE_BG_COLOR = "#e9f7ef"


# ---- Shared Typography Defaults ----

DEFAULT_MAIN_FONT_SIZE = "3em"
DEFAULT_MAIN_COLOR = "#1f1f1f"
DEFAULT_SUBTITLE_FONT_SIZE = "1.4em"
DEFAULT_SUBTITLE_COLOR = "#444"
DEFAULT_CORNER_FONT_SIZE = "0.9em"
DEFAULT_CORNER_COLOR = "#666"


@dataclass(frozen=True)
class FlashcardStyle:
    """
    Visual style preset for flashcards.
    """
    main_font_size: str = DEFAULT_MAIN_FONT_SIZE
    main_color: str = DEFAULT_MAIN_COLOR
    subtitle_font_size: str = DEFAULT_SUBTITLE_FONT_SIZE
    subtitle_color: str = DEFAULT_SUBTITLE_COLOR
    corner_font_size: str = DEFAULT_CORNER_FONT_SIZE
    corner_color: str = DEFAULT_CORNER_COLOR
    bg_color: str = FRONT_BG_COLOR


# ---- Presets ----

PROMPT_STYLE = FlashcardStyle(
    main_font_size="3.2em",
)

ANSWER_STYLE = FlashcardStyle(
    bg_color=BACK_BG_COLOR,
)

COMPLETE_STYLE = FlashcardStyle(
    main_font_size="1.8em",
    subtitle_font_size="1.0em",
    bg_color=DONE_BG_COLOR,
)
