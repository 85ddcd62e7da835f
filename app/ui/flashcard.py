"""
Flashcard UI Component

Renders the prompt card, with the translation underneath once revealed.
"""

from __future__ import annotations

from html import escape

import streamlit as st
from app.ui.flashcard_style import (
    CARD_MIN_HEIGHT,
    CARD_PADDING,
    FlashcardStyle,
    PROMPT_STYLE,
)


def build_flashcard_html(
    main_text: str,
    subtitle: str = "",
    corner_text: str = "",
    style: FlashcardStyle = PROMPT_STYLE,
) -> str:
    """
    Build the card HTML.

    Text is escaped and rendered with dir="auto" so right-to-left prompts
    (e.g. Hebrew) lay out correctly.
    """
    corner_html = ""
    if corner_text:
        corner_html = (
            f'<div style="position: absolute; top: 15px; right: 20px; '
            f'font-size: {style.corner_font_size}; color: {style.corner_color}; '
            f'font-style: italic;">{escape(corner_text)}</div>'
        )

    main_html = (
        f'<h1 dir="auto" style="font-size: {style.main_font_size}; color: {style.main_color}; '
        'font-weight: normal; margin: 0; text-align: center; line-height: 1.4; '
        'max-width: 100%; overflow-wrap: anywhere;">'
        f"{escape(main_text)}</h1>"
    )

    subtitle_html = ""
    if subtitle:
        subtitle_html = (
            f'<p dir="auto" style="font-size: {style.subtitle_font_size}; '
            f'color: {style.subtitle_color}; margin: 15px 0 0 0; text-align: center; '
            f'line-height: 1.4; overflow-wrap: anywhere;">{escape(subtitle)}</p>'
        )

    return (
        f'<div style="background-color: {style.bg_color}; padding: {CARD_PADDING}; '
        'border-radius: 15px; text-align: center; box-shadow: 0 4px 6px '
        f'rgba(0, 0, 0, 0.1); min-height: {CARD_MIN_HEIGHT}; display: flex; '
        'flex-direction: column; align-items: center; justify-content: center; '
        f'position: relative;">{corner_html}{main_html}{subtitle_html}</div>'
    )


def render_flashcard(
    main_text: str,
    subtitle: str = "",
    corner_text: str = "",
    style: FlashcardStyle = PROMPT_STYLE,
) -> None:
    """
    Render a flashcard.

    Args:
        main_text: Primary text (center, large)
        subtitle: Optional secondary text (below main)
        corner_text: Optional text in top-right corner
        style: Style preset
    """
    st.markdown(
        build_flashcard_html(main_text, subtitle, corner_text, style),
        unsafe_allow_html=True,
    )
