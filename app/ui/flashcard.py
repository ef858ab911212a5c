"""
Flashcard UI Component

Renders a card face with flexible styling.
"""

from __future__ import annotations

import html

import streamlit as st
from app.ui.flashcard_style import (
    CARD_MIN_HEIGHT,
    CARD_PADDING,
    DEFAULT_FLASHCARD_STYLE,
    FlashcardStyle,
)


def render_flashcard(
    main_text: str,
    corner_text: str = "",
    style: FlashcardStyle | None = None,
) -> None:
    """
    Render a card face.

    Args:
        main_text: Primary text (center); escaped before rendering
        corner_text: Optional text in top-right corner
        style: Optional style preset
    """
    resolved_style = style or DEFAULT_FLASHCARD_STYLE

    corner_html = ""
    if corner_text:
        corner_html = (
            f'<div style="position: absolute; top: 10px; right: 16px; '
            f'font-size: {resolved_style.corner_font_size}; color: {resolved_style.corner_color}; '
            f'font-style: {resolved_style.corner_style};">{html.escape(corner_text)}</div>'
        )

    main_html = (
        f'<p style="font-size: {resolved_style.main_font_size}; color: {resolved_style.main_color}; '
        f'font-weight: {resolved_style.main_weight}; margin: 0; white-space: pre-wrap; '
        'text-align: center; line-height: 1.4; max-width: 100%; '
        'overflow-wrap: anywhere; word-break: break-word;">'
        f"{html.escape(main_text)}</p>"
    )

    card_html = (
        f'<div style="background-color: {resolved_style.bg_color}; padding: {CARD_PADDING}; '
        'border-radius: 15px; text-align: center; box-shadow: 0 4px 6px '
        f'rgba(0, 0, 0, 0.1); min-height: {CARD_MIN_HEIGHT}; display: flex; '
        'flex-direction: column; align-items: center; justify-content: center; '
        f'position: relative;">{corner_html}{main_html}</div>'
    )

    st.markdown(card_html, unsafe_allow_html=True)
