"""
Rating Button UI

Renders the self-assessment buttons shown after a timed-writing reveal.
"""

from __future__ import annotations

from typing import Optional

import streamlit as st

from core.schemas import DifficultyRating


RATING_BUTTONS = [
    (DifficultyRating.EASY, "✨ Easy (got it)", "primary"),
    (DifficultyRating.MEDIUM, "😰 Medium (hesitated)", "secondary"),
    (DifficultyRating.HARD, "❌ Hard (missed it)", "secondary"),
]


def render_rating_buttons(key_suffix: str) -> Optional[DifficultyRating]:
    """
    Render difficulty rating buttons.

    Args:
        key_suffix: Unique suffix so each question gets fresh widgets

    Returns:
        DifficultyRating selected by user, or None if no button clicked
    """
    st.markdown("**How would you rate your answer?**")

    selected = None
    columns = st.columns(len(RATING_BUTTONS))
    for column, (rating, label, button_type) in zip(columns, RATING_BUTTONS):
        with column:
            if st.button(label, key=f"rate_{rating.value}_{key_suffix}", type=button_type, use_container_width=True):
                selected = rating
    return selected
