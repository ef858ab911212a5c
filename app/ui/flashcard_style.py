"""
Flashcard style presets and constants.
"""

from __future__ import annotations

from dataclasses import dataclass


# ---- Shared Card Layout ----

CARD_PADDING = "28px 22px"
CARD_MIN_HEIGHT = "170px"
FRONT_BG_COLOR = "#f0f2f6"
BACK_BG_COLOR = "#e8f4f8"
ANSWER_BG_COLOR = "#fffaf0"


# ---- Shared Typography Defaults ----

DEFAULT_MAIN_FONT_SIZE = "1.6em"
DEFAULT_MAIN_COLOR = "#1f1f1f"
DEFAULT_MAIN_WEIGHT = "normal"
DEFAULT_CORNER_FONT_SIZE = "0.85em"
DEFAULT_CORNER_COLOR = "#666"
DEFAULT_CORNER_STYLE = "italic"


@dataclass(frozen=True)
class FlashcardStyle:
    """
    Visual style preset for flashcards.
    """
    main_font_size: str = DEFAULT_MAIN_FONT_SIZE
    main_color: str = DEFAULT_MAIN_COLOR
    main_weight: str = DEFAULT_MAIN_WEIGHT
    corner_font_size: str = DEFAULT_CORNER_FONT_SIZE
    corner_color: str = DEFAULT_CORNER_COLOR
    corner_style: str = DEFAULT_CORNER_STYLE
    bg_color: str = FRONT_BG_COLOR


DEFAULT_FLASHCARD_STYLE = FlashcardStyle()


# ---- Mode Presets ----

PROMPT_STYLE = FlashcardStyle(
    main_weight="bold",
    bg_color=FRONT_BG_COLOR,
)

ANSWER_STYLE = FlashcardStyle(
    main_font_size="1.4em",
    bg_color=BACK_BG_COLOR,
)

REVEALED_ANSWER_STYLE = FlashcardStyle(
    main_font_size="1.2em",
    main_color="#4682B4",
    bg_color=ANSWER_BG_COLOR,
)


# ---- Quiz Marks ----

MARK_COLORS = {
    "correct": "#DFF2BF",
    "incorrect": "#FFCCCC",
    "unanswered": "#FFFACD",
}
