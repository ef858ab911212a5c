"""
Pydantic models and enums for study items.

Items are stored and seeded as JSON arrays of {prompt, answer} records.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class DatasetSelector(str, Enum):
    """Named datasets; each one has its own store namespace."""
    GENERAL = "general"
    DAILY = "daily"

    @property
    def label(self) -> str:
        return DATASET_LABELS[self]

    def other(self) -> "DatasetSelector":
        """The dataset a switch moves to."""
        if self is DatasetSelector.GENERAL:
            return DatasetSelector.DAILY
        return DatasetSelector.GENERAL


DATASET_LABELS = {
    DatasetSelector.GENERAL: "GENERAL STUDY",
    DatasetSelector.DAILY: "WEEKLY STUDY",
}


class DifficultyRating(str, Enum):
    """Self-reported difficulty after a timed-writing answer."""
    EASY = "easy"       # Got it right
    MEDIUM = "medium"   # Hesitated
    HARD = "hard"       # Got it wrong


class QuestionMark(str, Enum):
    """Per-question outcome after a quiz is checked."""
    CORRECT = "correct"
    INCORRECT = "incorrect"
    UNANSWERED = "unanswered"


# ---- Items ----

class Item(BaseModel):
    """A single question/answer pair."""
    model_config = ConfigDict(frozen=True)

    prompt: str = Field(..., description="Question shown on the card front")
    answer: str = Field(..., description="Expected answer shown on the card back")


ItemList = TypeAdapter(list[Item])


def parse_items(raw: str | bytes) -> list[Item]:
    """
    Parse a JSON array of {prompt, answer} records.

    Raises:
        pydantic.ValidationError: if the document is not a valid item array
    """
    return ItemList.validate_json(raw)


def dump_items(items: list[Item]) -> str:
    """Serialize items back to a JSON array."""
    return ItemList.dump_json(list(items)).decode("utf-8")
