"""
Error types surfaced to the user interface.

None of these are fatal: each one maps to a message the UI shows while the
rest of the app keeps working.
"""

from __future__ import annotations


class StudyDeckError(Exception):
    """Base class for recoverable study deck errors."""


class LoadFailure(StudyDeckError):
    """
    A seed document could not be fetched or parsed.
    """

    def __init__(self, selector: str, location: str, reason: str):
        self.selector = selector
        self.location = location
        self.reason = reason
        super().__init__(f"Could not load dataset '{selector}' from {location}: {reason}")


class ValidationFailure(StudyDeckError):
    """A required item field was empty on add or edit."""


class InsufficientData(StudyDeckError):
    """
    Not enough items to build a mode's questions.
    """

    def __init__(self, required: int, available: int):
        self.required = required
        self.available = available
        super().__init__(
            f"At least {required} items are required to build a multiple-choice quiz "
            f"({available} available)."
        )
