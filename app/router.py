"""
Simple page router for the study tabs.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from app.views.add_item import render_add_item_page
from app.views.flashcards import render_flashcards_page
from app.views.multiple_choice import render_multiple_choice_page
from app.views.timed_writing import render_timed_writing_page
from app.views.true_false import render_true_false_page
from core.controller import StudyController


@dataclass(frozen=True)
class AppPage:
    title: str
    mode: Optional[str]  # Study mode redrawn when the tab is activated
    render: Callable[[StudyController], None]


PAGES = [
    AppPage(title="🃏 Flashcards", mode="flashcards", render=render_flashcards_page),
    AppPage(title="📝 Multiple choice", mode="multiple_choice", render=render_multiple_choice_page),
    AppPage(title="✔️ True/False", mode="true_false", render=render_true_false_page),
    AppPage(title="⏱️ Timed writing", mode="timed_writing", render=render_timed_writing_page),
    AppPage(title="➕ Add item", mode=None, render=render_add_item_page),
]

PAGES_BY_TITLE = {page.title: page for page in PAGES}
