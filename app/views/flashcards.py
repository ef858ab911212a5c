"""
Flashcards page rendering.
"""

from __future__ import annotations

import streamlit as st

from app.state import reset_widget_state
from app.ui import render_flashcard
from app.ui.flashcard_style import ANSWER_STYLE, PROMPT_STYLE
from core.controller import StudyController
from core.errors import ValidationFailure
from core.repository import RepositoryEntry

EDIT_KEY_PREFIX = "edit_"


def render_flashcards_page(controller: StudyController) -> None:
    """
    Render the sampled cards, each with flip/edit/delete controls.
    """
    session = controller.flashcards

    if session.message:
        st.info(session.message)
        return

    st.caption(f"Showing {len(session.cards)} of {len(controller.repository)} items.")

    for entry in list(session.cards):
        if entry.item_id not in controller.repository:
            continue
        with st.container(border=True):
            if session.is_editing(entry.item_id):
                _render_edit_form(controller, entry)
            else:
                _render_card(controller, entry)


def _render_card(controller: StudyController, entry: RepositoryEntry) -> None:
    session = controller.flashcards
    position = controller.repository.position_of(entry.item_id) + 1

    if session.is_flipped(entry.item_id):
        render_flashcard(main_text=entry.answer, corner_text=f"#{position}", style=ANSWER_STYLE)
    else:
        render_flashcard(main_text=entry.prompt, corner_text=f"#{position}", style=PROMPT_STYLE)

    if session.pending_delete_id == entry.item_id:
        st.warning(f"Are you sure you want to delete \"{entry.prompt}\"?")
        col1, col2 = st.columns(2)
        with col1:
            if st.button("Delete", key=f"confirm_delete_{entry.item_id}", type="primary", use_container_width=True):
                controller.confirm_delete()
                st.rerun()
        with col2:
            if st.button("Keep", key=f"cancel_delete_{entry.item_id}", use_container_width=True):
                session.cancel_delete()
                st.rerun()
        return

    col1, col2, col3 = st.columns(3)
    with col1:
        if st.button("Flip", key=f"flip_{entry.item_id}", use_container_width=True):
            session.toggle(entry.item_id)
            st.rerun()
    with col2:
        if st.button("Edit", key=f"start_edit_{entry.item_id}", use_container_width=True):
            # Only one card is editable; drop any other card's draft.
            reset_widget_state(EDIT_KEY_PREFIX)
            session.start_edit(entry.item_id)
            st.rerun()
    with col3:
        if st.button("Delete", key=f"delete_{entry.item_id}", use_container_width=True):
            session.request_delete(entry.item_id)
            st.rerun()


def _render_edit_form(controller: StudyController, entry: RepositoryEntry) -> None:
    position = controller.repository.position_of(entry.item_id) + 1
    st.markdown(f"#### Editing item {position}")

    prompt = st.text_area("Front", value=entry.prompt, key=f"{EDIT_KEY_PREFIX}prompt_{entry.item_id}")
    answer = st.text_area("Back", value=entry.answer, key=f"{EDIT_KEY_PREFIX}answer_{entry.item_id}")

    col1, col2 = st.columns(2)
    with col1:
        if st.button("Save", key=f"save_{entry.item_id}", type="primary", use_container_width=True):
            try:
                controller.save_edit(prompt, answer)
            except ValidationFailure as exc:
                st.error(str(exc))
                return
            reset_widget_state(EDIT_KEY_PREFIX)
            st.rerun()
    with col2:
        if st.button("Cancel", key=f"cancel_{entry.item_id}", use_container_width=True):
            controller.flashcards.cancel_edit()
            reset_widget_state(EDIT_KEY_PREFIX)
            st.rerun()
