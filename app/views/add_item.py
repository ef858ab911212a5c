"""
Add item page rendering.
"""

from __future__ import annotations

import streamlit as st

from core.controller import StudyController
from core.errors import ValidationFailure


def render_add_item_page(controller: StudyController) -> None:
    """
    Render the new item form and dataset maintenance controls.
    """
    st.markdown(f"### Add to {controller.selector.label}")

    with st.form("add_item", clear_on_submit=True):
        prompt = st.text_area("Question (front)")
        answer = st.text_area("Answer (back)")
        submitted = st.form_submit_button("Add item", type="primary")

    if submitted:
        try:
            controller.add_item(prompt, answer)
        except ValidationFailure:
            st.error("Please fill in both the question and the answer.")
        else:
            st.rerun()

    st.caption(f"{len(controller.repository)} items in this dataset.")

    with st.expander("Dataset maintenance"):
        st.markdown(
            "Discard local edits and reload this dataset from "
            f"`{controller.loader.location_for(controller.selector)}`."
        )
        if st.button("Restore seed data", key="reset_dataset"):
            controller.reset_dataset()
            st.rerun()
