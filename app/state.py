"""
Streamlit session state and store initialization helpers.
"""

from __future__ import annotations

import streamlit as st

from core import config, storage
from core.controller import StudyController


@st.cache_resource
def get_store() -> storage.KeyValueStore:
    """
    Shared key-value store (created once per server process).
    """
    return storage.KeyValueStore(storage.get_engine())


def ensure_session_state() -> StudyController:
    """
    Populate Streamlit session_state with defaults.

    Returns:
        The controller for this browser session
    """
    if "controller" not in st.session_state:
        controller = StudyController(get_store(), default_selector=config.get_default_dataset())
        with st.spinner("Loading study data..."):
            controller.init()
        st.session_state.controller = controller
    if "active_tab" not in st.session_state:
        st.session_state.active_tab = None
    return st.session_state.controller


def show_page(title: str) -> None:
    """
    Select a tab on the next rerun.

    Must run before the tab selector is drawn in the current script run.
    """
    st.session_state.tab_choice = title
    st.session_state.active_tab = None


def reset_widget_state(prefix: str) -> None:
    """Drop widget values whose keys start with prefix."""
    for key in [k for k in st.session_state.keys() if str(k).startswith(prefix)]:
        st.session_state.pop(key, None)
