"""
Study Deck - Main App

Streamlit UI for flashcards, quizzes and timed writing over a local item
collection.
"""

import streamlit as st

from app.router import PAGES, PAGES_BY_TITLE
from app.state import ensure_session_state, show_page
from core import config
from core.controller import StudyController


# ---- Page Setup ----

st.set_page_config(
    page_title="Study Deck",
    page_icon="📚",
    layout="centered"
)

config.configure_logging()


# ---- UI Rendering ----

def render_notices(controller: StudyController) -> None:
    """Show messages queued by the last action."""
    for notice in controller.drain_notices():
        if notice.level == "error":
            st.error(notice.text)
        elif notice.level == "success":
            st.success(notice.text)
        else:
            st.info(notice.text)


def render_dataset_switch(controller: StudyController) -> None:
    """Render the dataset toggle button."""
    target = controller.selector.other()
    if st.button(f"Switch to: {target.label}", key="dataset_switch", use_container_width=True):
        with st.spinner(f"Loading {target.label}..."):
            controller.switch_dataset()
        show_page(PAGES[0].title)
        st.rerun()


def render_load_error(controller: StudyController) -> None:
    """Blocking screen shown when the active dataset could not be loaded."""
    location = controller.loader.location_for(controller.selector)
    st.title("Load error")
    st.error(
        f"Could not load the **{controller.selector.label}** dataset. "
        f"Check that `{location}` exists and contains a JSON array of items."
    )


def render_tabs(controller: StudyController) -> None:
    """Render the tab selector and the active page."""
    titles = [page.title for page in PAGES]
    selected_title = st.radio(
        "Mode",
        titles,
        horizontal=True,
        key="tab_choice",
        label_visibility="collapsed",
    )
    page = PAGES_BY_TITLE[selected_title]

    # Re-sample only when the tab changes, not on every rerun.
    if st.session_state.active_tab != page.title:
        st.session_state.active_tab = page.title
        if page.mode is not None:
            controller.activate(page.mode)

    st.divider()
    page.render(controller)


# ---- Main App ----

def main():
    """Main app entry point."""
    controller = ensure_session_state()

    st.markdown("<style>.stApp h1 { font-size: 1.6rem; }</style>", unsafe_allow_html=True)
    st.title(f"📚 {controller.selector.label}")
    if config.is_test_mode():
        st.warning("⚠️ **TEST MODE** - Using the test store (set TEST_MODE=false in .env for production)")

    render_dataset_switch(controller)

    if controller.load_failed:
        render_load_error(controller)
        render_notices(controller)
        return

    render_notices(controller)
    render_tabs(controller)


if __name__ == "__main__":
    main()
