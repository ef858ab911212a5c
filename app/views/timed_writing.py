"""
Timed writing page rendering.

The countdown runs on a background thread; a fragment refreshes the timer
display every second and triggers a full rerun once the question state
changes (e.g. the timer forced a reveal).
"""

from __future__ import annotations

import streamlit as st

from app.ui import render_flashcard, render_rating_buttons
from app.ui.flashcard_style import PROMPT_STYLE, REVEALED_ANSWER_STYLE
from core.controller import StudyController
from core.modes import TimedWritingSession


@st.fragment(run_every=1)
def _render_countdown(session: TimedWritingSession, rendered_state: str, rendered_round: int) -> None:
    if session.state != rendered_state or session.question_round != rendered_round:
        st.rerun(scope="app")

    if session.state == "presenting":
        st.markdown(f"**Time left:** {session.remaining_seconds} seconds")
    elif session.revealed_by == "timeout":
        st.warning("⏰ Time's up! Rate your answer.")


def render_timed_writing_page(controller: StudyController) -> None:
    """
    Render the current timed-writing question.
    """
    session = controller.timed_writing

    if session.state in ("idle", "finished"):
        st.info(session.message)
        if session.state == "finished" and st.button("Start a new challenge", type="primary"):
            session.render()
            st.rerun()
        return

    entry = session.current
    key_suffix = str(session.question_round)
    st.caption(f"Question {session.cursor + 1} of {len(session.questions)}")
    _render_countdown(session, session.state, session.question_round)

    render_flashcard(main_text=entry.prompt, style=PROMPT_STYLE)

    response = st.text_area(
        "Your answer",
        key=f"timed_response_{key_suffix}",
        placeholder="Type your quick answer here...",
        disabled=session.input_locked,
    )

    if not session.answer_visible:
        if st.button("Compare and rate", key=f"submit_{key_suffix}", type="primary"):
            session.submit(response)
            st.rerun()
        return

    st.markdown("**Correct answer:**")
    render_flashcard(main_text=entry.answer, style=REVEALED_ANSWER_STYLE)
    st.markdown("<br>", unsafe_allow_html=True)

    rating = render_rating_buttons(key_suffix=key_suffix)
    if rating is not None:
        session.rate(rating)
        st.rerun()
