"""Формы отзывов: обычный отзыв и отзыв при уходе."""

import logging

import streamlit as st

from core.errors import InvalidInput
from core.feedback import build_feedback, exit_feedback
from store import FeedbackStore, StoreError

logger = logging.getLogger(__name__)


def render_feedback_form(store: FeedbackStore | None):
    """Форма «Share your feedback»."""

    st.subheader("Share Your Feedback")

    with st.form("feedback_form", clear_on_submit=True):
        name = st.text_input("Name *")
        email = st.text_input("Email (optional)")
        rating = st.radio(
            "Rating",
            options=[0, 1, 2, 3, 4, 5],
            format_func=lambda x: "No rating" if x == 0 else "★" * x,
            horizontal=True,
        )
        text = st.text_area("Your feedback *")
        submitted = st.form_submit_button("Submit Feedback", type="primary")

    if not submitted:
        return

    try:
        feedback = build_feedback({
            "name": name,
            "email": email,
            "rating": rating,
            "feedback_text": text,
            "feedback_type": "regular",
        })
    except InvalidInput as e:
        st.error(f"**{e.title}**: {e.message}")
        return

    if store is None:
        st.error("Failed to submit feedback. Please try again.")
        return

    try:
        store.insert(feedback)
    except StoreError:
        st.error("Failed to submit feedback. Please try again.")
        return
    st.success("Thank you for your feedback!")


def render_exit_feedback(store: FeedbackStore | None):
    """«Before you go…» — оценка одним нажатием."""

    if st.session_state.get("exit_feedback_sent"):
        st.caption("Thanks for letting us know!")
        return

    st.markdown("**Before you go…** Did you find this calculator helpful?")
    col1, col2, _ = st.columns([1, 1, 6])
    liked = None
    with col1:
        if st.button("👍", key="exit_like"):
            liked = True
    with col2:
        if st.button("👎", key="exit_dislike"):
            liked = False

    if liked is None:
        return

    st.session_state.exit_feedback_sent = True
    if store is None:
        return
    try:
        store.insert(exit_feedback(liked))
    except StoreError:
        # Ошибка уже записана в лог хранилищем; пользователя не прерываем
        logger.warning("exit feedback was not saved")
    st.rerun()
