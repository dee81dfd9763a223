"""Панель отзывов: статистика, фильтры, таблица, экспорт CSV."""

import pandas as pd
import streamlit as st

from core.feedback import export_csv, export_filename, feedback_stats, filter_feedback
from store import FeedbackStore, StoreError


def render_dashboard(store: FeedbackStore | None, page_size: int = 50):
    """Панель отзывов."""

    st.title("Feedback Dashboard")

    if store is None:
        st.error("Failed to load feedback data.")
        return
    try:
        items = store.query()
    except StoreError:
        st.error("Failed to load feedback data.")
        return

    # Статистика
    stats = feedback_stats(items)
    cols = st.columns(6)
    cols[0].metric("Total", stats.total)
    cols[1].metric("Regular", stats.regular)
    cols[2].metric("Exit", stats.exit)
    cols[3].metric("Avg. Rating", f"{stats.avg_rating:.1f}")
    cols[4].metric("👍 Liked", stats.liked)
    cols[5].metric("👎 Disliked", stats.disliked)

    st.divider()

    # Фильтры
    col1, col2, col3 = st.columns([2, 1, 1])
    with col1:
        search = st.text_input("Search feedback or name")
    with col2:
        feedback_type = st.selectbox("Type", options=["all", "regular", "exit"])
    with col3:
        rating = st.selectbox(
            "Rating",
            options=["all", "no-rating", "1", "2", "3", "4", "5"],
            format_func=lambda x: {"all": "All", "no-rating": "No rating"}.get(x, f"{x} ★"),
        )

    filtered = filter_feedback(items, search, feedback_type, rating)

    st.download_button(
        "📥 Export CSV",
        data=export_csv(filtered),
        file_name=export_filename(),
        mime="text/csv",
        disabled=not filtered,
    )

    if not filtered:
        st.info("No feedback matches the current filters.")
        return

    shown = filtered[:page_size]
    df = pd.DataFrame([
        {
            "Date": f.created_at.strftime("%Y-%m-%d %H:%M"),
            "Name": f.name or "",
            "Email": f.email or "",
            "Type": f.feedback_type,
            "Rating": "★" * f.rating if f.rating else "",
            "Liked": {True: "👍", False: "👎"}.get(f.liked, ""),
            "Feedback": f.feedback_text,
        }
        for f in shown
    ])
    st.dataframe(df, width="stretch", hide_index=True)
    if len(filtered) > page_size:
        st.caption(f"Showing {page_size} of {len(filtered)} entries. Export CSV for the full list.")
