"""Отображение результатов испытания."""

import pandas as pd
import streamlit as st

from plot import build_figure


def render_results(test: str):
    """Метрики, таблица результатов и график."""

    outcome = st.session_state.outcomes.get(test)
    if outcome is None or not outcome.ok:
        return

    result = outcome.result

    st.divider()
    st.subheader("Results")
    st.success(result.summary)

    # Основные значения — метриками, по три в ряд
    rows = result.rows()
    for start in range(0, len(rows), 3):
        cols = st.columns(3)
        for col, (label, value) in zip(cols, rows[start:start + 3]):
            col.metric(label, value)

    formula = getattr(result, "formula", None)
    if formula:
        st.markdown(f"**Formula:** `{formula}`")
        substitution = getattr(result, "substitution", None)
        if substitution:
            st.caption(substitution)

    # График
    theme = st.session_state.get("plot_theme", "light")
    fig = build_figure(test, result, theme)
    st.plotly_chart(
        fig,
        width="stretch",
        config={
            "displaylogo": False,
            "toImageButtonOptions": {
                "format": "png",
                "scale": 2,
                "filename": test,
            },
        },
        key=f"{test}__chart",
    )

    # Таблица точек графика
    with st.expander("Chart data"):
        df = pd.DataFrame([
            {"x": p.x, "y": p.y, "label": p.label or ""}
            for p in result.chart
        ])
        st.dataframe(df, width="stretch", hide_index=True)
