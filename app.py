"""Streamlit приложение: калькулятор лабораторных испытаний грунтов."""

import logging

import streamlit as st
from sqlalchemy.exc import SQLAlchemyError

from core.calculator import TESTS
from core.config import configure_logging, load_settings
from store import FeedbackStore
from ui.components.dashboard import render_dashboard
from ui.components.feedback_form import render_exit_feedback, render_feedback_form
from ui.components.results_view import render_results
from ui.components.calculator_form import render_test_form
from ui.state import init_state, load_form
from ui.utils import export_toml, import_toml

logger = logging.getLogger(__name__)

# Вкладки: (подпись, ключ испытания; None — консолидация с выбором режима)
TABS = (
    ("Plasticity", "plasticity"),
    ("Hydrometer", "hydrometer"),
    ("Compaction", "compaction"),
    ("Grain Size", "grain_size"),
    ("Permeability", "permeability"),
    ("Consolidation", None),
    ("Shear Strength", "shear"),
    ("Specific Gravity", "specific_gravity"),
)


@st.cache_resource
def get_settings():
    settings = load_settings()
    configure_logging(settings)
    return settings


@st.cache_resource
def get_store(database_url: str):
    """Хранилище отзывов; None, если база недоступна."""
    try:
        return FeedbackStore.from_url(database_url)
    except SQLAlchemyError:
        logger.exception("feedback store unavailable: %s", database_url)
        return None


def render_sidebar():
    """Боковая панель с настройками."""

    st.header("Soil Lab")

    page = st.radio(
        "Section",
        options=["tests", "dashboard"],
        format_func=lambda x: "🧪 Soil Tests" if x == "tests" else "📊 Feedback Dashboard",
        index=0 if st.session_state.page == "tests" else 1,
    )
    st.session_state.page = page

    st.divider()

    # Тема графиков
    st.subheader("Chart Theme")

    plot_theme = st.radio(
        "Select theme",
        options=["light", "dark"],
        format_func=lambda x: "☀️ Light" if x == "light" else "🌙 Dark",
        index=0 if st.session_state.plot_theme == "light" else 1,
        help="Dark suits the screen, light suits printing and reports",
    )
    st.session_state.plot_theme = plot_theme

    st.divider()

    # Импорт/Экспорт
    st.subheader("Import / Export")

    uploaded_file = st.file_uploader(
        "Import TOML",
        type=["toml"],
        help="Load test inputs from a file",
    )

    if uploaded_file is not None:
        # Проверяем, что файл не был уже загружен
        file_id = uploaded_file.file_id
        if st.session_state.get("last_uploaded_file_id") != file_id:
            st.session_state.last_uploaded_file_id = file_id
            try:
                test, form = import_toml(uploaded_file.read())
            except ValueError as e:
                # tomllib.TOMLDecodeError — подкласс ValueError
                st.error(f"❌ Failed to import TOML: {e}")
            else:
                load_form(test, form)
                st.session_state.outcomes.pop(test, None)
                if test.startswith("consolidation"):
                    st.session_state.consolidation_mode = test
                st.success(f"✅ Inputs loaded: {TESTS[test].title}")
                st.rerun()

    test = st.selectbox(
        "Export inputs of",
        options=list(TESTS),
        format_func=lambda k: TESTS[k].title,
    )
    st.download_button(
        "📥 Export TOML",
        data=export_toml(test, st.session_state.forms[test]),
        file_name=f"{test}.toml",
        mime="text/plain",
    )


def render_consolidation():
    """Консолидация: два режима расчёта."""

    mode = st.radio(
        "Mode",
        options=["consolidation_time", "consolidation_pressure"],
        format_func=lambda x: "Time Rate" if x == "consolidation_time" else "Pressure Increment",
        index=0 if st.session_state.consolidation_mode == "consolidation_time" else 1,
        horizontal=True,
    )
    st.session_state.consolidation_mode = mode
    render_test_form(mode)
    render_results(mode)


def render_tests(store):
    st.title("Soil Testing Calculator")
    st.caption("Laboratory soil tests per IS 2720 / ASTM")

    tabs = st.tabs([label for label, _ in TABS])
    for tab, (_, test) in zip(tabs, TABS):
        with tab:
            if test is None:
                render_consolidation()
            else:
                render_test_form(test)
                render_results(test)

    st.divider()
    render_feedback_form(store)
    st.divider()
    render_exit_feedback(store)


def main():
    st.set_page_config(
        page_title="Soil Testing Calculator",
        page_icon="🧪",
        layout="wide"
    )

    settings = get_settings()
    init_state(plot_theme=settings.plot_theme)
    store = get_store(settings.database_url)

    # Sidebar
    with st.sidebar:
        render_sidebar()

    if st.session_state.page == "dashboard":
        render_dashboard(store, page_size=settings.dashboard_page_size)
    else:
        render_tests(store)


if __name__ == "__main__":
    main()
