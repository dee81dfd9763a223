"""Управление состоянием Streamlit приложения."""

import streamlit as st

from core.calculator import TESTS
from ui.utils import format_value


def default_form(test: str) -> dict:
    """Значения формы испытания по умолчанию (строки, как в полях ввода)."""
    model = TESTS[test].input_model
    form = {}
    for name, field in model.model_fields.items():
        form[name] = "" if field.is_required() else format_value(field.default)
    return form


def init_state(plot_theme: str = "light"):
    """Инициализация session_state значениями по умолчанию."""

    defaults = {
        # Раздел приложения
        "page": "tests",

        # Тема графиков
        "plot_theme": plot_theme,

        # Значения форм по испытаниям
        "forms": {key: default_form(key) for key in TESTS},

        # Результаты расчёта по испытаниям (CalculationOutcome)
        "outcomes": {},

        # Режим консолидации: "consolidation_time" | "consolidation_pressure"
        "consolidation_mode": "consolidation_time",

        # Отзыв при уходе уже отправлен
        "exit_feedback_sent": False,
    }

    for key, value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = value


def widget_key(test: str, field: str) -> str:
    return f"{test}__{field}"


def load_form(test: str, form: dict):
    """Подставить значения формы (импорт, сброс) и обновить поля ввода."""
    st.session_state.forms[test] = form
    for name in form:
        st.session_state.pop(widget_key(test, name), None)


def reset_test(test: str):
    """Сбросить форму и результат испытания."""
    load_form(test, default_form(test))
    st.session_state.outcomes.pop(test, None)
