"""Форма ввода данных испытания."""

import streamlit as st

from core.calculator import TESTS, calculate
from ui.state import reset_test, widget_key

# (подпись, подсказка) по полям входных моделей
FIELD_LABELS = {
    "liquid_limit": ("Liquid Limit (LL), %", "Water content at the liquid limit"),
    "plastic_limit": ("Plastic Limit (PL), %", "Water content at the plastic limit"),
    "soil_mass": ("Dry Soil Mass, g", None),
    "hydrometer_reading": ("Hydrometer Reading", "Reading on the g/L scale, e.g. 20"),
    "temperature": ("Temperature, °C", "Default 27 °C"),
    "elapsed_time": ("Elapsed Time, min", None),
    "wet_mass": ("Wet Soil Mass in Mold, g", None),
    "dry_mass": ("Dry Soil Mass, g", None),
    "mold_volume": ("Mold Volume, cm³", "Standard Proctor mold: 944 cm³"),
    "water_content": ("Water Content, %", None),
    "total_mass": ("Total Sample Mass, g", None),
    "sieve_4": ("Retained on 4.75 mm (No. 4), g", None),
    "sieve_10": ("Retained on 2.0 mm (No. 10), g", None),
    "sieve_40": ("Retained on 0.425 mm (No. 40), g", None),
    "sieve_200": ("Retained on 0.075 mm (No. 200), g", None),
    "head_difference": ("Head Difference (h), cm", None),
    "length": ("Sample Length (L), cm", None),
    "area": ("Cross-sectional Area (A), cm²", None),
    "discharge": ("Discharge Volume (Q), cm³", None),
    "time": ("Time (t), s", None),
    "initial_height": ("Initial Height (H₀), mm", None),
    "final_height": ("Final Height (Hf), mm", None),
    "initial_void_ratio": ("Initial Void Ratio (e₀)", None),
    "pressure": ("Applied Pressure (p), kPa", None),
    "time_90": ("Time for 90% Consolidation (t₉₀), min", None),
    "initial_pressure": ("Initial Pressure (p₀), kPa", None),
    "final_pressure": ("Final Pressure (pf), kPa", None),
    "compression_index": ("Compression Index (Cc)", None),
    "normal_stress_1": ("Normal Stress σ₁, kPa", None),
    "shear_stress_1": ("Shear Stress τ₁, kPa", None),
    "normal_stress_2": ("Normal Stress σ₂, kPa", None),
    "shear_stress_2": ("Shear Stress τ₂, kPa", None),
    "normal_stress_3": ("Normal Stress σ₃, kPa", None),
    "shear_stress_3": ("Shear Stress τ₃, kPa", None),
    "pycnometer_mass": ("Pycnometer Mass (Mp), g", None),
    "pycnometer_water_mass": ("Pycnometer + Water (Mpw), g", None),
    "pycnometer_soil_water_mass": ("Pycnometer + Soil + Water (Mpsw), g", None),
}


def render_test_form(test: str):
    """Поля ввода, кнопки «Calculate» / «Reset» и уведомление о результате."""

    lab_test = TESTS[test]
    st.subheader(lab_test.title)
    st.caption(f"Standard: {lab_test.standard}")

    form = st.session_state.forms[test]
    names = list(lab_test.input_model.model_fields)

    # Поля в две колонки
    cols = st.columns(2)
    for i, name in enumerate(names):
        label, help_text = FIELD_LABELS.get(name, (name, None))
        with cols[i % 2]:
            form[name] = st.text_input(
                label,
                value=form.get(name, ""),
                key=widget_key(test, name),
                help=help_text,
            )
    st.session_state.forms[test] = form

    col1, col2 = st.columns([3, 1])
    with col1:
        clicked = st.button("Calculate", type="primary", width="stretch", key=f"{test}__calculate")
    with col2:
        if st.button("Reset", width="stretch", key=f"{test}__reset"):
            reset_test(test)
            st.rerun()

    if clicked:
        outcome = calculate(test, form)
        st.session_state.outcomes[test] = outcome

    outcome = st.session_state.outcomes.get(test)
    if outcome is None:
        return
    if outcome.ok:
        if clicked:
            st.toast(outcome.result.summary, icon="✅")
    else:
        st.error(f"**{outcome.error.title}**: {outcome.error.message}")
        fields = getattr(outcome.error, "fields", None)
        if fields:
            st.caption("Check: " + ", ".join(FIELD_LABELS.get(f, (f, None))[0] for f in fields))
