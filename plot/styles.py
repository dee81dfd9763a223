"""Стили и константы для графиков."""

# Шрифты
FONT_FAMILY = "Inter, -apple-system, system-ui, Arial, sans-serif"
FONT_SIZE = 14

# Цветовая палитра (линии данных - одинаковые для обеих тем)
COLORS_DATA = {
    "primary": "#1f77b4",      # синий
    "secondary": "#d62728",    # красный
    "reference": "#7f7f7f",    # серый
    "sample": "#ff7f0e",       # оранжевый
    "points": "#2ca02c",       # зелёный
    "bars": ["#8884d8", "#82ca9d", "#ffc658", "#ff7c7c", "#8dd1e1"],
}

# Светлая тема
COLORS_LIGHT = {
    **COLORS_DATA,
    "template": "plotly_white",
    "plot_bg": "white",
    "paper_bg": "white",
    "text": "black",
    "grid": "rgba(0,0,0,0.1)",
    "axis_line": "black",
    "legend_bg": "rgba(255,255,255,0.9)",
    "legend_border": "black",
    "annotation_bg": "rgba(255,255,255,0.8)",
}

# Тёмная тема (для Streamlit dark mode)
COLORS_DARK = {
    **COLORS_DATA,
    "template": "plotly_dark",
    "plot_bg": "rgba(14, 17, 23, 0)",
    "paper_bg": "rgba(14, 17, 23, 0)",
    "text": "#fafafa",
    "grid": "rgba(255,255,255,0.1)",
    "axis_line": "#fafafa",
    "legend_bg": "rgba(38, 39, 48, 0.9)",
    "legend_border": "#fafafa",
    "annotation_bg": "rgba(38, 39, 48, 0.8)",
}

# Толщина линий
LINE_WIDTH_BOLD = 3
LINE_WIDTH_THIN = 2

# Подписи графиков по испытаниям
LABELS = {
    "plasticity": {
        "title": "<b>Plasticity Chart (Casagrande)</b>",
        "x": "Liquid Limit <i>LL</i>, %",
        "y": "Plasticity Index <i>PI</i>, %",
        "series": "A-line",
    },
    "hydrometer": {
        "title": "<b>Sedimentation: Diameter vs. Percent Finer</b>",
        "x": "Grain diameter <i>D</i>, mm",
        "y": "Percent finer, %",
        "series": "Percent finer (approximation)",
        "x_log": True,
    },
    "compaction": {
        "title": "<b>Compaction Curve</b>",
        "x": "Water content <i>w</i>, %",
        "y": "Dry density <i>ρ<sub>d</sub></i>, g/cm³",
        "series": "Dry density",
    },
    "grain_size": {
        "title": "<b>Gradation Curve</b>",
        "x": "Sieve opening, mm",
        "y": "Percent passing, %",
        "series": "Percent passing",
        "x_log": True,
    },
    "permeability": {
        "title": "<b>Cumulative Discharge</b>",
        "x": "Time <i>t</i>, s",
        "y": "Discharge <i>Q</i>, cm³",
        "series": "Discharge",
    },
    "consolidation_time": {
        "title": "<b>Settlement vs. Time</b>",
        "x": "Time <i>t</i>, min",
        "y": "Settlement <i>ΔH</i>, mm",
        "series": "Settlement",
        "y_reversed": True,
    },
    "consolidation_pressure": {
        "title": "<b>e – log p Curve</b>",
        "x": "Pressure <i>p</i>, kPa",
        "y": "Void ratio <i>e</i>",
        "series": "Void ratio",
        "x_log": True,
    },
    "shear": {
        "title": "<b>Mohr-Coulomb Failure Envelope</b>",
        "x": "Normal stress <i>σ</i>, kPa",
        "y": "Shear stress <i>τ</i>, kPa",
        "series": "Failure envelope",
    },
    "specific_gravity": {
        "title": "<b>Specific Gravity Comparison</b>",
        "x": "Material",
        "y": "Specific gravity <i>G<sub>s</sub></i>",
        "series": "Specific gravity",
    },
}
