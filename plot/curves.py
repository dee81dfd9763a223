"""Кривые и столбцы по точкам результата."""

import plotly.graph_objects as go

from core.models import ChartPoint
from .styles import LINE_WIDTH_BOLD


def plot_series(plotter, points: list[ChartPoint], name: str | None = None, color: str | None = None,
                markers: bool = True, dash: str | None = None):
    """Отрисовка линии по точкам графика."""
    if not points:
        return

    plotter.fig.add_trace(go.Scatter(
        x=[p.x for p in points],
        y=[p.y for p in points],
        mode="lines+markers" if markers else "lines",
        name=name or plotter.labels["series"],
        text=[p.label or "" for p in points],
        line=dict(color=color or plotter.colors["primary"], width=LINE_WIDTH_BOLD, dash=dash),
        hovertemplate="x = %{x:.4g}<br>y = %{y:.4g}<br>%{text}<extra></extra>",
    ))


def plot_bars(plotter, points: list[ChartPoint], highlight: str | None = None):
    """Столбчатая диаграмма (подписи категорий — label точек)."""
    if not points:
        return

    palette = plotter.colors["bars"]
    colors = [
        plotter.colors["sample"] if p.label == highlight else palette[i % len(palette)]
        for i, p in enumerate(points)
    ]
    plotter.fig.add_trace(go.Bar(
        x=[p.label for p in points],
        y=[p.y for p in points],
        marker_color=colors,
        name=plotter.labels["series"],
        text=[f"{p.y:.2f}" for p in points],
        textposition="outside",
    ))
