"""Аннотации: точки проб и испытаний, опорные линии."""

import plotly.graph_objects as go

from core.models import ChartPoint
from .styles import FONT_SIZE


def add_points(plotter, points: list[ChartPoint], name: str, color: str | None = None):
    """Маркеры точек испытаний с подписями."""
    if not points:
        return

    plotter.fig.add_trace(go.Scatter(
        x=[p.x for p in points],
        y=[p.y for p in points],
        mode="markers+text",
        name=name,
        text=[p.label or "" for p in points],
        textposition="top center",
        marker=dict(size=11, color=color or plotter.colors["points"],
                    line=dict(width=1, color=plotter.colors["text"])),
    ))


def add_reference_line(plotter, y: float, text: str, color: str | None = None):
    """Горизонтальная опорная линия с подписью."""
    color = color or plotter.colors["reference"]
    plotter.fig.add_hline(y=y, line_width=1.5, line_dash="dash", line_color=color)
    plotter.fig.add_annotation(
        x=1.0, y=y, xref="paper", yref="y",
        text=f"<b>{text}</b>", showarrow=False,
        xanchor="right", yanchor="bottom",
        font=dict(color=color, size=FONT_SIZE - 2),
        bgcolor=plotter.colors["annotation_bg"],
    )
