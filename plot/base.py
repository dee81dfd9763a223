"""Базовый класс для построения графиков."""

import plotly.graph_objects as go

from .styles import COLORS_DARK, COLORS_LIGHT, FONT_FAMILY, FONT_SIZE, LABELS


class BasePlotter:
    """Базовый класс с настройкой layout и осей."""

    def __init__(self, test: str, theme: str = "light"):
        self.test = test
        self.theme = theme
        self.colors = COLORS_DARK if theme == "dark" else COLORS_LIGHT
        self.labels = LABELS[test]
        self.fig = go.Figure()
        self._setup_layout()

    def _setup_layout(self):
        """Базовые настройки макета."""
        self.fig.update_layout(
            title=dict(text=self.labels["title"], x=0.5, xanchor="center",
                       font=dict(size=FONT_SIZE + 2, color=self.colors["text"])),
            font=dict(family=FONT_FAMILY, size=FONT_SIZE, color=self.colors["text"]),
            template=self.colors["template"],
            height=480,
            margin=dict(l=70, r=30, t=70, b=90),
            showlegend=True,
            legend=dict(
                orientation="h",
                yanchor="top", y=-0.2,
                xanchor="center", x=0.5,
                bgcolor=self.colors["legend_bg"],
                bordercolor=self.colors["legend_border"],
                borderwidth=1,
            ),
            plot_bgcolor=self.colors["plot_bg"],
            paper_bgcolor=self.colors["paper_bg"],
        )
        self._update_axes()

    def _update_axes(self):
        """Оси: подписи, сетка, логарифмическая шкала по необходимости."""
        axis_base = dict(
            showgrid=True, gridwidth=0.75, gridcolor=self.colors["grid"],
            linecolor=self.colors["axis_line"], linewidth=2,
            ticks="outside", tickwidth=2, mirror=True,
        )
        self.fig.update_xaxes(
            title=dict(text=f"<b>{self.labels['x']}</b>", standoff=10),
            type="log" if self.labels.get("x_log") else "linear",
            **axis_base,
        )
        self.fig.update_yaxes(
            title=dict(text=f"<b>{self.labels['y']}</b>", standoff=10),
            autorange="reversed" if self.labels.get("y_reversed") else True,
            **axis_base,
        )

    def get_figure(self):
        return self.fig
