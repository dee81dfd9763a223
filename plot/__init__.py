"""Модуль визуализации результатов лабораторных испытаний."""

from core.models import (
    ChartPoint,
    CompactionResult,
    ConsolidationTimeResult,
    PlasticityResult,
    ShearStrengthResult,
    TestResult,
)

from .base import BasePlotter
from .curves import plot_bars, plot_series
from .annotations import add_points, add_reference_line


class LabPlotter(BasePlotter):
    """Построение графика испытания по точкам результата."""

    def plot_series(self, points: list[ChartPoint], name: str | None = None, color: str | None = None,
                    markers: bool = True, dash: str | None = None):
        plot_series(self, points, name, color, markers, dash)

    def plot_bars(self, points: list[ChartPoint], highlight: str | None = None):
        plot_bars(self, points, highlight)

    def add_points(self, points: list[ChartPoint], name: str, color: str | None = None):
        add_points(self, points, name, color)

    def add_reference_line(self, y: float, text: str, color: str | None = None):
        add_reference_line(self, y, text, color)


def build_figure(test: str, result: TestResult, theme: str = "light"):
    """Собрать plotly-фигуру для результата испытания test.

    Args:
        test: Ключ испытания (см. core.calculator.TESTS).
        result: Результат расчёта.
        theme: "light" или "dark".
    """
    plotter = LabPlotter(test, theme)

    if test == "specific_gravity":
        plotter.plot_bars(result.chart, highlight="Your Sample")
        plotter.fig.update_layout(showlegend=False)
        return plotter.get_figure()

    dashed = test in ("plasticity", "hydrometer", "compaction")
    plotter.plot_series(result.chart, dash="dash" if dashed else None, markers=test != "shear")

    # Точка пробы поверх условной кривой
    if isinstance(result, PlasticityResult):
        plotter.add_points(
            [ChartPoint(x=result.liquid_limit, y=result.plasticity_index, label=result.classification)],
            name="Sample", color=plotter.colors["sample"],
        )
    elif isinstance(result, CompactionResult):
        plotter.add_points(
            [ChartPoint(x=result.water_content, y=result.dry_density, label=f"ρd = {result.dry_density:.3f}")],
            name="Test point", color=plotter.colors["sample"],
        )
    elif isinstance(result, ShearStrengthResult):
        plotter.add_points(result.test_points, name="Test points", color=plotter.colors["secondary"])
    elif isinstance(result, ConsolidationTimeResult):
        plotter.add_reference_line(result.total_settlement, f"ΔH = {result.total_settlement:.3f} mm")

    return plotter.get_figure()


__all__ = ["LabPlotter", "build_figure"]
