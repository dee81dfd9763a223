"""Границы Аттерберга и число пластичности (IS 2720 Part 5, ASTM D4318)."""

import numpy as np

from core import tables
from core.errors import DomainError
from core.helpers import lookup_upper_band
from core.models import ChartPoint, PlasticityInput, PlasticityResult


def classify_plasticity(pi: float) -> tuple[str, str]:
    """Классификация и активность по числу пластичности.

    <7 — непластичный, 7–17 — низкая, 17–35 — средняя, ≥35 — высокая.
    """
    _, classification, activity = lookup_upper_band(pi, tables.PLASTICITY_BANDS)
    return classification, activity


def a_line(liquid_limit: float) -> float:
    """Линия A диаграммы Казагранде: PI = 0.73·(LL − 20)."""
    return tables.A_LINE_SLOPE * (liquid_limit - tables.A_LINE_LL_OFFSET)


def a_line_chart() -> list[ChartPoint]:
    start, stop, step = tables.A_LINE_LL_RANGE
    return [
        ChartPoint(x=float(ll), y=a_line(float(ll)))
        for ll in np.arange(start, stop + step / 2, step)
    ]


def plasticity_test(inp: PlasticityInput) -> PlasticityResult:
    """Число пластичности PI = LL − PL.

    Raises:
        DomainError: LL ≤ PL.
    """
    ll, pl = inp.liquid_limit, inp.plastic_limit
    if ll <= pl:
        raise DomainError("Liquid limit must be greater than plastic limit.")

    pi = ll - pl
    classification, activity = classify_plasticity(pi)

    return PlasticityResult(
        liquid_limit=ll,
        plastic_limit=pl,
        plasticity_index=pi,
        classification=classification,
        activity_level=activity,
        a_line_pi=a_line(ll),
        chart=a_line_chart(),
    )
