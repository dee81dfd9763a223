"""Фильтрация при постоянном напоре (IS 2720 Part 17), закон Дарси."""

from core import tables
from core.errors import DomainError
from core.helpers import fmt_exp, lookup_band
from core.models import ChartPoint, PermeabilityInput, PermeabilityResult


def classify_permeability(k: float) -> tuple[str, str]:
    """Класс водопроницаемости и типичный грунт по k, см/с."""
    _, classification, soil_type = lookup_band(k, tables.PERMEABILITY_BANDS)
    return classification, soil_type


def permeability_test(inp: PermeabilityInput) -> PermeabilityResult:
    """k = Q·L / (A·h·t); v = Q / (A·t); i = h / L.

    Raises:
        DomainError: h, L, A или t не положительны, Q < 0.
    """
    h, L, A, Q, t = inp.head_difference, inp.length, inp.area, inp.discharge, inp.time
    for value, name in ((h, "Head difference"), (L, "Sample length"), (A, "Cross-sectional area"), (t, "Time")):
        if value <= 0:
            raise DomainError(f"{name} must be greater than zero.")
    if Q < 0:
        raise DomainError("Discharge volume cannot be negative.")

    k = (Q * L) / (A * h * t)
    classification, soil_type = classify_permeability(k)

    steps = tables.PERMEABILITY_CHART_STEPS
    chart = [ChartPoint(x=t / steps * i, y=Q * i / steps) for i in range(steps + 1)]

    return PermeabilityResult(
        permeability=k,
        velocity=Q / (A * t),
        hydraulic_gradient=h / L,
        classification=classification,
        soil_type=soil_type,
        substitution=f"k = ({Q:g} × {L:g}) / ({A:g} × {h:g} × {t:g}) = {fmt_exp(k)} cm/s",
        chart=chart,
    )
