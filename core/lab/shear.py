"""Прямой сдвиг (IS 2720 Part 13): огибающая Мора–Кулона τ = c + σ·tanφ."""

import math

from core import tables
from core.errors import DomainError
from core.helpers import linear_regression, lookup_band
from core.models import ChartPoint, ShearStrengthInput, ShearStrengthResult


def classify_friction_angle(phi: float) -> tuple[str, str]:
    """Тип грунта и несущая способность по углу трения (IS 1498)."""
    _, soil_type, bearing = lookup_band(phi, tables.FRICTION_ANGLE_BANDS)
    return soil_type, bearing


def failure_envelope(cohesion: float, tan_phi: float, max_normal: float) -> list[ChartPoint]:
    """13 точек огибающей от 0 до 1.5·σmax, τ ≥ 0."""
    steps = tables.SHEAR_ENVELOPE_STEPS
    extent = max_normal * tables.SHEAR_ENVELOPE_EXTENT
    return [
        ChartPoint(x=extent / steps * i, y=max(0.0, cohesion + extent / steps * i * tan_phi))
        for i in range(steps + 1)
    ]


def shear_strength_test(inp: ShearStrengthInput) -> ShearStrengthResult:
    """Сцепление и угол трения по трём парам (σ, τ).

    Raises:
        DomainError: нормальные напряжения совпадают (регрессия не определена).
    """
    normals = [n for n, _ in inp.pairs]
    shears = [s for _, s in inp.pairs]

    try:
        tan_phi, cohesion = linear_regression(normals, shears)
    except ZeroDivisionError:
        raise DomainError("Normal stresses must not all be equal.") from None

    phi = math.degrees(math.atan(tan_phi))
    soil_type, bearing = classify_friction_angle(phi)

    return ShearStrengthResult(
        cohesion=max(0.0, cohesion),
        friction_angle=phi,
        tan_phi=tan_phi,
        classification=soil_type,
        bearing_capacity=bearing,
        test_points=[
            ChartPoint(x=n, y=s, label=f"Test {i}") for i, (n, s) in enumerate(inp.pairs, start=1)
        ],
        chart=failure_envelope(cohesion, tan_phi, max(normals)),
    )
