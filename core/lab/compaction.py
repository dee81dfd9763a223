"""Стандартное уплотнение по Проктору (IS 2720 Part 7, ASTM D698).

Плотность сухого грунта определяется через влажность:
    ρd = ρ / (1 + w/100)
Альтернативная формула ρd = m_сух / V возвращается отдельным полем —
ранние версии формы использовали её, расхождение не скрывается.
"""

from core import tables
from core.errors import DomainError
from core.helpers import lookup_band
from core.models import ChartPoint, CompactionInput, CompactionResult


def classify_compaction(efficiency: float) -> str:
    """≥95 — Excellent, ≥90 — Good, ≥85 — Fair, иначе Poor."""
    return lookup_band(efficiency, tables.COMPACTION_BANDS, inclusive=True)[1]


def compaction_curve(dry_density: float, water_content: float) -> list[ChartPoint]:
    """Условная кривая уплотнения: 7 точек симметрично относительно w.

    Каждая точка ниже ρd на 5 % за единицу удаления — иллюстрация,
    а не результат серии испытаний.
    """
    return [
        ChartPoint(
            x=water_content + offset * tables.COMPACTION_CURVE_WC_STEP,
            y=dry_density * (1.0 - tables.COMPACTION_CURVE_DROP * abs(offset)),
        )
        for offset in tables.COMPACTION_CURVE_OFFSETS
    ]


def compaction_test(inp: CompactionInput) -> CompactionResult:
    """Плотность, коэффициент пористости, степень влажности, коэффициент уплотнения.

    Raises:
        DomainError: объём формы не положителен или w ≤ −100 %.
    """
    if inp.mold_volume <= 0:
        raise DomainError("Mold volume must be greater than zero.")
    if inp.water_content <= -100:
        raise DomainError("Water content must be greater than -100%.")

    gs = tables.SPECIFIC_GRAVITY_ASSUMED
    wc = inp.water_content

    wet_density = inp.wet_mass / inp.mold_volume
    dry_density = wet_density / (1.0 + wc / 100.0)
    if dry_density <= 0:
        raise DomainError("Wet mass must be greater than zero.")

    void_ratio = gs * tables.WATER_DENSITY / dry_density - 1.0
    if void_ratio > 0:
        saturation = wc * gs / void_ratio
    else:
        saturation = 100.0
    efficiency = dry_density / tables.MAX_DRY_DENSITY_REFERENCE * 100.0

    return CompactionResult(
        water_content=wc,
        wet_density=wet_density,
        dry_density=dry_density,
        dry_density_from_mass=inp.dry_mass / inp.mold_volume,
        void_ratio=void_ratio,
        degree_of_saturation=min(100.0, saturation),
        compaction_efficiency=min(100.0, efficiency),
        classification=classify_compaction(efficiency),
        chart=compaction_curve(dry_density, wc),
    )
