"""Ситовой анализ (IS 2720 Part 4, ASTM D6913).

Фракции определяются разностью полных остатков на ситах
4.75 / 2.0 / 0.425 / 0.075 мм; Cu и Cc — по D10, D30, D60.
"""

from core import tables
from core.errors import DomainError
from core.helpers import interpolate_d
from core.models import ChartPoint, GrainSizeInput, GrainSizeResult


def gradation(cu: float, cc: float, cu_min: float) -> bool:
    """Хорошо сортированный грунт: Cu ≥ cu_min и 1 ≤ Cc ≤ 3."""
    cc_lo, cc_hi = tables.CC_RANGE
    return cu >= cu_min and cc_lo <= cc <= cc_hi


def classify_grain_size(gravel: float, sand: float, fines: float, cu: float, cc: float) -> str:
    """Классификация по преобладающей фракции (>50 %) и сортированности."""
    if gravel > 50:
        if gradation(cu, cc, tables.GRAVEL_CU_MIN):
            return "Well-graded Gravel (GW)"
        return "Poorly-graded Gravel (GP)"
    if sand > 50:
        if gradation(cu, cc, tables.SAND_CU_MIN):
            return "Well-graded Sand (SW)"
        return "Poorly-graded Sand (SP)"
    if fines > 50:
        return "Fine-grained Soil (M/C)"
    return "Mixed Soil (no dominant fraction)"


def grain_size_test(inp: GrainSizeInput) -> GrainSizeResult:
    """Гранулометрический состав по остаткам на ситах.

    Raises:
        DomainError: общая масса ≤ 0 или отрицательный остаток.
    """
    total = inp.total_mass
    if total <= 0:
        raise DomainError("Please enter a valid total mass.")
    if any(m < 0 for m in inp.retained):
        raise DomainError("Retained masses cannot be negative.")

    cumulative = []
    running = 0.0
    for mass in inp.retained:
        running += mass
        cumulative.append(running / total * 100.0)
    passing = [100.0 - c for c in cumulative]

    c4, c10, c40, c200 = cumulative
    gravel = c4
    coarse_sand = c10 - c4
    medium_sand = c40 - c10
    fine_sand = c200 - c40
    fines = 100.0 - c200

    sizes = list(tables.SIEVE_OPENINGS)
    d60 = interpolate_d(60.0, passing, sizes)
    d30 = interpolate_d(30.0, passing, sizes)
    d10 = interpolate_d(10.0, passing, sizes)

    cu = d60 / d10 if d10 > 0 else 0.0
    cc = (d30 * d30) / (d60 * d10) if d60 * d10 > 0 else 0.0

    well_graded = gradation(cu, cc, tables.SAND_CU_MIN if gravel <= 50 else tables.GRAVEL_CU_MIN)
    sand = coarse_sand + medium_sand + fine_sand

    return GrainSizeResult(
        cumulative_retained=cumulative,
        percent_passing=passing,
        gravel=gravel,
        coarse_sand=coarse_sand,
        medium_sand=medium_sand,
        fine_sand=fine_sand,
        fines=fines,
        d10=d10,
        d30=d30,
        d60=d60,
        cu=cu,
        cc=cc,
        gradation="Well graded" if well_graded else "Poorly graded",
        classification=classify_grain_size(gravel, sand, fines, cu, cc),
        chart=[
            ChartPoint(x=size, y=p, label=name)
            for size, p, name in zip(sizes, passing, tables.SIEVE_NAMES)
        ],
    )
