"""Удельный вес частиц грунта пикнометрическим методом (IS 2720 Part 3, ASTM D854)."""

from core import tables
from core.errors import DomainError
from core.helpers import lookup_band
from core.models import ChartPoint, SpecificGravityInput, SpecificGravityResult


def temperature_correction(temperature: float) -> float:
    """K = 1 − (T − 27)·0.0002; при 27 °C ровно 1."""
    return 1.0 - (temperature - tables.REFERENCE_TEMPERATURE) * tables.SG_TEMP_COEFFICIENT


def classify_specific_gravity(gs: float) -> tuple[str, str]:
    """Минеральный состав и происхождение по Gs (справочная таблица)."""
    _, composition, origin = lookup_band(gs, tables.SPECIFIC_GRAVITY_BANDS)
    return composition, origin


def comparison_chart(gs: float) -> list[ChartPoint]:
    """Сравнение Gs пробы со справочными материалами (проба — третьим столбцом)."""
    materials = list(tables.REFERENCE_MATERIALS)
    materials.insert(2, ("Your Sample", round(gs, 2)))
    return [ChartPoint(x=i, y=value, label=name) for i, (name, value) in enumerate(materials)]


def specific_gravity_test(inp: SpecificGravityInput) -> SpecificGravityResult:
    """Gs = Ms·K / (Ms + (Mpw − Mp) − (Mpsw − Mp)).

    Raises:
        DomainError: Ms ≤ 0 или объём вытесненной воды ≤ 0.
    """
    Ms, Mp, Mpw, Mpsw = inp.soil_mass, inp.pycnometer_mass, inp.pycnometer_water_mass, inp.pycnometer_soil_water_mass
    if Ms <= 0:
        raise DomainError("Dry soil mass must be greater than zero.")

    water_mass = Mpw - Mp
    displaced = Ms + water_mass - (Mpsw - Mp)
    if displaced <= 0:
        raise DomainError("Masses are inconsistent: displaced water must be greater than zero.")

    k = temperature_correction(inp.temperature)
    gs = Ms * k / displaced
    volume = displaced / tables.WATER_DENSITY
    composition, origin = classify_specific_gravity(gs)

    return SpecificGravityResult(
        specific_gravity=gs,
        correction_factor=k,
        water_mass=water_mass,
        water_displaced=displaced,
        volume_solids=volume,
        density_solids=Ms / volume,
        classification=composition,
        soil_origin=origin,
        chart=comparison_chart(gs),
    )
