"""Ареометрический анализ (IS 2720 Part 4, ASTM D7928).

Диаметр частиц по закону Стокса:
    D = √(18·η·L / ((Gs − 1)·ρw·g·t))

Временной ряд на графике — иллюстрация: процент мельче затухает
экспоненциально по номеру отсчёта, физической модели за ним нет.
"""

import math

from core import tables
from core.errors import DomainError
from core.helpers import clamp, lookup_band, water_viscosity
from core.models import ChartPoint, HydrometerInput, HydrometerResult


def corrected_reading(reading: float, temperature: float) -> float:
    """Показание с температурной поправкой относительно 27 °C."""
    return reading + tables.HYDROMETER_TEMP_CORRECTION * (temperature - tables.REFERENCE_TEMPERATURE)


def effective_depth(reading: float) -> float:
    """Эффективная глубина погружения, см (упрощённая тарировка)."""
    return tables.HYDROMETER_DEPTH_BASE + reading * tables.HYDROMETER_DEPTH_PER_READING


def stokes_diameter(depth_cm: float, time_min: float, viscosity: float,
                    specific_gravity: float = tables.SPECIFIC_GRAVITY_ASSUMED) -> float:
    """Диаметр частиц по Стоксу, мм."""
    t = time_min * 60.0
    d_cm = math.sqrt(
        18.0 * viscosity * depth_cm
        / ((specific_gravity - 1.0) * tables.WATER_DENSITY * tables.GRAVITY * t)
    )
    return d_cm * 10.0


def classify_grain(diameter_mm: float) -> str:
    """Песок > 0.075 мм, пыль > 0.002 мм, иначе глина."""
    return lookup_band(diameter_mm, tables.GRAIN_SIZE_BANDS)[1]


def hydrometer_test(inp: HydrometerInput) -> HydrometerResult:
    """Расчёт диаметра частиц и процента мельче.

    Raises:
        DomainError: масса или время не положительны, температура вне 0–100 °C.
    """
    if inp.soil_mass <= 0:
        raise DomainError("Soil mass must be greater than zero.")
    if inp.elapsed_time <= 0:
        raise DomainError("Elapsed time must be greater than zero.")
    t_min, t_max = tables.HYDROMETER_TEMP_RANGE
    if not t_min <= inp.temperature <= t_max:
        raise DomainError(f"Temperature must be between {t_min:g} and {t_max:g} °C.")

    reading = corrected_reading(inp.hydrometer_reading, inp.temperature)
    depth = effective_depth(reading)
    if depth <= 0:
        raise DomainError("Hydrometer reading gives a non-positive effective depth.")

    eta = water_viscosity(inp.temperature)
    if eta <= 0:
        raise DomainError("Water viscosity is not defined at this temperature.")
    diameter = stokes_diameter(depth, inp.elapsed_time, eta)
    finer = clamp((reading - 1.0) * 100.0 / inp.soil_mass, 0.0, 100.0)

    chart = [
        ChartPoint(
            x=stokes_diameter(depth, t, eta),
            y=finer * math.exp(-tables.HYDROMETER_DECAY_RATE * i),
            label=f"{t:g} min",
        )
        for i, t in enumerate(tables.HYDROMETER_TIME_STOPS)
    ]

    return HydrometerResult(
        temperature=inp.temperature,
        corrected_reading=reading,
        effective_depth=depth,
        viscosity=eta,
        grain_diameter=diameter,
        percent_finer=finer,
        classification=classify_grain(diameter),
        chart=chart,
    )
