"""Одномерная консолидация (IS 2720 Part 15, ASTM D2435).

Два режима:
- время–осадка: по H0, Hf, e0, p и t90 — осадка, mv и cv ≈ 0.848·H0²/t90,
  кривая осадки по теоретической степени консолидации;
- приращение давления: по e0, p0, pf и Cc — Δe = Cc·log10(pf/p0) и кривая e–log p.
"""

import math

import numpy as np

from core import tables
from core.errors import DomainError
from core.helpers import lookup_band
from core.models import (
    ChartPoint,
    ConsolidationPressureInput,
    ConsolidationPressureResult,
    ConsolidationTimeInput,
    ConsolidationTimeResult,
)


def classify_compressibility(mv: float) -> str:
    """Сжимаемость по коэффициенту объёмной сжимаемости mv, м²/кН."""
    return lookup_band(mv, tables.COMPRESSIBILITY_BANDS)[1]


def degree_of_consolidation(cv: float, t: float, h: float) -> float:
    """U(t) = 1 − exp(−π²·cv·t / (4·H²))."""
    return 1.0 - math.exp(-(math.pi ** 2) * cv * t / (4.0 * h * h))


def consolidation_time_rate(inp: ConsolidationTimeInput) -> ConsolidationTimeResult:
    """Режим «время–осадка».

    Raises:
        DomainError: H0, p, t90 не положительны или Hf вне (0, H0].
    """
    H0, Hf, e0, p, t = (
        inp.initial_height, inp.final_height, inp.initial_void_ratio, inp.pressure, inp.time_90,
    )
    if H0 <= 0:
        raise DomainError("Initial height must be greater than zero.")
    if Hf <= 0 or Hf > H0:
        raise DomainError("Final height must be positive and not exceed the initial height.")
    if p <= 0 or t <= 0:
        raise DomainError("Pressure and time must be greater than zero.")
    if e0 <= -1:
        raise DomainError("Initial void ratio must be greater than -1.")

    delta_h = H0 - Hf
    ef = e0 - delta_h * (1.0 + e0) / H0
    mv = (e0 - ef) / (p * (1.0 + e0))
    cv = tables.CV_FACTOR_T90 * H0 * H0 / t

    steps = tables.CONSOLIDATION_CHART_STEPS
    chart = []
    for i in range(steps + 1):
        time_point = t / steps * i
        chart.append(ChartPoint(x=time_point, y=delta_h * degree_of_consolidation(cv, time_point, H0)))

    return ConsolidationTimeResult(
        total_settlement=delta_h,
        strain=delta_h / H0 * 100.0,
        compression_ratio=delta_h / H0,
        final_void_ratio=ef,
        volume_compressibility=mv,
        consolidation_coefficient=cv,
        classification=classify_compressibility(mv),
        chart=chart,
    )


def consolidation_pressure_increment(inp: ConsolidationPressureInput) -> ConsolidationPressureResult:
    """Режим «приращение давления».

    Raises:
        DomainError: p0 ≤ 0, pf ≤ p0 или Cc < 0.
    """
    e0, p0, pf, cc = inp.initial_void_ratio, inp.initial_pressure, inp.final_pressure, inp.compression_index
    if p0 <= 0:
        raise DomainError("Initial pressure must be greater than zero.")
    if pf <= p0:
        raise DomainError("Final pressure must be greater than initial pressure.")
    if cc < 0:
        raise DomainError("Compression index cannot be negative.")
    if e0 <= 0:
        raise DomainError("Initial void ratio must be greater than zero.")

    delta_e = cc * math.log10(pf / p0)
    ef = max(0.0, e0 - delta_e)
    av = delta_e / (pf - p0)

    pressures = np.geomspace(p0, pf, tables.E_LOG_P_CHART_STEPS + 1)
    chart = [
        ChartPoint(x=float(pi), y=max(0.0, e0 - cc * math.log10(pi / p0)))
        for pi in pressures
    ]

    mv = av / (1.0 + e0)
    return ConsolidationPressureResult(
        void_ratio_change=delta_e,
        final_void_ratio=ef,
        settlement_percent=delta_e / (1.0 + e0) * 100.0,
        compressibility_coefficient=av,
        volume_compressibility=mv,
        classification=classify_compressibility(mv),
        chart=chart,
    )
