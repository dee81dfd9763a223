import math

import pytest

from core.errors import DomainError
from core.lab.consolidation import (
    classify_compressibility,
    consolidation_pressure_increment,
    consolidation_time_rate,
)
from core.models import ConsolidationPressureInput, ConsolidationTimeInput


def _time_inputs(**kwargs):
    data = dict(initial_height=20.0, final_height=18.0, initial_void_ratio=0.8, pressure=100.0, time_90=10.0)
    data.update(kwargs)
    return ConsolidationTimeInput(**data)


def _pressure_inputs(**kwargs):
    data = dict(initial_void_ratio=0.9, initial_pressure=100.0, final_pressure=200.0, compression_index=0.3)
    data.update(kwargs)
    return ConsolidationPressureInput(**data)


def test_time_rate_mode():
    result = consolidation_time_rate(_time_inputs())
    assert result.total_settlement == pytest.approx(2.0)
    assert result.strain == pytest.approx(10.0)
    assert result.final_void_ratio == pytest.approx(0.62)
    assert result.volume_compressibility == pytest.approx(0.18 / (100.0 * 1.8))
    assert result.consolidation_coefficient == pytest.approx(0.848 * 400.0 / 10.0)
    assert result.classification == "High Compressibility"


def test_settlement_curve_approaches_total_settlement():
    result = consolidation_time_rate(_time_inputs())
    assert len(result.chart) == 21
    assert result.chart[0].y == 0.0
    settlements = [p.y for p in result.chart]
    assert settlements == sorted(settlements)
    assert settlements[-1] < result.total_settlement


@pytest.mark.parametrize(
    "kwargs",
    [{"final_height": 25.0}, {"final_height": 0.0}, {"pressure": 0.0}, {"time_90": 0.0}, {"initial_height": 0.0}],
)
def test_time_rate_rejects_invalid_values(kwargs):
    with pytest.raises(DomainError):
        consolidation_time_rate(_time_inputs(**kwargs))


def test_pressure_increment_mode():
    result = consolidation_pressure_increment(_pressure_inputs())
    delta_e = 0.3 * math.log10(2.0)
    assert result.void_ratio_change == pytest.approx(delta_e)
    assert result.final_void_ratio == pytest.approx(0.9 - delta_e)
    assert result.settlement_percent == pytest.approx(delta_e / 1.9 * 100)
    assert result.compressibility_coefficient == pytest.approx(delta_e / 100.0)


def test_e_log_p_curve():
    result = consolidation_pressure_increment(_pressure_inputs())
    assert len(result.chart) == 11
    assert result.chart[0].x == pytest.approx(100.0)
    assert result.chart[0].y == pytest.approx(0.9)
    assert result.chart[-1].x == pytest.approx(200.0)
    assert result.chart[-1].y == pytest.approx(result.final_void_ratio)


def test_e_log_p_curve_is_clamped_at_zero():
    result = consolidation_pressure_increment(_pressure_inputs(initial_void_ratio=0.2, compression_index=2.0))
    assert result.final_void_ratio == 0.0
    assert all(p.y >= 0.0 for p in result.chart)


@pytest.mark.parametrize(
    "kwargs",
    [{"initial_pressure": 0.0}, {"final_pressure": 100.0}, {"final_pressure": 50.0}, {"compression_index": -0.1}],
)
def test_pressure_increment_rejects_invalid_values(kwargs):
    with pytest.raises(DomainError):
        consolidation_pressure_increment(_pressure_inputs(**kwargs))


@pytest.mark.parametrize(
    "mv,expected",
    [
        (2e-3, "Very High Compressibility"),
        (1e-3, "High Compressibility"),
        (2e-4, "Medium Compressibility"),
        (7e-5, "Low Compressibility"),
        (1e-5, "Very Low Compressibility"),
    ],
)
def test_compressibility_bands(mv, expected):
    assert classify_compressibility(mv) == expected
