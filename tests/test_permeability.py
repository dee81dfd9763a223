import pytest

from core.errors import DomainError
from core.lab.permeability import classify_permeability, permeability_test
from core.models import PermeabilityInput


def _inputs(**kwargs):
    data = dict(head_difference=30.0, length=10.0, area=50.0, discharge=25.0, time=60.0)
    data.update(kwargs)
    return PermeabilityInput(**data)


def test_permeability_example():
    result = permeability_test(_inputs())
    assert result.permeability == pytest.approx(2.778e-3, rel=1e-3)
    assert result.classification == "Medium Permeability"
    assert result.velocity == pytest.approx(25.0 / (50.0 * 60.0))
    assert result.hydraulic_gradient == pytest.approx(3.0)
    assert result.summary == "Coefficient of permeability: 2.778e-03 cm/s"


@pytest.mark.parametrize("q", [1.0, 25.0, 400.0])
def test_doubling_discharge_doubles_k(q):
    k1 = permeability_test(_inputs(discharge=q)).permeability
    k2 = permeability_test(_inputs(discharge=2 * q)).permeability
    assert k2 == pytest.approx(2 * k1)


@pytest.mark.parametrize(
    "k,expected",
    [
        (2.0, "Very High Permeability"),
        (0.5, "High Permeability"),
        (2.778e-3, "Medium Permeability"),
        (1e-4, "Low Permeability"),
        (1e-6, "Very Low Permeability"),
        (1e-9, "Practically Impermeable"),
        (0.0, "Practically Impermeable"),
    ],
)
def test_classification_bands(k, expected):
    classification, soil_type = classify_permeability(k)
    assert classification == expected
    assert soil_type


def test_discharge_chart():
    result = permeability_test(_inputs())
    assert len(result.chart) == 11
    assert (result.chart[0].x, result.chart[0].y) == (0.0, 0.0)
    assert result.chart[-1].x == pytest.approx(60.0)
    assert result.chart[-1].y == pytest.approx(25.0)


@pytest.mark.parametrize("field", ["head_difference", "length", "area", "time"])
def test_zero_denominator_is_rejected(field):
    with pytest.raises(DomainError):
        permeability_test(_inputs(**{field: 0.0}))
