import pytest

from core.errors import DomainError
from core.lab.plasticity import a_line, a_line_chart, classify_plasticity, plasticity_test
from core.models import PlasticityInput


def test_plasticity_index_example():
    result = plasticity_test(PlasticityInput(liquid_limit=45.0, plastic_limit=20.0))
    assert result.plasticity_index == 25.0
    assert result.classification == "Medium Plasticity (CI)"
    assert result.summary == "Plasticity Index: 25.00%"
    assert ("Plasticity Index", "25.00%") in result.rows()


@pytest.mark.parametrize("ll,pl", [(20.0, 20.0), (20.0, 30.0)])
def test_liquid_limit_not_above_plastic_limit_is_rejected(ll, pl):
    with pytest.raises(DomainError):
        plasticity_test(PlasticityInput(liquid_limit=ll, plastic_limit=pl))


@pytest.mark.parametrize(
    "pi,expected",
    [
        (6.99, "Non-plastic (NP)"),
        (7.0, "Low Plasticity (CL/ML)"),
        (16.99, "Low Plasticity (CL/ML)"),
        (17.0, "Medium Plasticity (CI)"),
        (35.0, "High Plasticity (CH)"),
        (80.0, "High Plasticity (CH)"),
    ],
)
def test_classification_bands(pi, expected):
    classification, _ = classify_plasticity(pi)
    assert classification == expected


def test_a_line():
    # PI = 0.73·(LL − 20)
    assert a_line(20.0) == 0.0
    assert a_line(50.0) == pytest.approx(21.9)

    chart = a_line_chart()
    assert [p.x for p in chart] == [20.0, 30.0, 40.0, 50.0, 60.0, 70.0, 80.0, 90.0, 100.0]


def test_sample_position_relative_to_a_line():
    above = plasticity_test(PlasticityInput(liquid_limit=45.0, plastic_limit=20.0))
    below = plasticity_test(PlasticityInput(liquid_limit=60.0, plastic_limit=45.0))
    assert above.above_a_line
    assert not below.above_a_line
