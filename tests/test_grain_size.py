import pytest

from core.errors import DomainError
from core.helpers import interpolate_d
from core.lab.grain_size import classify_grain_size, grain_size_test
from core.models import GrainSizeInput

SIZES = [4.75, 2.0, 0.425, 0.075]


def _sample(**kwargs):
    data = dict(total_mass=500.0, sieve_4=50.0, sieve_10=100.0, sieve_40=150.0, sieve_200=100.0)
    data.update(kwargs)
    return GrainSizeInput(**data)


def test_fractions_sum_to_100():
    result = grain_size_test(_sample())
    total = result.gravel + result.coarse_sand + result.medium_sand + result.fine_sand + result.fines
    assert total == pytest.approx(100.0)
    assert result.cumulative_retained == pytest.approx([10.0, 30.0, 60.0, 80.0])
    assert result.percent_passing == pytest.approx([90.0, 70.0, 40.0, 20.0])


@pytest.mark.parametrize(
    "masses",
    [(0.0, 0.0, 0.0, 0.0), (400.0, 50.0, 25.0, 25.0), (10.0, 20.0, 30.0, 40.0)],
)
def test_fractions_sum_to_100_for_any_consistent_sample(masses):
    s4, s10, s40, s200 = masses
    result = grain_size_test(_sample(sieve_4=s4, sieve_10=s10, sieve_40=s40, sieve_200=s200))
    total = result.gravel + result.sand + result.fines
    assert total == pytest.approx(100.0)


def test_characteristic_diameters():
    result = grain_size_test(_sample())
    assert result.d60 == pytest.approx(1.475)
    assert result.d30 == pytest.approx(0.25)
    assert result.d10 == pytest.approx(0.075)
    assert result.cu == pytest.approx(1.475 / 0.075)
    assert result.cc == pytest.approx(0.25 ** 2 / (1.475 * 0.075))
    assert result.classification == "Poorly-graded Sand (SP)"
    assert result.gradation == "Poorly graded"


def test_interpolate_d_clamps_to_endpoints():
    passing = [90.0, 70.0, 40.0, 20.0]
    assert interpolate_d(95.0, passing, SIZES) == 4.75
    assert interpolate_d(10.0, passing, SIZES) == 0.075
    assert interpolate_d(55.0, passing, SIZES) == pytest.approx(0.425 + 0.5 * (2.0 - 0.425))


def test_no_division_by_zero_for_uniform_sample():
    # Всё прошло через сита: D10 = D30 = D60
    result = grain_size_test(_sample(sieve_4=0.0, sieve_10=0.0, sieve_40=0.0, sieve_200=0.0))
    assert result.fines == 100.0
    assert result.cu == pytest.approx(1.0)
    assert result.classification == "Fine-grained Soil (M/C)"


@pytest.mark.parametrize(
    "gravel,sand,fines,cu,cc,expected",
    [
        (60.0, 30.0, 10.0, 5.0, 2.0, "Well-graded Gravel (GW)"),
        (60.0, 30.0, 10.0, 3.0, 2.0, "Poorly-graded Gravel (GP)"),
        (20.0, 70.0, 10.0, 7.0, 1.5, "Well-graded Sand (SW)"),
        (20.0, 70.0, 10.0, 7.0, 4.0, "Poorly-graded Sand (SP)"),
        (10.0, 20.0, 70.0, 1.0, 1.0, "Fine-grained Soil (M/C)"),
        (40.0, 30.0, 30.0, 1.0, 1.0, "Mixed Soil (no dominant fraction)"),
    ],
)
def test_classification(gravel, sand, fines, cu, cc, expected):
    assert classify_grain_size(gravel, sand, fines, cu, cc) == expected


@pytest.mark.parametrize("total", [0.0, -10.0])
def test_non_positive_total_mass_is_rejected(total):
    with pytest.raises(DomainError, match="valid total mass"):
        grain_size_test(_sample(total_mass=total))
