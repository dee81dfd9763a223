import pytest

from core.errors import DomainError
from core.lab.compaction import classify_compaction, compaction_test
from core.models import CompactionInput


def test_compaction_example():
    result = compaction_test(
        CompactionInput(wet_mass=1800.0, dry_mass=1600.0, water_content=12.0)
    )
    assert round(result.wet_density, 3) == 1.907
    assert round(result.dry_density, 3) == 1.702
    assert result.dry_density_from_mass == pytest.approx(1600.0 / 944.0)
    assert result.classification == "Poor"
    assert ("Dry Density", "1.702 g/cm³") in result.rows()


@pytest.mark.parametrize(
    "wet_mass,volume,wc",
    [(1800.0, 944.0, 12.0), (2100.0, 944.0, 8.0), (2300.0, 1000.0, 5.0), (1500.0, 944.0, 25.0)],
)
def test_dry_density_and_efficiency(wet_mass, volume, wc):
    result = compaction_test(
        CompactionInput(wet_mass=wet_mass, dry_mass=0.0, mold_volume=volume, water_content=wc)
    )
    dry_density = wet_mass / volume / (1 + wc / 100)
    assert result.dry_density == pytest.approx(dry_density)
    assert result.compaction_efficiency == pytest.approx(min(100.0, dry_density / 2.1 * 100))
    assert result.degree_of_saturation <= 100.0


def test_void_ratio_and_saturation():
    result = compaction_test(
        CompactionInput(wet_mass=1800.0, dry_mass=1600.0, water_content=12.0)
    )
    e = 2.65 / result.dry_density - 1
    assert result.void_ratio == pytest.approx(e)
    assert result.degree_of_saturation == pytest.approx(12.0 * 2.65 / e)


@pytest.mark.parametrize(
    "efficiency,expected",
    [(100.0, "Excellent"), (95.0, "Excellent"), (94.9, "Good"), (90.0, "Good"), (85.0, "Fair"), (84.9, "Poor")],
)
def test_classification_bands(efficiency, expected):
    assert classify_compaction(efficiency) == expected


def test_curve_is_symmetric_around_water_content():
    result = compaction_test(
        CompactionInput(wet_mass=1800.0, dry_mass=1600.0, water_content=12.0)
    )
    xs = [p.x for p in result.chart]
    ys = [p.y for p in result.chart]
    assert xs == [6.0, 8.0, 10.0, 12.0, 14.0, 16.0, 18.0]
    assert ys[3] == pytest.approx(result.dry_density)
    assert ys[0] == pytest.approx(ys[6])
    assert ys[2] == pytest.approx(result.dry_density * 0.95)


def test_zero_mold_volume_is_rejected():
    with pytest.raises(DomainError):
        compaction_test(CompactionInput(wet_mass=1800.0, dry_mass=1600.0, mold_volume=0.0, water_content=12.0))
