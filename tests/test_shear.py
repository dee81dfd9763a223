import math

import pytest

from core.errors import DomainError
from core.helpers import linear_regression
from core.lab.shear import classify_friction_angle, shear_strength_test
from core.models import ShearStrengthInput


def _inputs(normals, shears):
    data = {}
    for i, (n, s) in enumerate(zip(normals, shears), start=1):
        data[f"normal_stress_{i}"] = n
        data[f"shear_stress_{i}"] = s
    return ShearStrengthInput(**data)


def test_linear_regression_exact_line():
    slope, intercept = linear_regression([50.0, 100.0, 150.0], [40.0, 65.0, 90.0])
    assert slope == pytest.approx(0.5)
    assert intercept == pytest.approx(15.0)


def test_mohr_coulomb_parameters():
    result = shear_strength_test(_inputs([50.0, 100.0, 150.0], [40.0, 65.0, 90.0]))
    assert result.cohesion == pytest.approx(15.0)
    assert result.friction_angle == pytest.approx(math.degrees(math.atan(0.5)))
    assert result.classification == "Loose Sand/Stiff Clay"
    assert result.bearing_capacity == "Medium"
    assert [p.label for p in result.test_points] == ["Test 1", "Test 2", "Test 3"]


def test_negative_intercept_clamps_cohesion():
    result = shear_strength_test(_inputs([50.0, 100.0, 150.0], [10.0, 60.0, 110.0]))
    assert result.cohesion == 0.0
    assert result.friction_angle == pytest.approx(45.0)
    assert all(p.y >= 0.0 for p in result.chart)


def test_failure_envelope():
    result = shear_strength_test(_inputs([50.0, 100.0, 150.0], [40.0, 65.0, 90.0]))
    assert len(result.chart) == 13
    assert result.chart[0].x == 0.0
    assert result.chart[0].y == pytest.approx(15.0)
    assert result.chart[-1].x == pytest.approx(225.0)
    assert result.chart[-1].y == pytest.approx(15.0 + 225.0 * 0.5)


def test_equal_normal_stresses_are_rejected():
    with pytest.raises(DomainError):
        shear_strength_test(_inputs([100.0, 100.0, 100.0], [40.0, 65.0, 90.0]))


@pytest.mark.parametrize(
    "phi,expected",
    [
        (40.0, ("Dense Sand/Gravel", "Very High")),
        (32.0, ("Medium Dense Sand", "High")),
        (27.0, ("Loose Sand/Stiff Clay", "Medium")),
        (20.0, ("Soft to Medium Clay", "Low")),
        (10.0, ("Very Soft Clay", "Very Low")),
    ],
)
def test_friction_angle_bands(phi, expected):
    assert classify_friction_angle(phi) == expected
