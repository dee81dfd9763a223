import logging

import pytest

from core.calculator import TESTS, calculate, parse_inputs
from core.errors import DomainError, InvalidInput
from core.models import CompactionInput, GrainSizeInput, HydrometerInput


def test_every_test_is_registered():
    assert set(TESTS) == {
        "plasticity",
        "hydrometer",
        "compaction",
        "grain_size",
        "permeability",
        "consolidation_time",
        "consolidation_pressure",
        "shear",
        "specific_gravity",
    }


def test_parse_inputs_applies_defaults():
    inp = parse_inputs(CompactionInput, {"wet_mass": "1800", "dry_mass": "1600", "water_content": "12", "mold_volume": ""})
    assert inp.mold_volume == 944.0

    inp = parse_inputs(HydrometerInput, {"soil_mass": "50", "hydrometer_reading": "20", "elapsed_time": "60"})
    assert inp.temperature == 27.0


def test_parse_inputs_sieve_masses_default_to_zero():
    inp = parse_inputs(GrainSizeInput, {"total_mass": "500"})
    assert inp.retained == [0.0, 0.0, 0.0, 0.0]


def test_parse_inputs_accepts_decimal_comma():
    inp = parse_inputs(CompactionInput, {"wet_mass": "1800,5", "dry_mass": "1600", "water_content": "12"})
    assert inp.wet_mass == 1800.5


@pytest.mark.parametrize(
    "form,fields",
    [
        ({"liquid_limit": "", "plastic_limit": "20"}, ["liquid_limit"]),
        ({"liquid_limit": "abc", "plastic_limit": "20"}, ["liquid_limit"]),
        ({"liquid_limit": "45"}, ["plastic_limit"]),
        ({"liquid_limit": "nan", "plastic_limit": "inf"}, ["liquid_limit", "plastic_limit"]),
    ],
)
def test_invalid_input_lists_fields(form, fields):
    outcome = calculate("plasticity", form)
    assert not outcome.ok
    assert outcome.result is None
    assert isinstance(outcome.error, InvalidInput)
    assert outcome.error.title == "Invalid Input"
    assert sorted(outcome.error.fields) == sorted(fields)


def test_domain_error_is_returned_not_raised():
    outcome = calculate("plasticity", {"liquid_limit": "20", "plastic_limit": "45"})
    assert not outcome.ok
    assert isinstance(outcome.error, DomainError)
    assert outcome.error.title == "Invalid Values"


def test_successful_calculation():
    outcome = calculate("compaction", {"wet_mass": "1800", "dry_mass": "1600", "water_content": "12"})
    assert outcome.ok
    assert round(outcome.result.dry_density, 3) == 1.702


@pytest.mark.parametrize("test", list(TESTS))
def test_blank_form_never_raises(test):
    outcome = calculate(test, {})
    assert not outcome.ok
    assert isinstance(outcome.error, InvalidInput)


def test_unknown_test_raises_key_error():
    with pytest.raises(KeyError):
        calculate("triaxial", {})


def test_rejection_is_logged(caplog):
    with caplog.at_level(logging.INFO, logger="core.calculator"):
        calculate("plasticity", {"liquid_limit": "x", "plastic_limit": "20"})
    assert "plasticity rejected" in caplog.text


def test_out_of_range_temperature_is_returned_not_raised():
    outcome = calculate(
        "hydrometer",
        {"soil_mass": "50", "hydrometer_reading": "20", "elapsed_time": "60", "temperature": "-50"},
    )
    assert not outcome.ok
    assert isinstance(outcome.error, DomainError)
