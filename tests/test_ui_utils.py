import pytest
import tomllib

from ui.utils import export_toml, format_value, import_toml


def test_export_toml_skips_blank_fields():
    form = {"wet_mass": "1800", "dry_mass": "1600", "mold_volume": "", "water_content": "12.5"}
    data = tomllib.loads(export_toml("compaction", form))
    assert data == {
        "test": "compaction",
        "inputs": {"wet_mass": 1800, "dry_mass": 1600, "water_content": 12.5},
    }


def test_import_toml_roundtrip():
    form = {"head_difference": "30", "length": "10", "area": "50", "discharge": "25", "time": "60"}
    test, loaded = import_toml(export_toml("permeability", form).encode())
    assert test == "permeability"
    assert loaded == form


def test_import_toml_fills_missing_fields():
    test, form = import_toml(b'test = "hydrometer"\n[inputs]\nsoil_mass = 50.0\n')
    assert test == "hydrometer"
    assert form == {"soil_mass": "50", "hydrometer_reading": "", "temperature": "", "elapsed_time": ""}


@pytest.mark.parametrize(
    "content",
    [b'test = "triaxial"\n', b"[inputs]\nx = 1\n", b'test = "compaction"\ninputs = 5\n'],
)
def test_import_toml_rejects_malformed_file(content):
    with pytest.raises(ValueError):
        import_toml(content)


@pytest.mark.parametrize("value,expected", [(944.0, "944"), (27, "27"), (0.002778, "0.002778"), ("abc", "abc")])
def test_format_value(value, expected):
    assert format_value(value) == expected
