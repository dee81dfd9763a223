import logging

import pytest
from pydantic import ValidationError

from core.config import Settings, configure_logging, load_settings


def test_defaults_without_file(tmp_path):
    settings = load_settings(tmp_path / "missing.toml", environ={})
    assert settings == Settings()
    assert settings.database_url == "sqlite:///data/soillab.db"
    assert settings.plot_theme == "light"


def test_load_from_toml_and_env(tmp_path):
    path = tmp_path / "soillab.toml"
    path.write_text(
        '[soillab]\n'
        'database_url = "sqlite:///from-file.db"\n'
        'log_level = "debug"\n'
        'plot_theme = "dark"\n'
        'unknown_key = 1\n',
        encoding="utf-8",
    )

    settings = load_settings(path, environ={})
    assert settings.database_url == "sqlite:///from-file.db"
    assert settings.log_level == "DEBUG"
    assert settings.plot_theme == "dark"

    settings = load_settings(path, environ={"SOILLAB_DATABASE_URL": "sqlite:///from-env.db"})
    assert settings.database_url == "sqlite:///from-env.db"


def test_config_path_from_environment(tmp_path):
    path = tmp_path / "custom.toml"
    path.write_text("[soillab]\ndashboard_page_size = 10\n", encoding="utf-8")
    settings = load_settings(environ={"SOILLAB_CONFIG": str(path)})
    assert settings.dashboard_page_size == 10


def test_invalid_value_is_rejected(tmp_path):
    path = tmp_path / "soillab.toml"
    path.write_text('[soillab]\nplot_theme = "sepia"\n', encoding="utf-8")
    with pytest.raises(ValidationError):
        load_settings(path, environ={})


def test_configure_logging_is_idempotent():
    root = logging.getLogger()
    previous = root.level
    configure_logging(Settings(log_level="WARNING"))
    configure_logging(Settings(log_level="WARNING"))
    handlers = [h for h in root.handlers if getattr(h, "_soillab", False)]
    assert len(handlers) == 1
    assert root.level == logging.WARNING
    root.removeHandler(handlers[0])
    root.setLevel(previous)
