"""Настройки приложения и логирование.

Порядок: значения по умолчанию → TOML-файл (секция [soillab]) → переменные окружения.
"""

import logging
import os
import tomllib
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

CONFIG_ENV = "SOILLAB_CONFIG"
DEFAULT_CONFIG_FILE = "soillab.toml"

_ENV_OVERRIDES = {
    "SOILLAB_DATABASE_URL": "database_url",
    "SOILLAB_LOG_LEVEL": "log_level",
}

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class Settings(BaseModel):
    """Настройки приложения."""

    database_url: str = Field(default="sqlite:///data/soillab.db", description="URL базы отзывов (SQLAlchemy)")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    plot_theme: Literal["light", "dark"] = "light"
    dashboard_page_size: int = Field(default=50, gt=0)


def load_settings(path: str | Path | None = None, environ: dict | None = None) -> Settings:
    """Загрузить настройки из TOML и окружения.

    Args:
        path: Путь к TOML; по умолчанию $SOILLAB_CONFIG или ./soillab.toml.
        environ: Окружение (для тестов), по умолчанию os.environ.
    """
    environ = os.environ if environ is None else environ
    if path is None:
        path = environ.get(CONFIG_ENV, DEFAULT_CONFIG_FILE)

    data = {}
    config_path = Path(path)
    if config_path.is_file():
        with open(config_path, "rb") as f:
            data = dict(tomllib.load(f).get("soillab", {}))

    for env_key, field in _ENV_OVERRIDES.items():
        if environ.get(env_key):
            data[field] = environ[env_key]

    if "log_level" in data:
        data["log_level"] = str(data["log_level"]).upper()

    known = {k: v for k, v in data.items() if k in Settings.model_fields}
    return Settings(**known)


def configure_logging(settings: Settings):
    """Один обработчик на корневом логгере, повторный вызов не дублирует вывод."""
    root = logging.getLogger()
    root.setLevel(settings.log_level)
    if not any(getattr(h, "_soillab", False) for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._soillab = True
        root.addHandler(handler)
