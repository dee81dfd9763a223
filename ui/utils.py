"""Вспомогательные функции для UI."""

import io
import tomllib

import tomli_w

from core.calculator import TESTS


def export_toml(test: str, form: dict) -> str:
    """Экспортировать значения формы испытания в TOML-строку.

    Пустые поля не записываются; числовые значения сохраняются числами.
    """
    if test not in TESTS:
        raise KeyError(f"Unknown test: {test}")

    inputs = {}
    for name in TESTS[test].input_model.model_fields:
        value = form.get(name)
        if value is None or (isinstance(value, str) and not value.strip()):
            continue
        inputs[name] = _to_number(value)

    return tomli_w.dumps({"test": test, "inputs": inputs})


def import_toml(content: bytes) -> tuple[str, dict]:
    """Импортировать TOML в (ключ испытания, значения формы).

    Raises:
        ValueError: нет ключа test, испытание неизвестно или inputs — не таблица.
    """
    data = tomllib.load(io.BytesIO(content))

    test = data.get("test")
    if test not in TESTS:
        raise ValueError(f"Unknown or missing test: {test!r}")

    inputs = data.get("inputs", {})
    if not isinstance(inputs, dict):
        raise ValueError("[inputs] must be a table")
    form = {}
    for name in TESTS[test].input_model.model_fields:
        value = inputs.get(name)
        form[name] = "" if value is None else format_value(value)
    return test, form


def _to_number(value):
    """Число из строки формы; нечисловое значение остаётся строкой."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value
    text = str(value).strip().replace(",", ".")
    try:
        number = float(text)
    except ValueError:
        return str(value)
    return int(number) if number.is_integer() and "." not in text and "e" not in text.lower() else number


def format_value(value) -> str:
    """Значение для поля ввода: 944.0 → "944", 0.00278 → "0.00278"."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        short = f"{value:g}"
        return short if float(short) == value else repr(value)
    return str(value)
