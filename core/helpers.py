"""Общие вспомогательные функции для лабораторных расчётов.

Используются всеми калькуляторами испытаний.
"""

import math

import numpy as np


def parse_number(value) -> float | None:
    """Разобрать значение поля формы.

    Пустая строка и None → None. Запятая допускается как десятичный разделитель.
    Нечисловые и бесконечные значения → ValueError.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError(f"not a number: {value!r}")
    if isinstance(value, (int, float)):
        result = float(value)
    else:
        text = str(value).strip()
        if not text:
            return None
        result = float(text.replace(",", "."))

    if not math.isfinite(result):
        raise ValueError(f"not a finite number: {value!r}")
    return result


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def lookup_band(value: float, bands: tuple, inclusive: bool = False) -> tuple:
    """Найти строку классификационной таблицы.

    Таблица упорядочена по убыванию нижней границы (первый элемент строки).
    Возвращается первая строка, для которой value > границы
    (или ≥ при inclusive=True). Последняя строка — «всё остальное».
    """
    for row in bands:
        threshold = row[0]
        if value > threshold or (inclusive and value >= threshold):
            return row
    return bands[-1]


def lookup_upper_band(value: float, bands: tuple) -> tuple:
    """Найти строку таблицы, упорядоченной по возрастанию верхней границы (value < границы)."""
    for row in bands:
        if value < row[0]:
            return row
    return bands[-1]


def interpolate_d(percent: float, passings: list[float], sizes: list[float]) -> float:
    """Размер частиц Dxx по кривой гранулометрического состава.

    Кусочно-линейная интерполяция процента прохода по размеру отверстия сита.
    passings и sizes упорядочены от крупного сита к мелкому (проход убывает).
    Вне измеренного диапазона — значение на ближайшем краю.
    """
    if percent >= passings[0]:
        return float(sizes[0])
    if percent <= passings[-1]:
        return float(sizes[-1])

    for (p0, s0), (p1, s1) in zip(zip(passings, sizes), zip(passings[1:], sizes[1:])):
        if p1 <= percent <= p0:
            if p0 == p1:
                return float(s1)
            ratio = (percent - p1) / (p0 - p1)
            return float(s1 + ratio * (s0 - s1))

    # Немонотонный проход (масса сит больше общей) — нижний край
    return float(sizes[-1])


def linear_regression(xs: list[float], ys: list[float]) -> tuple[float, float]:
    """Метод наименьших квадратов для прямой y = a + b·x.

    Returns:
        (b, a) — наклон и свободный член.

    Raises:
        ZeroDivisionError: все x совпадают.
    """
    x = np.asarray(xs, dtype=float)
    y = np.asarray(ys, dtype=float)
    n = len(x)

    sum_x = x.sum()
    sum_y = y.sum()
    denominator = n * (x * x).sum() - sum_x * sum_x
    if math.isclose(denominator, 0.0, abs_tol=1e-12):
        raise ZeroDivisionError("all x values coincide")

    slope = (n * (x * y).sum() - sum_x * sum_y) / denominator
    intercept = (sum_y - slope * sum_x) / n
    return float(slope), float(intercept)


def water_viscosity(temperature: float) -> float:
    """Динамическая вязкость воды η, пуаз (г/(см·с)).

    Формула Пуазейля: η = 0.01779 / (1 + 0.03368·T + 0.000221·T²).
    """
    return 0.01779 / (1.0 + 0.03368 * temperature + 0.000221 * temperature ** 2)


def fmt_exp(value: float, digits: int = 3) -> str:
    """Экспоненциальная запись для очень малых/больших величин."""
    return f"{value:.{digits}e}"
