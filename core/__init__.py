"""Ядро калькулятора лабораторных испытаний грунтов.

Модули:
- models: Типы данных (входные данные и результаты испытаний)
- calculator: Реестр испытаний и граница расчёта (calculate)
- lab: Калькуляторы испытаний (пластичность, ареометр, уплотнение, ...)
- tables: Константы и классификационные таблицы
- feedback: Отзывы, статистика, экспорт CSV
- config: Настройки и логирование
- helpers: Общие вспомогательные функции

Использование:
    from core import lab
    from core.calculator import TESTS, calculate
    from core.models import PlasticityInput, PlasticityResult
"""

from . import helpers, lab, tables
from .errors import CalculationError, DomainError, InvalidInput
from .models import CalculationOutcome, ChartPoint, TestInput, TestResult

__all__ = [
    "lab",
    "tables",
    "helpers",
    # Ошибки
    "CalculationError",
    "InvalidInput",
    "DomainError",
    # Модели
    "CalculationOutcome",
    "ChartPoint",
    "TestInput",
    "TestResult",
]
