"""Калькуляторы лабораторных испытаний грунтов.

Каждый модуль — независимая чистая функция: входная модель → результат.
Нарушение физических ограничений — DomainError.

Использование:
    from core.lab import (
        plasticity_test,
        hydrometer_test,
        compaction_test,
        grain_size_test,
        permeability_test,
        consolidation_time_rate,
        consolidation_pressure_increment,
        shear_strength_test,
        specific_gravity_test,
    )
"""

from .compaction import compaction_test
from .consolidation import consolidation_pressure_increment, consolidation_time_rate
from .grain_size import grain_size_test
from .hydrometer import hydrometer_test
from .permeability import permeability_test
from .plasticity import plasticity_test
from .shear import shear_strength_test
from .specific_gravity import specific_gravity_test

__all__ = [
    # Пластичность и гранулометрия
    "plasticity_test",
    "hydrometer_test",
    "grain_size_test",
    # Плотность
    "compaction_test",
    "specific_gravity_test",
    # Фильтрация и консолидация
    "permeability_test",
    "consolidation_time_rate",
    "consolidation_pressure_increment",
    # Прочность
    "shear_strength_test",
]
