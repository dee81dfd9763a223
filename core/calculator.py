"""Граница калькулятора: разбор формы → проверка → расчёт.

Ошибки CalculationError не выходят за пределы calculate(): результат
возвращается как CalculationOutcome с полем error.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Mapping

from core import lab
from core.errors import CalculationError, InvalidInput
from core.helpers import parse_number
from core.models import (
    CalculationOutcome,
    CompactionInput,
    ConsolidationPressureInput,
    ConsolidationTimeInput,
    GrainSizeInput,
    HydrometerInput,
    PermeabilityInput,
    PlasticityInput,
    ShearStrengthInput,
    SpecificGravityInput,
    TestInput,
    TestResult,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LabTest:
    """Описание испытания в реестре."""

    key: str
    title: str
    standard: str
    input_model: type[TestInput]
    run: Callable[[TestInput], TestResult]


TESTS: dict[str, LabTest] = {
    t.key: t
    for t in (
        LabTest("plasticity", "Atterberg Limits - Plasticity Test", "IS 2720 (Part 5), ASTM D4318",
                PlasticityInput, lab.plasticity_test),
        LabTest("hydrometer", "Hydrometer Analysis", "IS 2720 (Part 4), ASTM D7928",
                HydrometerInput, lab.hydrometer_test),
        LabTest("compaction", "Standard Proctor Compaction Test", "IS 2720 (Part 7), ASTM D698",
                CompactionInput, lab.compaction_test),
        LabTest("grain_size", "Grain Size Distribution Analysis", "IS 2720 (Part 4), ASTM D6913",
                GrainSizeInput, lab.grain_size_test),
        LabTest("permeability", "Permeability Test (Constant Head)", "IS 2720 (Part 17)",
                PermeabilityInput, lab.permeability_test),
        LabTest("consolidation_time", "One-Dimensional Consolidation (Time Rate)", "IS 2720 (Part 15), ASTM D2435",
                ConsolidationTimeInput, lab.consolidation_time_rate),
        LabTest("consolidation_pressure", "One-Dimensional Consolidation (Pressure Increment)",
                "IS 2720 (Part 15), ASTM D2435",
                ConsolidationPressureInput, lab.consolidation_pressure_increment),
        LabTest("shear", "Direct Shear Test", "IS 2720 (Part 13) - 1986",
                ShearStrengthInput, lab.shear_strength_test),
        LabTest("specific_gravity", "Specific Gravity Test (Pycnometer Method)", "IS 2720 (Part 3), ASTM D854",
                SpecificGravityInput, lab.specific_gravity_test),
    )
}


def parse_inputs(model: type[TestInput], form: Mapping[str, object]) -> TestInput:
    """Разобрать значения формы в модель входных данных.

    Пустое обязательное поле или нечисловое значение → InvalidInput.
    Пустое поле со значением по умолчанию → значение по умолчанию.
    """
    values = {}
    missing = []
    invalid = []

    for name, field in model.model_fields.items():
        raw = form.get(name)
        try:
            value = parse_number(raw)
        except (TypeError, ValueError):
            invalid.append(name)
            continue

        if value is None:
            if field.is_required():
                missing.append(name)
            continue
        values[name] = value

    if missing or invalid:
        fields = missing + invalid
        raise InvalidInput(
            "Please enter valid numerical values for all required fields.",
            fields=fields,
        )
    return model(**values)


def calculate(test: str, form: Mapping[str, object]) -> CalculationOutcome:
    """Выполнить расчёт испытания test по значениям формы.

    Args:
        test: Ключ испытания из TESTS.
        form: Значения полей формы (строки или числа).

    Returns:
        CalculationOutcome с результатом либо с ошибкой.
    """
    lab_test = TESTS.get(test)
    if lab_test is None:
        raise KeyError(f"Unknown test: {test}")

    try:
        inputs = parse_inputs(lab_test.input_model, form)
        result = lab_test.run(inputs)
    except CalculationError as e:
        logger.info("%s rejected: %s %s", test, e.title, e.message)
        return CalculationOutcome(test=test, error=e)

    logger.debug("%s computed: %s", test, result.summary)
    return CalculationOutcome(test=test, result=result)
