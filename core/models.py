"""Модели данных лабораторных испытаний грунтов."""

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field, computed_field

from core.errors import CalculationError
from core.helpers import fmt_exp
from core import tables


class ChartPoint(BaseModel):
    """Точка графика (только для отображения)."""

    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    label: str | None = None


class TestInput(BaseModel):
    """Базовый класс входных данных испытания."""

    __test__ = False  # не путать с тестами pytest
    model_config = ConfigDict(frozen=True)


class TestResult(BaseModel):
    """Базовый класс результата испытания."""

    __test__ = False
    model_config = ConfigDict(frozen=True)

    classification: str
    chart: list[ChartPoint] = Field(default_factory=list)

    def rows(self) -> list[tuple[str, str]]:
        """Строки результата (подпись, значение с фиксированной точностью)."""
        return [("Classification", self.classification)]

    @property
    def summary(self) -> str:
        """Текст уведомления о завершении расчёта."""
        return f"Classification: {self.classification}"


# --- Пластичность ---


class PlasticityInput(TestInput):
    """Границы Аттерберга."""

    liquid_limit: float = Field(description="Граница текучести LL, %")
    plastic_limit: float = Field(description="Граница раскатывания PL, %")


class PlasticityResult(TestResult):
    liquid_limit: float
    plastic_limit: float
    plasticity_index: float = Field(description="PI = LL − PL, %")
    activity_level: str
    a_line_pi: float = Field(description="PI на линии A при данном LL, %")

    @computed_field
    @property
    def above_a_line(self) -> bool:
        """Точка выше линии A (глины) или ниже (пылеватые грунты)."""
        return self.plasticity_index > self.a_line_pi

    def rows(self):
        return [
            ("Liquid Limit", f"{self.liquid_limit:.1f}%"),
            ("Plastic Limit", f"{self.plastic_limit:.1f}%"),
            ("Plasticity Index", f"{self.plasticity_index:.2f}%"),
            ("Classification", self.classification),
            ("Activity Level", self.activity_level),
            ("A-line PI", f"{self.a_line_pi:.2f}%"),
            ("Casagrande Chart", "Above A-line (clay)" if self.above_a_line else "Below A-line (silt)"),
        ]

    @property
    def summary(self):
        return f"Plasticity Index: {self.plasticity_index:.2f}%"


# --- Ареометр ---


class HydrometerInput(TestInput):
    soil_mass: float = Field(description="Масса сухого грунта, г")
    hydrometer_reading: float = Field(description="Показание ареометра")
    temperature: float = Field(default=tables.REFERENCE_TEMPERATURE, description="Температура суспензии, °C")
    elapsed_time: float = Field(description="Время от начала осаждения, мин")


class HydrometerResult(TestResult):
    temperature: float
    corrected_reading: float
    effective_depth: float = Field(description="Эффективная глубина, см")
    viscosity: float = Field(description="Вязкость воды, пуаз")
    grain_diameter: float = Field(description="Диаметр частиц, мм")
    percent_finer: float = Field(ge=0, le=100, description="Процент мельче, %")

    def rows(self):
        return [
            ("Temperature", f"{self.temperature:.1f} °C"),
            ("Corrected Reading", f"{self.corrected_reading:.4f}"),
            ("Effective Depth", f"{self.effective_depth:.2f} cm"),
            ("Viscosity of Water", f"{self.viscosity:.5f} P"),
            ("Grain Diameter", f"{self.grain_diameter:.4f} mm"),
            ("Percentage Finer", f"{self.percent_finer:.1f}%"),
            ("Gradation", self.classification),
        ]

    @property
    def summary(self):
        return f"Grain diameter: {self.grain_diameter:.4f} mm"


# --- Уплотнение ---


class CompactionInput(TestInput):
    wet_mass: float = Field(description="Масса влажного грунта в форме, г")
    dry_mass: float = Field(description="Масса сухого грунта, г")
    mold_volume: float = Field(default=tables.MOLD_VOLUME_DEFAULT, description="Объём формы, см³")
    water_content: float = Field(description="Влажность, %")


class CompactionResult(TestResult):
    water_content: float
    wet_density: float = Field(description="ρ, г/см³")
    dry_density: float = Field(description="ρd = ρ / (1 + w/100), г/см³")
    dry_density_from_mass: float = Field(description="ρd = m_сух / V, г/см³ (альтернативная формула)")
    void_ratio: float
    degree_of_saturation: float = Field(le=100, description="Sr, %")
    compaction_efficiency: float = Field(le=100, description="ρd / ρd,max, %")

    def rows(self):
        return [
            ("Water Content", f"{self.water_content:.1f}%"),
            ("Wet Density", f"{self.wet_density:.3f} g/cm³"),
            ("Dry Density", f"{self.dry_density:.3f} g/cm³"),
            ("Dry Density (dry mass / volume)", f"{self.dry_density_from_mass:.3f} g/cm³"),
            ("Void Ratio", f"{self.void_ratio:.3f}"),
            ("Degree of Saturation", f"{self.degree_of_saturation:.1f}%"),
            ("Compaction Efficiency", f"{self.compaction_efficiency:.1f}%"),
            ("Compaction Level", self.classification),
        ]

    @property
    def summary(self):
        return f"Dry density: {self.dry_density:.3f} g/cm³"


# --- Ситовой анализ ---


class GrainSizeInput(TestInput):
    total_mass: float = Field(description="Общая масса пробы, г")
    sieve_4: float = Field(default=0.0, description="Остаток на сите 4.75 мм, г")
    sieve_10: float = Field(default=0.0, description="Остаток на сите 2.0 мм, г")
    sieve_40: float = Field(default=0.0, description="Остаток на сите 0.425 мм, г")
    sieve_200: float = Field(default=0.0, description="Остаток на сите 0.075 мм, г")

    @property
    def retained(self) -> list[float]:
        return [self.sieve_4, self.sieve_10, self.sieve_40, self.sieve_200]


class GrainSizeResult(TestResult):
    cumulative_retained: list[float] = Field(description="Полный остаток по ситам, %")
    percent_passing: list[float] = Field(description="Проход по ситам, %")
    gravel: float
    coarse_sand: float
    medium_sand: float
    fine_sand: float
    fines: float
    d10: float
    d30: float
    d60: float
    cu: float = Field(description="Коэффициент неоднородности D60/D10")
    cc: float = Field(description="Коэффициент кривизны D30²/(D60·D10)")
    gradation: str

    @computed_field
    @property
    def sand(self) -> float:
        return self.coarse_sand + self.medium_sand + self.fine_sand

    def rows(self):
        return [
            ("Gravel", f"{self.gravel:.1f}%"),
            ("Coarse Sand", f"{self.coarse_sand:.1f}%"),
            ("Medium Sand", f"{self.medium_sand:.1f}%"),
            ("Fine Sand", f"{self.fine_sand:.1f}%"),
            ("Fines (Silt + Clay)", f"{self.fines:.1f}%"),
            ("D10", f"{self.d10:.3f} mm"),
            ("D30", f"{self.d30:.3f} mm"),
            ("D60", f"{self.d60:.3f} mm"),
            ("Cu", f"{self.cu:.2f}"),
            ("Cc", f"{self.cc:.2f}"),
            ("Gradation", self.gradation),
            ("Classification", self.classification),
        ]

    @property
    def summary(self):
        return f"Primary classification: {self.classification}"


# --- Фильтрация ---


class PermeabilityInput(TestInput):
    head_difference: float = Field(description="Разность напоров h, см")
    length: float = Field(description="Длина образца L, см")
    area: float = Field(description="Площадь сечения A, см²")
    discharge: float = Field(description="Объём профильтровавшейся воды Q, см³")
    time: float = Field(description="Время t, с")


class PermeabilityResult(TestResult):
    permeability: float = Field(description="k, см/с")
    velocity: float = Field(description="v = Q/(A·t), см/с")
    hydraulic_gradient: float = Field(description="i = h/L")
    soil_type: str
    formula: str = "k = (Q × L) / (A × h × t)"
    substitution: str

    def rows(self):
        return [
            ("Coefficient of Permeability", f"{fmt_exp(self.permeability)} cm/s"),
            ("Seepage Velocity", f"{self.velocity:.6f} cm/s"),
            ("Hydraulic Gradient", f"{self.hydraulic_gradient:.4f}"),
            ("Classification", self.classification),
            ("Typical Soil", self.soil_type),
        ]

    @property
    def summary(self):
        return f"Coefficient of permeability: {fmt_exp(self.permeability)} cm/s"


# --- Консолидация ---


class ConsolidationTimeInput(TestInput):
    """Режим «время–осадка»."""

    initial_height: float = Field(description="Начальная высота H0, мм")
    final_height: float = Field(description="Конечная высота Hf, мм")
    initial_void_ratio: float = Field(description="Начальный коэффициент пористости e0")
    pressure: float = Field(description="Давление p, кПа")
    time_90: float = Field(description="Время 90 % консолидации t90, мин")


class ConsolidationTimeResult(TestResult):
    total_settlement: float = Field(description="ΔH, мм")
    strain: float = Field(description="ε, %")
    compression_ratio: float
    final_void_ratio: float
    volume_compressibility: float = Field(description="mv, м²/кН")
    consolidation_coefficient: float = Field(description="cv, мм²/мин")
    formula: str = "mv = Δe / (Δp × (1 + e₀))"

    def rows(self):
        return [
            ("Total Settlement", f"{self.total_settlement:.3f} mm"),
            ("Vertical Strain", f"{self.strain:.2f}%"),
            ("Compression Ratio", f"{self.compression_ratio:.4f}"),
            ("Final Void Ratio", f"{self.final_void_ratio:.3f}"),
            ("Coefficient of Volume Compressibility (mv)", f"{fmt_exp(self.volume_compressibility)} m²/kN"),
            ("Coefficient of Consolidation (cv)", f"{self.consolidation_coefficient:.4f} mm²/min"),
            ("Compressibility", self.classification),
        ]

    @property
    def summary(self):
        return f"Total settlement: {self.total_settlement:.3f} mm"


class ConsolidationPressureInput(TestInput):
    """Режим «приращение давления»."""

    initial_void_ratio: float = Field(description="Начальный коэффициент пористости e0")
    initial_pressure: float = Field(description="Начальное давление p0, кПа")
    final_pressure: float = Field(description="Конечное давление pf, кПа")
    compression_index: float = Field(description="Индекс компрессии Cc")


class ConsolidationPressureResult(TestResult):
    void_ratio_change: float = Field(description="Δe = Cc·log10(pf/p0)")
    final_void_ratio: float
    settlement_percent: float = Field(description="Δe / (1 + e0), %")
    compressibility_coefficient: float = Field(description="av = Δe/Δp, м²/кН")
    volume_compressibility: float = Field(description="mv = av/(1 + e0), м²/кН")
    formula: str = "Δe = Cc × log₁₀(pf / p₀)"

    def rows(self):
        return [
            ("Change in Void Ratio (Δe)", f"{self.void_ratio_change:.4f}"),
            ("Final Void Ratio", f"{self.final_void_ratio:.4f}"),
            ("Settlement", f"{self.settlement_percent:.2f}%"),
            ("Coefficient of Compressibility (av)", f"{fmt_exp(self.compressibility_coefficient)} m²/kN"),
            ("Coefficient of Volume Compressibility (mv)", f"{fmt_exp(self.volume_compressibility)} m²/kN"),
            ("Compressibility", self.classification),
        ]

    @property
    def summary(self):
        return f"Settlement: {self.settlement_percent:.2f}%"


# --- Прямой сдвиг ---


class ShearStrengthInput(TestInput):
    normal_stress_1: float = Field(description="σ1, кПа")
    shear_stress_1: float = Field(description="τ1, кПа")
    normal_stress_2: float = Field(description="σ2, кПа")
    shear_stress_2: float = Field(description="τ2, кПа")
    normal_stress_3: float = Field(description="σ3, кПа")
    shear_stress_3: float = Field(description="τ3, кПа")

    @property
    def pairs(self) -> list[tuple[float, float]]:
        return [
            (self.normal_stress_1, self.shear_stress_1),
            (self.normal_stress_2, self.shear_stress_2),
            (self.normal_stress_3, self.shear_stress_3),
        ]


class ShearStrengthResult(TestResult):
    cohesion: float = Field(ge=0, description="c, кПа")
    friction_angle: float = Field(description="φ, °")
    tan_phi: float
    bearing_capacity: str
    test_points: list[ChartPoint]
    formula: str = "τ = c + σ × tan(φ)"

    def rows(self):
        return [
            ("Cohesion (c)", f"{self.cohesion:.2f} kPa"),
            ("Friction Angle (φ)", f"{self.friction_angle:.1f}°"),
            ("tan φ", f"{self.tan_phi:.3f}"),
            ("Soil Type", self.classification),
            ("Bearing Capacity", self.bearing_capacity),
        ]

    @property
    def summary(self):
        return f"φ = {self.friction_angle:.1f}°, c = {self.cohesion:.2f} kPa"


# --- Удельный вес частиц ---


class SpecificGravityInput(TestInput):
    soil_mass: float = Field(description="Масса сухого грунта Ms, г")
    pycnometer_mass: float = Field(description="Масса пикнометра Mp, г")
    pycnometer_water_mass: float = Field(description="Масса пикнометра с водой Mpw, г")
    pycnometer_soil_water_mass: float = Field(description="Масса пикнометра с грунтом и водой Mpsw, г")
    temperature: float = Field(default=tables.REFERENCE_TEMPERATURE, description="Температура, °C")


class SpecificGravityResult(TestResult):
    specific_gravity: float = Field(description="Gs")
    correction_factor: float = Field(description="K")
    water_mass: float = Field(description="Mpw − Mp, г")
    water_displaced: float = Field(description="Ms + Mpw − Mpsw, г")
    volume_solids: float = Field(description="см³")
    density_solids: float = Field(description="г/см³")
    soil_origin: str

    def rows(self):
        return [
            ("Specific Gravity (Gs)", f"{self.specific_gravity:.3f}"),
            ("Temperature Correction (K)", f"{self.correction_factor:.4f}"),
            ("Mass of Water", f"{self.water_mass:.2f} g"),
            ("Water Displaced", f"{self.water_displaced:.2f} g"),
            ("Volume of Solids", f"{self.volume_solids:.2f} cm³"),
            ("Density of Solids", f"{self.density_solids:.2f} g/cm³"),
            ("Mineral Composition", self.classification),
            ("Soil Origin", self.soil_origin),
        ]

    @property
    def summary(self):
        return f"Specific gravity: {self.specific_gravity:.3f}"


# --- Результат на границе калькулятора ---


@dataclass(frozen=True)
class CalculationOutcome:
    """Результат или ошибка — калькулятор не выбрасывает исключений наружу."""

    test: str
    result: TestResult | None = None
    error: CalculationError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
