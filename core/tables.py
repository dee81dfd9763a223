"""Константы и классификационные таблицы лабораторных испытаний грунтов.

Значения по умолчанию — допущения методик (IS 2720 / ASTM), а не результаты
расчёта. Источники:
- IS 2720 (Part 3, 4, 5, 7, 13, 15, 17) — методы испытаний грунтов;
- IS 1498 — классификация грунтов;
- ASTM D4318, D698, D6913, D7928, D854, D2435.
"""

# --- Общие ---

SPECIFIC_GRAVITY_ASSUMED = 2.65  # Gs кварца, принимается при отсутствии испытания
WATER_DENSITY = 1.0  # ρw, г/см³
GRAVITY = 981.0  # g, см/с²
REFERENCE_TEMPERATURE = 27.0  # °C, калибровка по IS 2720

# --- Пластичность (Atterberg) ---

# (верхняя граница PI, классификация, активность); последняя строка — без границы
PLASTICITY_BANDS = (
    (7.0, "Non-plastic (NP)", "Inactive"),
    (17.0, "Low Plasticity (CL/ML)", "Inactive to Normal"),
    (35.0, "Medium Plasticity (CI)", "Normal"),
    (float("inf"), "High Plasticity (CH)", "Active"),
)

A_LINE_SLOPE = 0.73
A_LINE_LL_OFFSET = 20.0
A_LINE_LL_RANGE = (20.0, 100.0, 10.0)  # начало, конец, шаг

# --- Ареометр ---

HYDROMETER_TEMP_CORRECTION = 0.1  # поправка показания (шкала г/л) на 1 °C
HYDROMETER_TEMP_RANGE = (0.0, 100.0)  # °C, область формулы вязкости воды
HYDROMETER_DEPTH_BASE = 10.0  # см
HYDROMETER_DEPTH_PER_READING = 0.5  # см на единицу показания
HYDROMETER_TIME_STOPS = (0.25, 0.5, 1, 2, 4, 8, 15, 30, 60, 120, 240, 480, 1440)  # мин
HYDROMETER_DECAY_RATE = 0.15  # только для графика, не физическая модель

# (нижняя граница диаметра, мм, класс); сравнение строго «больше»
GRAIN_SIZE_BANDS = (
    (0.075, "Sand Size"),
    (0.002, "Silt Size"),
    (0.0, "Clay Size"),
)

# --- Уплотнение (Proctor) ---

MOLD_VOLUME_DEFAULT = 944.0  # см³, стандартная форма Проктора
MAX_DRY_DENSITY_REFERENCE = 2.1  # г/см³
COMPACTION_CURVE_OFFSETS = (-3, -2, -1, 0, 1, 2, 3)
COMPACTION_CURVE_WC_STEP = 2.0  # % влажности на единицу смещения
COMPACTION_CURVE_DROP = 0.05  # снижение ρd на единицу смещения

# (нижняя граница эффективности, %, оценка)
COMPACTION_BANDS = (
    (95.0, "Excellent"),
    (90.0, "Good"),
    (85.0, "Fair"),
    (float("-inf"), "Poor"),
)

# --- Ситовой анализ ---

SIEVE_OPENINGS = (4.75, 2.0, 0.425, 0.075)  # мм: №4, №10, №40, №200
SIEVE_NAMES = ("4.75 mm (No. 4)", "2.0 mm (No. 10)", "0.425 mm (No. 40)", "0.075 mm (No. 200)")

GRAVEL_CU_MIN = 4.0
SAND_CU_MIN = 6.0
CC_RANGE = (1.0, 3.0)

# --- Фильтрация (Darcy) ---

# (нижняя граница k, см/с, класс, типичный грунт); сравнение строго «больше»
PERMEABILITY_BANDS = (
    (1.0, "Very High Permeability", "Clean gravel"),
    (1e-1, "High Permeability", "Clean sand and gravel mixtures"),
    (1e-3, "Medium Permeability", "Clean sands"),
    (1e-5, "Low Permeability", "Fine sands, silty sands"),
    (1e-7, "Very Low Permeability", "Silts, silty clays"),
    (float("-inf"), "Practically Impermeable", "Homogeneous clays"),
)

PERMEABILITY_CHART_STEPS = 10

# --- Консолидация ---

CV_FACTOR_T90 = 0.848  # Tv при U = 90 %
CONSOLIDATION_CHART_STEPS = 20
E_LOG_P_CHART_STEPS = 10

# (нижняя граница mv, м²/кН, сжимаемость) — Carter & Bentley
COMPRESSIBILITY_BANDS = (
    (1.5e-3, "Very High Compressibility"),
    (3e-4, "High Compressibility"),
    (1e-4, "Medium Compressibility"),
    (5e-5, "Low Compressibility"),
    (float("-inf"), "Very Low Compressibility"),
)

# --- Сдвиг (Mohr-Coulomb) ---

# (нижняя граница φ, °, грунт, несущая способность); сравнение строго «больше»
FRICTION_ANGLE_BANDS = (
    (35.0, "Dense Sand/Gravel", "Very High"),
    (30.0, "Medium Dense Sand", "High"),
    (25.0, "Loose Sand/Stiff Clay", "Medium"),
    (15.0, "Soft to Medium Clay", "Low"),
    (float("-inf"), "Very Soft Clay", "Very Low"),
)

SHEAR_ENVELOPE_STEPS = 12
SHEAR_ENVELOPE_EXTENT = 1.5  # доля от максимального σ

# --- Удельный вес частиц (пикнометр) ---

SG_TEMP_COEFFICIENT = 0.0002  # на 1 °C

# (нижняя граница Gs, минеральный состав, происхождение); сравнение строго «больше»
SPECIFIC_GRAVITY_BANDS = (
    (3.0, "Heavy minerals (iron oxides, heavy metals)", "Lateritic or mineral-rich soil"),
    (2.8, "Clay minerals dominant", "Residual clayey soil"),
    (2.6, "Quartz/Feldspar dominant", "Inorganic soil (sand, silt, clay)"),
    (2.0, "Mixed minerals with organics", "Soil with organic matter"),
    (float("-inf"), "High organic content", "Organic soil or peat"),
)

REFERENCE_MATERIALS = (
    ("Quartz", 2.65),
    ("Clay Minerals", 2.70),
    ("Organic Matter", 1.50),
    ("Iron Oxide", 3.80),
)
