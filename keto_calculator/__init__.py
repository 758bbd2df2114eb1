"""Ketogenic diet macro calculator.

Computes daily fat, protein and net carb targets at minimum, maintenance
and desirable calorie levels from a person's biometrics.

Example:
    >>> from keto_calculator import Gender, PersonProfile, calculate_calorie_intake
    >>> profile = PersonProfile(Gender.FEMALE, 35, 85, 160, 0, 30, 30)
    >>> calculate_calorie_intake(profile, -15).maintenance.energy
    1834
"""

from keto_calculator.application.macro_calculation.orchestrators import (
    CalorieIntakeOrchestrator,
    calculate_calorie_intake,
)
from keto_calculator.domain.macro_calculation.core.exceptions import (
    InvalidProfileInputError,
    MacroCalculationError,
    RatioUnavailableError,
)
from keto_calculator.domain.macro_calculation.core.value_objects import (
    CalorieIntakeResult,
    DerivedConstants,
    Gender,
    MacronutrientRatio,
    PersonProfile,
    TargetLevel,
    WarningFlag,
)

__version__ = "1.0.0"

__all__ = [
    "calculate_calorie_intake",
    "CalorieIntakeOrchestrator",
    "CalorieIntakeResult",
    "DerivedConstants",
    "Gender",
    "MacronutrientRatio",
    "PersonProfile",
    "TargetLevel",
    "WarningFlag",
    "MacroCalculationError",
    "InvalidProfileInputError",
    "RatioUnavailableError",
]
