"""Value objects for macro calculation domain."""

from .calorie_intake_result import CalorieIntakeResult
from .derived_constants import DerivedConstants
from .fat_solution import FatSolution
from .gender import Gender
from .macronutrient_ratio import MacronutrientRatio
from .person_profile import PersonProfile, clamp
from .target_level import TargetLevel
from .warning_flag import WarningFlag

__all__ = [
    "Gender",
    "PersonProfile",
    "clamp",
    "DerivedConstants",
    "TargetLevel",
    "FatSolution",
    "MacronutrientRatio",
    "WarningFlag",
    "CalorieIntakeResult",
]
