"""FatSolution value object - fat grams solved for a calorie target."""

from dataclasses import dataclass

from .target_level import TargetLevel


@dataclass(frozen=True)
class FatSolution:
    """Fat intake back-solved for one target level.

    Attributes:
        level: Target level this solution belongs to
        calorie_target: Calorie budget in kcal/day (after any floor correction)
        fat_grams: Fat intake in grams (after clamping)
        carbs_exceed_budget: Net carbs and protein alone exceed the budget
        fat_floor_applied: Fat was raised to the essential fatty acid floor
    """

    level: TargetLevel
    calorie_target: float
    fat_grams: float
    carbs_exceed_budget: bool = False
    fat_floor_applied: bool = False
