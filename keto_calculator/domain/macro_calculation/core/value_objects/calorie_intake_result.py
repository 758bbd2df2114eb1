"""CalorieIntakeResult value object - complete calculation output."""

from dataclasses import dataclass
from typing import Optional

from ..exceptions.domain_errors import RatioUnavailableError
from .derived_constants import DerivedConstants
from .macronutrient_ratio import MacronutrientRatio
from .target_level import TargetLevel
from .warning_flag import WarningFlag


@dataclass(frozen=True)
class CalorieIntakeResult:
    """Macronutrient ratios for the three target levels plus warnings.

    A ratio is ``None`` when its macros carry no energy at all; callers
    must handle that case before formatting.

    Attributes:
        adjustment_percent: Requested deficit (<0) or surplus (>0) in percent
        warnings: Combined warning flags
        minimum: Ratio at the minimum sustainable intake
        maintenance: Ratio at maintenance intake
        desirable: Ratio at the adjusted (desirable) intake
        derived: Per-profile values the result was computed from
        minimum_calorie_intake: Minimum calorie target, kcal/day
        desirable_calorie_intake: Desirable calorie target, kcal/day
    """

    adjustment_percent: float
    warnings: WarningFlag
    minimum: Optional[MacronutrientRatio]
    maintenance: Optional[MacronutrientRatio]
    desirable: Optional[MacronutrientRatio]
    derived: DerivedConstants
    minimum_calorie_intake: float
    desirable_calorie_intake: float

    @property
    def maintenance_calorie_intake(self) -> float:
        return self.derived.maintenance_calorie_intake

    def has_warning(self, flag: WarningFlag) -> bool:
        """Check whether a warning is set."""
        return flag in self.warnings

    def ratio_for(self, level: TargetLevel) -> Optional[MacronutrientRatio]:
        """Get the ratio for a target level, or None if unavailable."""
        return {
            TargetLevel.MINIMUM: self.minimum,
            TargetLevel.MAINTENANCE: self.maintenance,
            TargetLevel.DESIRABLE: self.desirable,
        }[TargetLevel(level)]

    def require(self, level: TargetLevel) -> MacronutrientRatio:
        """Get the ratio for a target level.

        Raises:
            RatioUnavailableError: If the level has no ratio
        """
        ratio = self.ratio_for(level)
        if ratio is None:
            raise RatioUnavailableError(TargetLevel(level).value)
        return ratio
