"""WarningEvaluator - flag implausible or unsafe calculation results."""

import logging
from typing import Optional

from ..core import constants
from ..core.value_objects.derived_constants import DerivedConstants
from ..core.value_objects.fat_solution import FatSolution
from ..core.value_objects.macronutrient_ratio import MacronutrientRatio
from ..core.value_objects.warning_flag import WarningFlag

logger = logging.getLogger(__name__)


class WarningEvaluator:
    """Combine independent warning checks into one flag set.

    Checks run in a fixed order and never short-circuit each other:
        1. LOW_BODYFAT: body fat below the essential floor
        2. HIGH_CARBS: maintenance or desirable fat had to be clamped to 0
        3. LOW_FATGRAMS: desirable fat intake below 30 g
        4. LOW_CALORIES: desirable intake below 1200 kcal
    """

    def evaluate(
        self,
        derived: DerivedConstants,
        maintenance: FatSolution,
        desirable: FatSolution,
        desirable_ratio: Optional[MacronutrientRatio],
    ) -> WarningFlag:
        """Evaluate warnings for a calculation.

        Args:
            derived: Per-profile derived constants
            maintenance: Fat solution at maintenance level
            desirable: Fat solution at desirable level
            desirable_ratio: Rounded desirable ratio, None if unavailable

        Returns:
            WarningFlag: Combined flags, WarningFlag.NONE if all good
        """
        warnings = WarningFlag.NONE

        if derived.body_fat_too_low:
            warnings |= WarningFlag.LOW_BODYFAT

        if maintenance.carbs_exceed_budget:
            warnings |= WarningFlag.HIGH_CARBS
        if desirable.carbs_exceed_budget:
            warnings |= WarningFlag.HIGH_CARBS

        desirable_fat = (
            desirable_ratio.grams_fat
            if desirable_ratio is not None
            else desirable.fat_grams
        )
        if desirable_fat < constants.MIN_FAT_GRAMS:
            warnings |= WarningFlag.LOW_FATGRAMS

        if desirable.calorie_target < constants.MIN_SAFE_CALORIES:
            warnings |= WarningFlag.LOW_CALORIES

        if warnings:
            logger.debug("Calculation warnings: %s", warnings)
        return warnings
