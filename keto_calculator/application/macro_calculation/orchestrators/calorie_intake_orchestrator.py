"""CalorieIntakeOrchestrator - runs the macro calculation pipeline."""

import logging
import math
from typing import Optional

import structlog

from keto_calculator.domain.macro_calculation.calculation.energy_service import (  # noqa: E501
    EnergyService,
)
from keto_calculator.domain.macro_calculation.calculation.fat_solver import (
    FatGramSolver,
)
from keto_calculator.domain.macro_calculation.calculation.ratio_builder import (
    RatioBuilder,
)
from keto_calculator.domain.macro_calculation.calculation.warning_service import (  # noqa: E501
    WarningEvaluator,
)
from keto_calculator.domain.macro_calculation.core.ports.calculators import (
    IEnergyCalculator,
    IFatGramSolver,
    IRatioBuilder,
)
from keto_calculator.domain.macro_calculation.core.value_objects import (
    CalorieIntakeResult,
    PersonProfile,
)

# Events go through the stdlib logger, which stays silent until configured
logger = structlog.wrap_logger(logging.getLogger(__name__))


class CalorieIntakeOrchestrator:
    """
    Orchestrates calculation services into a CalorieIntakeResult.

    Flow:
    1. Derive BMR, protein and maintenance intake from the profile
    2. Solve fat grams for maintenance, minimum and desirable levels
    3. Build a macronutrient ratio for each level
    4. Evaluate warnings

    The orchestrator holds no per-call state, so one instance can serve
    any number of calculations.
    """

    def __init__(
        self,
        energy_service: Optional[IEnergyCalculator] = None,
        fat_solver: Optional[IFatGramSolver] = None,
        ratio_builder: Optional[IRatioBuilder] = None,
        warning_evaluator: Optional[WarningEvaluator] = None,
    ):
        self._energy_service = energy_service or EnergyService()
        self._fat_solver = fat_solver or FatGramSolver()
        self._ratio_builder = ratio_builder or RatioBuilder()
        self._warning_evaluator = warning_evaluator or WarningEvaluator()

    def calculate(
        self, profile: PersonProfile, adjustment_percent: float
    ) -> CalorieIntakeResult:
        """
        Calculate macronutrient ratios for all target levels.

        Args:
            profile: Biometric data (already clamped)
            adjustment_percent: Desired deficit (<0) or surplus (>0) in percent

        Returns:
            CalorieIntakeResult with ratios, targets and warnings
        """
        if not math.isfinite(adjustment_percent):
            logger.warning(
                "Non-finite calorie adjustment ignored",
                adjustment_percent=adjustment_percent,
            )
            adjustment_percent = 0.0

        # Step 1: Per-profile constants
        derived = self._energy_service.derive(profile)

        # Step 2: Fat grams per level
        maintenance = self._fat_solver.solve_maintenance(profile, derived)
        minimum = self._fat_solver.solve_minimum(profile, derived)
        desirable = self._fat_solver.solve_desirable(
            profile, derived, adjustment_percent
        )

        # Step 3: Ratios
        protein = derived.long_term_protein_intake_grams
        net_carbs = profile.net_carb_limit_grams
        maintenance_ratio = self._ratio_builder.build(
            maintenance.fat_grams, protein, net_carbs
        )
        minimum_ratio = self._ratio_builder.build(
            minimum.fat_grams, protein, net_carbs
        )
        desirable_ratio = self._ratio_builder.build(
            desirable.fat_grams, protein, net_carbs
        )

        # Step 4: Warnings
        warnings = self._warning_evaluator.evaluate(
            derived, maintenance, desirable, desirable_ratio
        )

        logger.debug(
            "Calorie intake calculated",
            gender=profile.gender.value,
            maintenance_kcal=round(derived.maintenance_calorie_intake, 2),
            minimum_kcal=round(minimum.calorie_target, 2),
            desirable_kcal=round(desirable.calorie_target, 2),
            warnings=[flag.name for flag in warnings.members()],
        )

        return CalorieIntakeResult(
            adjustment_percent=adjustment_percent,
            warnings=warnings,
            minimum=minimum_ratio,
            maintenance=maintenance_ratio,
            desirable=desirable_ratio,
            derived=derived,
            minimum_calorie_intake=minimum.calorie_target,
            desirable_calorie_intake=desirable.calorie_target,
        )


_default_orchestrator = CalorieIntakeOrchestrator()


def calculate_calorie_intake(
    profile: PersonProfile, adjustment_percent: float
) -> CalorieIntakeResult:
    """Run the macro calculation with the default services.

    Example:
        >>> from keto_calculator import Gender, PersonProfile
        >>> profile = PersonProfile(Gender.FEMALE, 35, 85, 160, 0, 30, 30)
        >>> result = calculate_calorie_intake(profile, -15)
        >>> result.desirable.energy
        1559
    """
    return _default_orchestrator.calculate(profile, adjustment_percent)
