"""FatGramSolver - back-solve fat grams from calorie targets.

Protein and net carbs are fixed by the profile, so fat is the only
free macronutrient: whatever energy is left in the budget goes to fat.
"""

from ..core import constants
from ..core.ports.calculators import IFatGramSolver
from ..core.value_objects.derived_constants import DerivedConstants
from ..core.value_objects.fat_solution import FatSolution
from ..core.value_objects.person_profile import PersonProfile
from ..core.value_objects.target_level import TargetLevel


def energy_from_macros(
    fat_grams: float, protein_grams: float, net_carb_grams: float
) -> float:
    """Energy in kcal of the given macronutrient grams.

    Example:
        >>> energy_from_macros(30, 80, 30)
        710
    """
    return (
        fat_grams * constants.KCAL_PER_GRAM_FAT
        + protein_grams * constants.KCAL_PER_GRAM_PROTEIN
        + net_carb_grams * constants.KCAL_PER_GRAM_NET_CARBS
    )


def fat_grams_for_calorie_target(
    calorie_target: float, protein_grams: float, net_carb_grams: float
) -> float:
    """Fat grams that fill a calorie target given protein and net carbs.

    Negative when protein and net carbs alone exceed the target.
    """
    protein_kcal = protein_grams * constants.KCAL_PER_GRAM_PROTEIN
    carbs_kcal = net_carb_grams * constants.KCAL_PER_GRAM_NET_CARBS
    fat_kcal = calorie_target - (protein_kcal + carbs_kcal)
    return fat_kcal / constants.KCAL_PER_GRAM_FAT


class FatGramSolver(IFatGramSolver):
    """Solve fat intake for the minimum, maintenance and desirable levels.

    Maintenance and desirable clamp negative fat to 0 and report that the
    carb ceiling exceeds the budget. Minimum never drops below 30 g of fat;
    when it would, its calorie target is recomputed from the 30 g floor.
    """

    def solve_maintenance(
        self, profile: PersonProfile, derived: DerivedConstants
    ) -> FatSolution:
        return self._solve_clamped(
            TargetLevel.MAINTENANCE,
            derived.maintenance_calorie_intake,
            profile,
            derived,
        )

    def solve_minimum(
        self, profile: PersonProfile, derived: DerivedConstants
    ) -> FatSolution:
        protein = derived.long_term_protein_intake_grams
        net_carbs = profile.net_carb_limit_grams

        fat_mass = profile.fat_mass_above(derived.essential_body_fat_percent)
        calorie_target = derived.maintenance_calorie_intake - (
            constants.FAT_MASS_DEFICIT_KCAL * max(0, fat_mass)
        )
        fat_grams = fat_grams_for_calorie_target(
            calorie_target, protein, net_carbs
        )

        if fat_grams < constants.MIN_FAT_GRAMS:
            fat_grams = constants.MIN_FAT_GRAMS
            calorie_target = energy_from_macros(fat_grams, protein, net_carbs)
            return FatSolution(
                level=TargetLevel.MINIMUM,
                calorie_target=calorie_target,
                fat_grams=fat_grams,
                fat_floor_applied=True,
            )

        return FatSolution(
            level=TargetLevel.MINIMUM,
            calorie_target=calorie_target,
            fat_grams=fat_grams,
        )

    def solve_desirable(
        self,
        profile: PersonProfile,
        derived: DerivedConstants,
        adjustment_percent: float,
    ) -> FatSolution:
        maintenance = derived.maintenance_calorie_intake
        calorie_target = maintenance + adjustment_percent * maintenance / 100
        return self._solve_clamped(
            TargetLevel.DESIRABLE, calorie_target, profile, derived
        )

    @staticmethod
    def _solve_clamped(
        level: TargetLevel,
        calorie_target: float,
        profile: PersonProfile,
        derived: DerivedConstants,
    ) -> FatSolution:
        fat_grams = fat_grams_for_calorie_target(
            calorie_target,
            derived.long_term_protein_intake_grams,
            profile.net_carb_limit_grams,
        )
        if fat_grams < 0:
            return FatSolution(
                level=level,
                calorie_target=calorie_target,
                fat_grams=0.0,
                carbs_exceed_budget=True,
            )
        return FatSolution(
            level=level, calorie_target=calorie_target, fat_grams=fat_grams
        )
