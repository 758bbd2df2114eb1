"""EnergyService - protein requirement and maintenance energy."""

import logging
from typing import Optional

from ..core import constants
from ..core.ports.calculators import IBMRCalculator, IEnergyCalculator
from ..core.value_objects.derived_constants import DerivedConstants
from ..core.value_objects.person_profile import PersonProfile
from .bmr_service import BMRService

logger = logging.getLogger(__name__)


def protein_factor(activity_level: float) -> float:
    """Protein grams per kg of lean mass for an activity level.

    Linear from 1.3 g/kg (sedentary, 0) to 2.2 g/kg (very active, 1).
    """
    return (
        constants.PROTEIN_FACTOR_MIN
        + (constants.PROTEIN_FACTOR_MAX - constants.PROTEIN_FACTOR_MIN)
        * activity_level
    )


def activity_multiplier(activity_level: float) -> float:
    """BMR multiplier from the degree-4 activity curve fit.

    Powers go through the C library pow(), which may differ from other
    runtimes in the last bit. Displayed values round well away from that.
    """
    c0, c1, c2, c3, c4 = constants.ACTIVITY_BMR_POLYNOMIAL
    return (
        c0
        + c1 * activity_level
        + c2 * activity_level ** 2
        + c3 * activity_level ** 3
        + c4 * activity_level ** 4
    )


class EnergyService(IEnergyCalculator):
    """Derive the per-profile constants the fat solver works from.

    Steps:
        1. BMR from the profile biometrics
        2. Essential / non-essential body fat split for the profile's sex
        3. Long term protein intake = lean mass × protein factor
        4. Maintenance intake = BMR × activity curve × 1.1
    """

    def __init__(self, bmr_calculator: Optional[IBMRCalculator] = None):
        self._bmr_calculator = bmr_calculator or BMRService()

    def derive(self, profile: PersonProfile) -> DerivedConstants:
        """Derive constants for a profile.

        Args:
            profile: Biometric data

        Returns:
            DerivedConstants: Immutable derived values
        """
        bmr = self._bmr_calculator.calculate(profile)

        essential = profile.gender.essential_body_fat_percent()
        non_essential = profile.body_fat_percent - essential
        body_fat_too_low = non_essential < 0

        protein_grams = profile.lean_mass() * protein_factor(
            profile.activity_level
        )
        maintenance = (
            bmr
            * activity_multiplier(profile.activity_level)
            * constants.MAINTENANCE_BUFFER_FACTOR
        )

        logger.debug(
            "Derived bmr=%.2f protein=%.2fg maintenance=%.2fkcal",
            bmr,
            protein_grams,
            maintenance,
        )

        return DerivedConstants(
            basal_metabolic_rate=bmr,
            essential_body_fat_percent=essential,
            non_essential_body_fat_percent=max(0.0, non_essential),
            body_fat_too_low=body_fat_too_low,
            long_term_protein_intake_grams=protein_grams,
            maintenance_calorie_intake=maintenance,
        )
