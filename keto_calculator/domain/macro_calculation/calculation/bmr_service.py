"""BMRService - Basal Metabolic Rate calculation."""

from ..core import constants
from ..core.ports.calculators import IBMRCalculator
from ..core.value_objects.gender import Gender
from ..core.value_objects.person_profile import PersonProfile


class BMRService(IBMRCalculator):
    """Calculate Basal Metabolic Rate with the KetoDiet Buddy equation.

    A Mifflin-St Jeor variant with slightly adjusted weight/age factors.

    Formula:
        Women: BMR = 9.99 × weight(kg) + 6.25 × height(cm) - 4.92 × age - 161
        Men:   BMR = 9.99 × weight(kg) + 6.25 × height(cm) - 4.92 × age + 5

    Any gender that is not female takes the male branch.
    """

    def calculate(self, profile: PersonProfile) -> float:
        """Calculate BMR from profile biometrics.

        Args:
            profile: Biometric data (weight, height, age, gender)

        Returns:
            float: Basal metabolic rate in kcal/day

        Example:
            >>> service = BMRService()
            >>> profile = PersonProfile(Gender.MALE, 35, 85, 160, 0, 20, 30)
            >>> round(service.calculate(profile), 2)
            1681.95
        """
        base = (
            constants.BMR_WEIGHT_FACTOR * profile.weight
            + constants.BMR_HEIGHT_FACTOR * profile.height
            - constants.BMR_AGE_FACTOR * profile.age
        )

        if profile.gender is Gender.FEMALE:
            return base + constants.BMR_FEMALE_OFFSET
        # Male and any unrecognised gender
        return base + constants.BMR_MALE_OFFSET
