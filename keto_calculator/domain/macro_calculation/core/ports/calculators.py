"""Calculator ports - interfaces for the macro calculation pipeline."""

from abc import ABC, abstractmethod
from typing import Optional

from ..value_objects.derived_constants import DerivedConstants
from ..value_objects.fat_solution import FatSolution
from ..value_objects.macronutrient_ratio import MacronutrientRatio
from ..value_objects.person_profile import PersonProfile


class IBMRCalculator(ABC):
    """Port for BMR calculation."""

    @abstractmethod
    def calculate(self, profile: PersonProfile) -> float:
        """Calculate BMR from a profile.

        Args:
            profile: Biometric data

        Returns:
            float: Basal metabolic rate in kcal/day
        """
        pass


class IEnergyCalculator(ABC):
    """Port for protein and maintenance energy derivation."""

    @abstractmethod
    def derive(self, profile: PersonProfile) -> DerivedConstants:
        """Derive per-profile constants.

        Args:
            profile: Biometric data

        Returns:
            DerivedConstants: BMR, body fat split, protein and maintenance
        """
        pass


class IFatGramSolver(ABC):
    """Port for back-solving fat grams at each target level."""

    @abstractmethod
    def solve_maintenance(
        self, profile: PersonProfile, derived: DerivedConstants
    ) -> FatSolution:
        """Solve fat grams at maintenance intake."""
        pass

    @abstractmethod
    def solve_minimum(
        self, profile: PersonProfile, derived: DerivedConstants
    ) -> FatSolution:
        """Solve fat grams at the minimum sustainable intake."""
        pass

    @abstractmethod
    def solve_desirable(
        self,
        profile: PersonProfile,
        derived: DerivedConstants,
        adjustment_percent: float,
    ) -> FatSolution:
        """Solve fat grams at the adjusted intake."""
        pass


class IRatioBuilder(ABC):
    """Port for building macronutrient ratios."""

    @abstractmethod
    def build(
        self, fat_grams: float, protein_grams: float, net_carb_grams: float
    ) -> Optional[MacronutrientRatio]:
        """Build a ratio from macro grams.

        Returns:
            Optional[MacronutrientRatio]: None when total energy is not positive
        """
        pass
