"""Unit tests for EnergyService."""

from fractions import Fraction

import pytest

from keto_calculator.domain.macro_calculation.calculation.energy_service import (
    EnergyService,
    activity_multiplier,
    protein_factor,
)
from keto_calculator.domain.macro_calculation.core import constants
from keto_calculator.domain.macro_calculation.core.ports.calculators import (
    IBMRCalculator,
)
from keto_calculator.domain.macro_calculation.core.value_objects import (
    Gender,
    PersonProfile,
)


class FixedBMR(IBMRCalculator):
    """BMR calculator returning a fixed value."""

    def __init__(self, value: float):
        self.value = value

    def calculate(self, profile: PersonProfile) -> float:
        return self.value


class TestProteinFactor:
    """Test protein factor interpolation."""

    def test_sedentary(self):
        assert protein_factor(0) == 1.3

    def test_very_active(self):
        assert protein_factor(1) == pytest.approx(2.2)

    def test_midpoint(self):
        assert protein_factor(0.5) == pytest.approx(1.75)


class TestActivityMultiplier:
    """Test the activity curve fit."""

    def test_sedentary_is_constant_term(self):
        assert activity_multiplier(0) == 1.0999999999999945

    def test_midpoint(self):
        # 1.1 - 0.2333/2 + 3.8/4 - 5.8667/8 + 3.2/16
        assert activity_multiplier(0.5) == pytest.approx(1.4)

    def test_very_active(self):
        assert activity_multiplier(1) == pytest.approx(2.0)

    @pytest.mark.parametrize("activity_level", [i / 20 for i in range(21)])
    def test_within_last_bits_of_exact_polynomial(self, activity_level):
        x = Fraction(activity_level)
        exact = sum(
            Fraction(c) * x**n
            for n, c in enumerate(constants.ACTIVITY_BMR_POLYNOMIAL)
        )

        assert activity_multiplier(activity_level) == pytest.approx(
            float(exact), rel=1e-14, abs=0
        )


class TestEnergyService:
    """Test derivation of per-profile constants."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = EnergyService()

    def test_derive_reference_profile(self, reference_profile):
        """Test derived values for the worked example."""
        derived = self.service.derive(reference_profile)

        assert derived.basal_metabolic_rate == pytest.approx(1515.95)
        assert derived.essential_body_fat_percent == 8
        assert derived.non_essential_body_fat_percent == 22
        assert derived.body_fat_too_low is False
        # lean mass 59.5 kg * 1.3 g/kg
        assert derived.long_term_protein_intake_grams == pytest.approx(77.35)
        # 1515.95 * 1.1 * 1.1
        assert derived.maintenance_calorie_intake == pytest.approx(1834.2995)

    def test_body_fat_below_essential_floor(self):
        """Test that low body fat is flagged and the surplus floored at 0."""
        profile = PersonProfile(Gender.MALE, 30, 80, 180, 0.5, 2, 20)

        derived = self.service.derive(profile)

        assert derived.essential_body_fat_percent == 3
        assert derived.non_essential_body_fat_percent == 0
        assert derived.body_fat_too_low is True

    def test_body_fat_at_essential_floor_is_not_too_low(self):
        profile = PersonProfile(Gender.FEMALE, 30, 60, 165, 0.5, 8, 20)

        derived = self.service.derive(profile)

        assert derived.body_fat_too_low is False
        assert derived.non_essential_body_fat_percent == 0

    def test_active_profile(self):
        """Test protein and maintenance for an active male."""
        profile = PersonProfile(Gender.MALE, 30, 80, 180, 0.5, 10, 20)

        derived = self.service.derive(profile)

        # 9.99*80 + 6.25*180 - 4.92*30 + 5
        assert derived.basal_metabolic_rate == pytest.approx(1781.6)
        # lean mass 72 kg * 1.75 g/kg
        assert derived.long_term_protein_intake_grams == pytest.approx(126.0)
        assert derived.maintenance_calorie_intake == pytest.approx(
            1781.6 * 1.4 * 1.1
        )

    def test_uses_injected_bmr_calculator(self, reference_profile):
        service = EnergyService(bmr_calculator=FixedBMR(1000.0))

        derived = service.derive(reference_profile)

        assert derived.basal_metabolic_rate == 1000.0
        assert derived.maintenance_calorie_intake == pytest.approx(1210.0)
