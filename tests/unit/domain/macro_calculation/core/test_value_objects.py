"""Unit tests for macro calculation value objects."""

import math

import pytest

from keto_calculator.domain.macro_calculation.core.exceptions.domain_errors import (  # noqa: E501
    RatioUnavailableError,
)
from keto_calculator.domain.macro_calculation.core.value_objects import (
    CalorieIntakeResult,
    DerivedConstants,
    Gender,
    MacronutrientRatio,
    PersonProfile,
    TargetLevel,
    WarningFlag,
    clamp,
)


class TestClamp:
    """Test the clamp helper."""

    def test_value_inside_range_unchanged(self):
        assert clamp(35, 0, 150) == 35

    def test_value_above_range(self):
        assert clamp(200, 0, 150) == 150

    def test_value_below_range(self):
        assert clamp(-5, 0, 100) == 0

    def test_bounds_are_inclusive(self):
        assert clamp(0, 0, 1) == 0
        assert clamp(1, 0, 1) == 1

    def test_nan_becomes_minimum(self):
        assert clamp(float("nan"), 0, 350) == 0

    def test_infinity_clamps_to_bounds(self):
        assert clamp(math.inf, 0, 250) == 250
        assert clamp(-math.inf, 0, 250) == 0


class TestGender:
    """Test Gender enum."""

    def test_from_value_accepts_members(self):
        assert Gender.from_value(Gender.FEMALE) is Gender.FEMALE
        assert Gender.from_value(Gender.MALE) is Gender.MALE

    def test_from_value_accepts_names_any_case(self):
        assert Gender.from_value("female") is Gender.FEMALE
        assert Gender.from_value("MALE") is Gender.MALE
        assert Gender.from_value(" Female ") is Gender.FEMALE

    def test_from_value_accepts_short_forms_and_codes(self):
        assert Gender.from_value("F") is Gender.FEMALE
        assert Gender.from_value("m") is Gender.MALE
        assert Gender.from_value(0) is Gender.FEMALE
        assert Gender.from_value(1) is Gender.MALE

    def test_unrecognised_value_falls_back_to_male(self):
        assert Gender.from_value("unknown") is Gender.MALE
        assert Gender.from_value(7) is Gender.MALE
        assert Gender.from_value(None) is Gender.MALE

    def test_bmr_offset(self):
        assert Gender.FEMALE.bmr_offset() == -161
        assert Gender.MALE.bmr_offset() == 5

    def test_essential_body_fat(self):
        assert Gender.FEMALE.essential_body_fat_percent() == 8
        assert Gender.MALE.essential_body_fat_percent() == 3


class TestPersonProfile:
    """Test PersonProfile construction and clamping."""

    def test_values_in_range_kept(self, reference_profile):
        assert reference_profile.gender is Gender.FEMALE
        assert reference_profile.age == 35
        assert reference_profile.weight == 85
        assert reference_profile.height == 160
        assert reference_profile.activity_level == 0
        assert reference_profile.body_fat_percent == 30
        assert reference_profile.net_carb_limit_grams == 30

    def test_out_of_range_values_are_clamped(self):
        profile = PersonProfile(
            gender="Male",
            age=200,
            weight=400,
            height=-10,
            activity_level=1.5,
            body_fat_percent=120,
            net_carb_limit_grams=5000,
        )

        assert profile.gender is Gender.MALE
        assert profile.age == 150
        assert profile.weight == 350
        assert profile.height == 0
        assert profile.activity_level == 1
        assert profile.body_fat_percent == 100
        assert profile.net_carb_limit_grams == 1000

    def test_clamped_profile_equals_boundary_profile(self):
        over = PersonProfile(Gender.MALE, 200, 80, 180, 0.5, 15, 20)
        boundary = PersonProfile(Gender.MALE, 150, 80, 180, 0.5, 15, 20)

        assert over == boundary

    def test_nan_field_replaced_by_minimum(self):
        profile = PersonProfile(Gender.FEMALE, float("nan"), 60, 165, 0.2, 25, 20)

        assert profile.age == 0

    def test_raw_gender_is_coerced(self):
        profile = PersonProfile("f", 30, 60, 165, 0.2, 25, 20)

        assert profile.gender is Gender.FEMALE

    def test_profile_is_immutable(self, reference_profile):
        with pytest.raises(AttributeError):
            reference_profile.age = 40

    def test_lean_mass(self, reference_profile):
        assert reference_profile.lean_mass() == 59.5

    def test_fat_mass_above(self, reference_profile):
        assert reference_profile.fat_mass_above(8) == pytest.approx(18.7)
        assert reference_profile.fat_mass_above(40) < 0


class TestWarningFlag:
    """Test WarningFlag combination."""

    def test_none_is_falsy(self):
        assert not WarningFlag.NONE
        assert WarningFlag.NONE.members() == []

    def test_flags_combine(self):
        flags = WarningFlag.HIGH_CARBS | WarningFlag.LOW_BODYFAT

        assert WarningFlag.HIGH_CARBS in flags
        assert WarningFlag.LOW_BODYFAT in flags
        assert WarningFlag.LOW_CALORIES not in flags

    def test_members_in_declaration_order(self):
        flags = WarningFlag.HIGH_CARBS | WarningFlag.LOW_BODYFAT

        assert flags.members() == [WarningFlag.LOW_BODYFAT, WarningFlag.HIGH_CARBS]

    def test_bit_values_are_stable(self):
        assert WarningFlag.LOW_BODYFAT.value == 1
        assert WarningFlag.LOW_FATGRAMS.value == 2
        assert WarningFlag.LOW_CALORIES.value == 4
        assert WarningFlag.HIGH_CARBS.value == 8

    def test_combining_same_flag_twice_is_idempotent(self):
        flags = WarningFlag.HIGH_CARBS | WarningFlag.HIGH_CARBS

        assert flags == WarningFlag.HIGH_CARBS


def _ratio(energy: int) -> MacronutrientRatio:
    return MacronutrientRatio(
        energy=energy,
        grams_fat=30.0,
        grams_protein=80.0,
        grams_net_carbs=30.0,
        energy_fat=270,
        energy_protein=320,
        energy_net_carbs=120,
        perc_energy_fat=38,
        perc_energy_protein=45,
        perc_energy_net_carbs=17,
    )


class TestCalorieIntakeResult:
    """Test CalorieIntakeResult accessors."""

    def setup_method(self):
        """Set up a result with an unavailable maintenance ratio."""
        self.derived = DerivedConstants(
            basal_metabolic_rate=1500.0,
            essential_body_fat_percent=8,
            non_essential_body_fat_percent=20.0,
            body_fat_too_low=False,
            long_term_protein_intake_grams=80.0,
            maintenance_calorie_intake=1800.0,
        )
        self.result = CalorieIntakeResult(
            adjustment_percent=-10,
            warnings=WarningFlag.HIGH_CARBS,
            minimum=_ratio(710),
            maintenance=None,
            desirable=_ratio(1620),
            derived=self.derived,
            minimum_calorie_intake=710.0,
            desirable_calorie_intake=1620.0,
        )

    def test_ratio_for_levels(self):
        assert self.result.ratio_for(TargetLevel.MINIMUM).energy == 710
        assert self.result.ratio_for(TargetLevel.MAINTENANCE) is None
        assert self.result.ratio_for("desirable").energy == 1620

    def test_require_returns_ratio(self):
        assert self.result.require(TargetLevel.DESIRABLE).energy == 1620

    def test_require_missing_ratio_raises(self):
        with pytest.raises(RatioUnavailableError, match="maintenance"):
            self.result.require(TargetLevel.MAINTENANCE)

    def test_has_warning(self):
        assert self.result.has_warning(WarningFlag.HIGH_CARBS)
        assert not self.result.has_warning(WarningFlag.LOW_CALORIES)

    def test_maintenance_calorie_intake_from_derived(self):
        assert self.result.maintenance_calorie_intake == 1800.0
