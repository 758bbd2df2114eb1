"""Unit test configuration.

Shared profile fixtures for the macro calculation tests.
"""

import pytest

from keto_calculator.domain.macro_calculation.core.value_objects import (
    Gender,
    PersonProfile,
)


@pytest.fixture
def reference_profile() -> PersonProfile:
    """Worked example: 35 y female, 85 kg, 160 cm, 30% body fat, sedentary."""
    return PersonProfile(
        gender=Gender.FEMALE,
        age=35,
        weight=85,
        height=160,
        activity_level=0,
        body_fat_percent=30,
        net_carb_limit_grams=30,
    )
