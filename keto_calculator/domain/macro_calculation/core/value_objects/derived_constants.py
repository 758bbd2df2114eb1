"""DerivedConstants value object - per-profile physiological values."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DerivedConstants:
    """Values derived once from a PersonProfile.

    Attributes:
        basal_metabolic_rate: BMR in kcal/day
        essential_body_fat_percent: Body fat floor for the profile's sex
        non_essential_body_fat_percent: Body fat above the floor (never < 0)
        body_fat_too_low: True when body fat is below the essential floor
        long_term_protein_intake_grams: Daily protein requirement in grams
        maintenance_calorie_intake: Calories to keep weight stable, kcal/day
    """

    basal_metabolic_rate: float
    essential_body_fat_percent: float
    non_essential_body_fat_percent: float
    body_fat_too_low: bool
    long_term_protein_intake_grams: float
    maintenance_calorie_intake: float
