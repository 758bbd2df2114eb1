"""Calculation services for macro calculation."""

from .bmr_service import BMRService
from .energy_service import EnergyService
from .fat_solver import (
    FatGramSolver,
    energy_from_macros,
    fat_grams_for_calorie_target,
)
from .ratio_builder import RatioBuilder
from .warning_service import WarningEvaluator

__all__ = [
    "BMRService",
    "EnergyService",
    "FatGramSolver",
    "RatioBuilder",
    "WarningEvaluator",
    "energy_from_macros",
    "fat_grams_for_calorie_target",
]
