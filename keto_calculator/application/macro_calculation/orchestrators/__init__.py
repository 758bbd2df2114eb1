"""Orchestrators for macro calculation."""

from .calorie_intake_orchestrator import (
    CalorieIntakeOrchestrator,
    calculate_calorie_intake,
)

__all__ = ["CalorieIntakeOrchestrator", "calculate_calorie_intake"]
