"""Queries for macro calculation."""

from .calculate_calorie_intake import (
    CalculateCalorieIntakeQuery,
    CalculateCalorieIntakeQueryHandler,
    CalculationRequest,
)

__all__ = [
    "CalculateCalorieIntakeQuery",
    "CalculateCalorieIntakeQueryHandler",
    "CalculationRequest",
]
