"""
Calculator response schemas.

Pydantic models for the JSON view of a calculation result.
Field aliases follow the camelCase names used by the calculator form.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from keto_calculator.domain.macro_calculation.core.value_objects import (
    CalorieIntakeResult,
    MacronutrientRatio,
)
from keto_calculator.presentation.report import display_round


class MacronutrientRatioModel(BaseModel):
    """JSON view of a MacronutrientRatio."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    energy: int
    grams_fat: float = Field(..., alias="gramsFat")
    grams_protein: float = Field(..., alias="gramsProtein")
    grams_net_carbs: float = Field(..., alias="gramsNetCarbs")
    energy_fat: int = Field(..., alias="energyFat")
    energy_protein: int = Field(..., alias="energyProtein")
    energy_net_carbs: int = Field(..., alias="energyNetCarbs")
    perc_energy_fat: int = Field(..., alias="percEnergyFat")
    perc_energy_protein: int = Field(..., alias="percEnergyProtein")
    perc_energy_net_carbs: int = Field(..., alias="percEnergyNetCarbs")

    @classmethod
    def from_ratio(
        cls, ratio: Optional[MacronutrientRatio]
    ) -> Optional[MacronutrientRatioModel]:
        if ratio is None:
            return None
        return cls(
            energy=ratio.energy,
            grams_fat=ratio.grams_fat,
            grams_protein=ratio.grams_protein,
            grams_net_carbs=ratio.grams_net_carbs,
            energy_fat=ratio.energy_fat,
            energy_protein=ratio.energy_protein,
            energy_net_carbs=ratio.energy_net_carbs,
            perc_energy_fat=ratio.perc_energy_fat,
            perc_energy_protein=ratio.perc_energy_protein,
            perc_energy_net_carbs=ratio.perc_energy_net_carbs,
        )


class CalorieIntakeResponse(BaseModel):
    """
    JSON view of a CalorieIntakeResult.

    ``warnings`` lists warning names; ``warningMask`` keeps the combined
    bit value. A ratio is null when its level carries no energy.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    adjustment: float
    warnings: List[str] = Field(default_factory=list)
    warning_mask: int = Field(0, alias="warningMask")
    bmr: int
    maintenance_calorie_intake: int = Field(..., alias="maintenanceCalorieIntake")
    minimum: Optional[MacronutrientRatioModel] = None
    maintenance: Optional[MacronutrientRatioModel] = None
    desirable: Optional[MacronutrientRatioModel] = None

    @classmethod
    def from_result(cls, result: CalorieIntakeResult) -> CalorieIntakeResponse:
        """Build the response from a calculation result."""
        return cls(
            adjustment=result.adjustment_percent,
            warnings=[flag.name for flag in result.warnings.members()],
            warning_mask=result.warnings.value,
            bmr=display_round(result.derived.basal_metabolic_rate),
            maintenance_calorie_intake=display_round(
                result.derived.maintenance_calorie_intake
            ),
            minimum=MacronutrientRatioModel.from_ratio(result.minimum),
            maintenance=MacronutrientRatioModel.from_ratio(result.maintenance),
            desirable=MacronutrientRatioModel.from_ratio(result.desirable),
        )

    def to_json(self) -> str:
        """Serialize with camelCase keys."""
        return self.model_dump_json(by_alias=True, indent=4)
