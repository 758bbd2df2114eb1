"""CalculateCalorieIntakeQuery - run a calculation from raw form fields."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
)

from keto_calculator.domain.macro_calculation.core.exceptions.domain_errors import (  # noqa: E501
    InvalidProfileInputError,
)
from keto_calculator.domain.macro_calculation.core.value_objects import (
    CalorieIntakeResult,
    Gender,
    PersonProfile,
)

from ..orchestrators.calorie_intake_orchestrator import (
    CalorieIntakeOrchestrator,
)

logger = logging.getLogger(__name__)


class CalculationRequest(BaseModel):
    """
    Raw calculator input.

    Numbers may arrive as strings; they are coerced but not range-checked,
    since out-of-range values are clamped by PersonProfile.

    Example:
        >>> from keto_calculator.application.macro_calculation.queries import (
        ...     CalculationRequest,
        ... )
        >>> request = CalculationRequest.model_validate(
        ...     {"gender": "F", "age": "35", "weight": 85, "height": 160,
        ...      "activityLevel": 0, "bodyfat": 30, "netCarbs": 30,
        ...      "calorieAdjustment": -15}
        ... )
        >>> request.to_profile().gender
        <Gender.FEMALE: 'Female'>
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    gender: Gender = Field(Gender.FEMALE, description="Female or Male")
    age: float = Field(..., description="Age in years")
    weight: float = Field(..., description="Weight in kg")
    height: float = Field(..., description="Height in cm")
    activity_level: float = Field(
        ..., alias="activityLevel", description="Activity level 0-1"
    )
    body_fat_percent: float = Field(
        ..., alias="bodyfat", description="Body fat in percent"
    )
    net_carb_limit_grams: float = Field(
        ..., alias="netCarbs", description="Net carbs limit in grams"
    )
    adjustment_percent: float = Field(
        0.0,
        alias="calorieAdjustment",
        description="Calorie deficit (<0) or surplus (>0) in percent",
    )

    @field_validator("gender", mode="before")
    @classmethod
    def coerce_gender(cls, v: Union[Gender, str, int]) -> Gender:
        """Map any raw gender value onto the two supported cases."""
        return Gender.from_value(v)

    def to_profile(self) -> PersonProfile:
        """Build the (clamped) domain profile."""
        return PersonProfile(
            gender=self.gender,
            age=self.age,
            weight=self.weight,
            height=self.height,
            activity_level=self.activity_level,
            body_fat_percent=self.body_fat_percent,
            net_carb_limit_grams=self.net_carb_limit_grams,
        )


@dataclass(frozen=True)
class CalculateCalorieIntakeQuery:
    """Query to calculate macros from raw form fields.

    Attributes:
        fields: Raw field values keyed by form name (``age``, ``weight``,
            ``activityLevel``, ``bodyfat``, ``netCarbs``, ...) or by the
            snake_case attribute names
        adjustment_percent: Overrides ``calorieAdjustment`` in fields
    """

    fields: Dict[str, Any] = field(default_factory=dict)
    adjustment_percent: Optional[Any] = None


class CalculateCalorieIntakeQueryHandler:
    """Handler for CalculateCalorieIntakeQuery.

    Parses the raw fields, builds the profile and runs the orchestrator.
    """

    def __init__(self, orchestrator: Optional[CalorieIntakeOrchestrator] = None):
        self._orchestrator = orchestrator or CalorieIntakeOrchestrator()

    def parse(self, query: CalculateCalorieIntakeQuery) -> CalculationRequest:
        """
        Validate raw fields into a CalculationRequest.

        Raises:
            InvalidProfileInputError: If a field cannot be coerced
        """
        data = dict(query.fields)
        if query.adjustment_percent is not None:
            data.pop("adjustment_percent", None)
            data["calorieAdjustment"] = query.adjustment_percent

        try:
            return CalculationRequest.model_validate(data)
        except ValidationError as e:
            logger.info("Rejected calculator input: %s", e.error_count())
            raise InvalidProfileInputError(
                f"Invalid calculator input: {e}"
            ) from e

    def handle(self, query: CalculateCalorieIntakeQuery) -> CalorieIntakeResult:
        """
        Handle the query.

        Args:
            query: Raw form fields and adjustment

        Returns:
            CalorieIntakeResult for the parsed profile

        Raises:
            InvalidProfileInputError: If a field cannot be coerced
        """
        request = self.parse(query)
        return self._orchestrator.calculate(
            request.to_profile(), request.adjustment_percent
        )
