"""PersonProfile value object - biometric input of a calculation."""

import logging
import math
from dataclasses import dataclass
from typing import Any

from .. import constants
from .gender import Gender

logger = logging.getLogger(__name__)


def clamp(value: float, minimum: float, maximum: float) -> float:
    """Bound value to [minimum, maximum], inclusive.

    NaN has no position on the range and is replaced by ``minimum``.

    Example:
        >>> clamp(200, 0, 150)
        150
        >>> clamp(-3.5, 0, 100)
        0
    """
    if math.isnan(value):
        return minimum
    return min(max(minimum, value), maximum)


@dataclass(frozen=True)
class PersonProfile:
    """Biometric data for a single macro calculation.

    Numeric fields are silently clamped to their accepted range when the
    profile is built, so a profile is always valid once constructed.

    Attributes:
        gender: Biological sex (raw values are coerced, see Gender.from_value)
        age: Age in years (0-150)
        weight: Body weight in kilograms (0-350)
        height: Height in centimeters (0-250)
        activity_level: Activity level from 0 (sedentary) to 1 (very active)
        body_fat_percent: Body fat percentage (0-100)
        net_carb_limit_grams: Daily net carb ceiling in grams (0-1000)
    """

    gender: Gender
    age: float
    weight: float
    height: float
    activity_level: float
    body_fat_percent: float
    net_carb_limit_grams: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "gender", Gender.from_value(self.gender))
        self._clamp_field("age", constants.AGE_RANGE)
        self._clamp_field("weight", constants.WEIGHT_RANGE)
        self._clamp_field("height", constants.HEIGHT_RANGE)
        self._clamp_field("activity_level", constants.ACTIVITY_LEVEL_RANGE)
        self._clamp_field("body_fat_percent", constants.BODY_FAT_RANGE)
        self._clamp_field("net_carb_limit_grams", constants.NET_CARBS_RANGE)

    def _clamp_field(self, name: str, bounds: "tuple[float, float]") -> None:
        raw: Any = getattr(self, name)
        value = clamp(float(raw), *bounds)
        if value != raw:
            logger.debug("Clamped %s from %r to %r", name, raw, value)
        object.__setattr__(self, name, float(value))

    def lean_mass(self) -> float:
        """Calculate lean body mass.

        Returns:
            float: Weight without fat mass, in kg

        Example:
            >>> PersonProfile("Female", 35, 85, 160, 0, 30, 30).lean_mass()
            59.5
        """
        return (100 - self.body_fat_percent) * self.weight / 100

    def fat_mass_above(self, body_fat_percent: float) -> float:
        """Fat mass in kg above the given body fat percentage.

        Negative when the profile is already below that percentage.
        """
        return (self.body_fat_percent - body_fat_percent) * self.weight / 100
