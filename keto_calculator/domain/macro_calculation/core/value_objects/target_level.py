"""TargetLevel value object - the three calorie targets."""

from enum import Enum


class TargetLevel(str, Enum):
    """Calorie target levels produced by a calculation.

    - MINIMUM: lowest sustainable intake given the non-essential fat mass
    - MAINTENANCE: intake that keeps weight stable
    - DESIRABLE: maintenance adjusted by the caller's deficit/surplus
    """

    MINIMUM = "minimum"
    MAINTENANCE = "maintenance"
    DESIRABLE = "desirable"
