"""WarningFlag value object - combinable calculation warnings."""

from enum import Flag
from typing import List


class WarningFlag(Flag):
    """Conditions that make a calculated diet implausible or unsafe.

    Members combine with ``|``; ``WarningFlag.NONE`` means no warning.
    Bit values are stable so combined flags can be stored as integers.
    """

    NONE = 0
    LOW_BODYFAT = 1 << 0  # body fat below the essential floor
    LOW_FATGRAMS = 1 << 1  # desirable fat intake below 30 g
    LOW_CALORIES = 1 << 2  # desirable intake below 1200 kcal
    HIGH_CARBS = 1 << 3  # net carbs leave no room for fat

    def members(self) -> List["WarningFlag"]:
        """List the single warnings set in this flag, in declaration order.

        Example:
            >>> (WarningFlag.HIGH_CARBS | WarningFlag.LOW_BODYFAT).members()
            [<WarningFlag.LOW_BODYFAT: 1>, <WarningFlag.HIGH_CARBS: 8>]
        """
        return [flag for flag in WarningFlag if flag and flag in self]
